"""Reference expansion of e used to validate computed digits.

The reference is a plain text file holding "2." followed by the digits of e,
wrapped over any number of lines. Line breaks are not part of the value.
Files can be produced with :func:`write_reference_file`, which evaluates e
with mpmath at a higher working precision than requested.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Optional, Union

import mpmath

from .config import DEFAULT_LINE_WIDTH, Settings, load_settings
from .errors import InvalidArgument, OutOfRange, ReferenceUnavailable

logger = logging.getLogger(__name__)

PREFIX = "2."

# extra significant digits mpmath works with, dropped again after rendering
REFERENCE_GUARD_DIGITS = 20


def reference_expansion(decimal_places: int) -> str:
    """Return "2." and the first ``decimal_places`` digits of e, truncated."""
    if isinstance(decimal_places, bool) or not isinstance(decimal_places, int) or decimal_places <= 0:
        raise InvalidArgument.non_positive("decimal_places", decimal_places)

    with mpmath.workdps(decimal_places + REFERENCE_GUARD_DIGITS):
        # one significant digit for the integer part, half the guard digits as slack
        significant = 1 + decimal_places + REFERENCE_GUARD_DIGITS // 2
        text = mpmath.nstr(mpmath.e, significant, strip_zeros=False)

    return text[: decimal_places + len(PREFIX)]


def write_reference_file(
    path: Union[str, Path],
    decimal_places: int,
    line_width: int = DEFAULT_LINE_WIDTH,
) -> Path:
    """Write the reference expansion to *path*, ``line_width`` characters per line."""
    if isinstance(line_width, bool) or not isinstance(line_width, int) or line_width <= 0:
        raise InvalidArgument.non_positive("line_width", line_width)

    expansion = reference_expansion(decimal_places)
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    lines = [expansion[i : i + line_width] for i in range(0, len(expansion), line_width)]
    target.write_text("\n".join(lines) + "\n", encoding="ascii")

    logger.info("Wrote %d decimal places of e to %s", decimal_places, target)
    return target


def _render(candidate) -> str:
    return candidate if isinstance(candidate, str) else str(candidate)


class ReferenceOracle:
    """Reads prefixes of a reference file and compares computed values against them.

    The longest prefix read so far is kept in memory. It only answers requests
    that are no longer than itself; anything longer goes back to the file.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._cached: Optional[str] = None
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.path)!r})"

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ReferenceOracle":
        settings = settings if settings is not None else load_settings()
        return cls(settings.reference_path)

    @property
    def cached_length(self) -> int:
        cached = self._cached
        return 0 if cached is None else len(cached)

    def fetch(self, length: int) -> str:
        """Return the first ``length`` characters of the reference.

        Raises:
            OutOfRange: ``length`` is not positive or exceeds the reference.
            ReferenceUnavailable: the file is missing, unreadable or malformed.
        """
        if length <= 0:
            raise OutOfRange.non_positive(length)

        cached = self._cached
        if cached is not None and len(cached) >= length:
            return cached[:length]

        text = self._read(length)
        with self._lock:
            if self._cached is None or len(text) > len(self._cached):
                self._cached = text
        return text

    def cache(self, length: int) -> str:
        """Read ``length`` characters ahead of time so later fetches skip the file."""
        text = self.fetch(length)
        logger.debug("Cached %d reference characters from %s", len(text), self.path)
        return text

    def clear_cache(self) -> None:
        with self._lock:
            self._cached = None

    def is_correct(self, candidate) -> bool:
        """Whether *candidate* (a string or an EulerNumber) equals the reference prefix of its length."""
        text = _render(candidate)
        return self.fetch(len(text)) == text

    def first_correct_prefix(self, candidate) -> str:
        """Return the longest leading part of *candidate* that agrees with the reference."""
        text = _render(candidate)
        if not text:
            return ""

        correct = self.fetch(len(text))
        matched = 0
        for computed, expected in zip(text, correct):
            if computed != expected:
                break
            matched += 1
        return text[:matched]

    def _read(self, length: int) -> str:
        parts = []
        total = 0
        try:
            with self.path.open("r", encoding="ascii") as handle:
                for line in handle:
                    chunk = line.rstrip("\r\n")
                    parts.append(chunk)
                    total += len(chunk)
                    if total >= length:
                        break
        except (OSError, UnicodeDecodeError) as exc:
            raise ReferenceUnavailable.unreadable(self.path) from exc

        text = "".join(parts)
        if not text.startswith(PREFIX):
            raise ReferenceUnavailable.malformed(self.path, text[: len(PREFIX)])
        if len(text) < length:
            raise OutOfRange.exceeds(length, len(text))

        logger.debug("Read %d reference characters from %s", length, self.path)
        return text[:length]


__all__ = ["PREFIX", "ReferenceOracle", "reference_expansion", "write_reference_file"]
