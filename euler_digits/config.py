"""Environment-backed configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, TypeVar

from .errors import ConfigurationError

T = TypeVar("T")

REFERENCE_ENV = "EULER_DIGITS_REFERENCE"
LOG_LEVEL_ENV = "EULER_DIGITS_LOG_LEVEL"
LINE_WIDTH_ENV = "EULER_DIGITS_LINE_WIDTH"

DEFAULT_REFERENCE_PATH = "control_e.txt"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LINE_WIDTH = 80

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _coerce(name: str, raw_value: str, *, cast: Callable[[str], T]) -> T:
    try:
        return cast(raw_value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError.invalid_value(name, raw_value, "Failed to cast environment variable") from exc


def env_str(name: str, or_value: Optional[str] = None) -> Optional[str]:
    """Return the stripped value of *name*, or *or_value* when unset or blank."""
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return or_value
    return raw.strip()


def env_int(name: str, or_value: int) -> int:
    raw = env_str(name)
    if raw is None:
        return or_value
    return _coerce(name, raw, cast=int)


@dataclass(frozen=True)
class Settings:
    reference_path: Path
    log_level: str
    line_width: int


def load_settings() -> Settings:
    """Read settings from the environment, falling back to defaults."""
    log_level = env_str(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    if log_level not in _LOG_LEVELS:
        raise ConfigurationError.invalid_value(LOG_LEVEL_ENV, log_level, f"Expected one of {sorted(_LOG_LEVELS)}")

    line_width = env_int(LINE_WIDTH_ENV, DEFAULT_LINE_WIDTH)
    if line_width <= 0:
        raise ConfigurationError.invalid_value(LINE_WIDTH_ENV, line_width, "Must be positive")

    return Settings(
        reference_path=Path(env_str(REFERENCE_ENV, DEFAULT_REFERENCE_PATH)).expanduser(),
        log_level=log_level,
        line_width=line_width,
    )


__all__ = ["Settings", "env_int", "env_str", "load_settings"]
