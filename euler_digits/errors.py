"""Error types raised by the engine, the reference oracle and configuration."""

from __future__ import annotations


class EulerDigitsError(Exception):
    """Base class for all euler_digits errors."""


class InvalidArgument(EulerDigitsError, ValueError):
    """Raised when a caller passes an unusable argument."""

    def __init__(self, message: str, *, value=None) -> None:
        super().__init__(message)
        self.value = value

    @classmethod
    def non_positive(cls, name: str, value) -> "InvalidArgument":
        """Create error for a value that must be a positive integer."""
        return cls(f"{name} must be a positive integer (received {value!r})", value=value)


class ReferenceUnavailable(EulerDigitsError, RuntimeError):
    """Raised when the reference expansion cannot be read."""

    def __init__(self, message: str, *, path=None) -> None:
        super().__init__(message)
        self.path = path

    @classmethod
    def unreadable(cls, path) -> "ReferenceUnavailable":
        """Create error for a missing or unreadable reference file."""
        return cls(f"Unable to read reference file {str(path)!r}", path=path)

    @classmethod
    def malformed(cls, path, head: str) -> "ReferenceUnavailable":
        """Create error for a reference file that does not start with '2.'."""
        return cls(f"Reference file {str(path)!r} does not start with '2.' (starts with {head!r})", path=path)


class OutOfRange(EulerDigitsError, IndexError):
    """Raised when more (or fewer than one) reference characters are requested than exist."""

    def __init__(self, message: str, *, requested: int, available=None) -> None:
        super().__init__(message)
        self.requested = requested
        self.available = available

    @classmethod
    def non_positive(cls, requested: int) -> "OutOfRange":
        """Create error for a request of zero or fewer characters."""
        return cls(f"Requested length must be positive (received {requested})", requested=requested)

    @classmethod
    def exceeds(cls, requested: int, available: int) -> "OutOfRange":
        """Create error for a request longer than the reference."""
        return cls(
            f"Requested {requested} characters but the reference holds only {available}",
            requested=requested,
            available=available,
        )


class ConfigurationError(EulerDigitsError, RuntimeError):
    """Raised when configuration values are missing or malformed."""

    @classmethod
    def invalid_value(cls, param_name: str, value, reason: str = "") -> "ConfigurationError":
        """Create error for invalid value."""
        msg = f"Invalid value for {param_name}: {value!r}"
        if reason:
            msg += f". {reason}"
        return cls(msg)


__all__ = [
    "ConfigurationError",
    "EulerDigitsError",
    "InvalidArgument",
    "OutOfRange",
    "ReferenceUnavailable",
]
