"""Euler's number to arbitrary precision with digit-array arithmetic."""

from .engine import EulerNumber, guard_digits_for
from .errors import ConfigurationError, EulerDigitsError, InvalidArgument, OutOfRange, ReferenceUnavailable
from .reference import ReferenceOracle, reference_expansion, write_reference_file

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "EulerDigitsError",
    "EulerNumber",
    "InvalidArgument",
    "OutOfRange",
    "ReferenceOracle",
    "ReferenceUnavailable",
    "guard_digits_for",
    "reference_expansion",
    "write_reference_file",
]
