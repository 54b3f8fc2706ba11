"""Digit-array computation of Euler's number.

The value of e is computed from the series expansion

    e = 1/0! + 1/1! + 1/2! + 1/3! + ...

The first two terms make up the integer part 2, so only the fractional part
is stored: two fixed-length lists of base-10 digits, most significant first.
``term`` holds 1/n! and is divided in place by the next n on every step,
``digits`` accumulates the sum. Both carry a few guard digits beyond the
requested precision to absorb the truncation error of every division.
"""

from __future__ import annotations

import logging
import math
import time

from .errors import InvalidArgument

logger = logging.getLogger(__name__)

BASE10 = 10
HALF = BASE10 // 2
INTEGER_PART = 2


def guard_digits_for(decimal_places: int) -> int:
    """Number of extra working digits kept beyond ``decimal_places``."""
    return max(1, math.ceil(math.log10(decimal_places))) * 2


class EulerNumber:
    """Euler's number computed to ``decimal_places`` digits after the point.

    The computation runs in the constructor. ``str()`` renders the truncated
    expansion; call :meth:`round` first to get the correctly rounded one.
    """

    def __init__(self, decimal_places: int) -> None:
        if isinstance(decimal_places, bool) or not isinstance(decimal_places, int) or decimal_places <= 0:
            raise InvalidArgument.non_positive("decimal_places", decimal_places)

        self.decimal_places = decimal_places
        self.guard_digits = guard_digits_for(decimal_places)
        self.precision = decimal_places + self.guard_digits

        self.integer_part = INTEGER_PART
        self.digits = [0] * self.precision
        self.term = [0] * self.precision
        self.first_non_zero = 0
        self.last_divisor = 2
        self.iterations = 0
        self.rounded = False

        self._calculate()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.decimal_places})"

    def __str__(self) -> str:
        return self.to_string()

    def _calculate(self) -> None:
        started = time.perf_counter()

        # 1/2! = 0.5 is both the first stored term and the first partial sum
        self.digits[0] = HALF
        self.term[0] = HALF
        self.first_non_zero = 0
        n = 2

        while self._non_zero_term():
            n += 1
            self._divide_term(n)
            self._add_term()
            self.iterations += 1

        self.last_divisor = n
        logger.debug(
            "Computed e to %d decimal places (%d guard digits) with %d terms in %.3fs",
            self.decimal_places,
            self.guard_digits,
            self.iterations,
            time.perf_counter() - started,
        )

    def _non_zero_term(self) -> bool:
        """Whether ``term`` still holds a non-zero digit."""
        term = self.term
        for i in range(self.first_non_zero, self.precision):
            if term[i] != 0:
                return True
        return False

    def _divide_term(self, n: int) -> None:
        """Turn 1/(n-1)! into 1/n! by long division, most significant digit first."""
        term = self.term
        carry = 0
        found = False

        for i in range(self.first_non_zero, self.precision):
            term[i], carry = divmod(carry * BASE10 + term[i], n)

            if not found and term[i] > 0:
                found = True
                self.first_non_zero = i

    def _add_term(self) -> None:
        """Add ``term`` into ``digits``, least significant digit first."""
        digits = self.digits
        term = self.term
        first = self.first_non_zero
        carry = 0
        i = self.precision - 1

        # left of first_non_zero the term is zero, only a carry can still change digits
        while i >= 0 and (i >= first or carry):
            current = digits[i] + term[i] + carry
            if current >= BASE10:
                digits[i] = current - BASE10
                carry = 1
            else:
                digits[i] = current
                carry = 0
            i -= 1

        self.integer_part += carry

    def round(self) -> "EulerNumber":
        """Round half up to ``decimal_places`` digits and clear the guard digits.

        Calling it again is a no-op since the guard digits are then all zero.
        """
        digits = self.digits
        i = self.decimal_places

        if digits[i] >= HALF:
            carry = 1
            while carry and i > 0:
                i -= 1
                current = digits[i] + carry
                if current >= BASE10:
                    digits[i] = current - BASE10
                else:
                    digits[i] = current
                    carry = 0
            # only reachable with an all-9 prefix, which e never has
            self.integer_part += carry

        digits[self.decimal_places:] = [0] * self.guard_digits
        self.rounded = True
        return self

    def fractional_digits(self) -> tuple[int, ...]:
        return tuple(self.digits[: self.decimal_places])

    def to_string(self) -> str:
        """Render ``<integer part>.`` followed by exactly ``decimal_places`` digits."""
        fraction = "".join(map(str, self.digits[: self.decimal_places]))
        return f"{self.integer_part}.{fraction}"


__all__ = ["BASE10", "EulerNumber", "guard_digits_for"]
