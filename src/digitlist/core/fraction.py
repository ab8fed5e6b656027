"""
DigitalFraction: an exact (numerator, denominator) pair of DigitList values.

Alignment notes:
- Construction performs no value validation; a zero denominator is accepted
  and only rejected when the fraction is evaluated or reduced.
- add() forms the common denominator as the raw product of both denominators;
  results are not kept in lowest terms. Call reduce() explicitly.
- reduce() round-trips both operands through a fixed-width unsigned int to
  compute the gcd, so operands must fit that width (PrecisionCeilingError).
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Optional

from .constants import DEFAULT_WIDTH, DEFAULT_OVERFLOW_MODE, OVERFLOW_CHECKED
from .digit_list import DigitList
from .exc import DigitDomainError, PrecisionCeilingError, WidthOverflowError, ZeroDenominatorError

# Debug printing control
DEBUG_FRACTION = False

def _dbg(msg: str) -> None:
    if DEBUG_FRACTION:
        print(msg)


def _require_fraction(x: object, op: str) -> "DigitalFraction":
    if not isinstance(x, DigitalFraction):
        raise DigitDomainError(f"DigitalFraction.{op} requires a DigitalFraction operand, got {type(x).__name__}")
    return x


@dataclass(frozen=True)
class DigitalFraction:
    """Exact rational numerator/denominator over DigitList (not auto-reduced)."""
    numerator: DigitList
    denominator: DigitList

    def __post_init__(self):
        if not isinstance(self.numerator, DigitList) or not isinstance(self.denominator, DigitList):
            raise DigitDomainError("DigitalFraction operands must be DigitList values")

    # ------------- constructors -------------

    @classmethod
    def from_integers(cls, numerator: int, denominator: int) -> "DigitalFraction":
        return cls(DigitList.from_integer(numerator), DigitList.from_integer(denominator))

    # ------------- predicates -------------

    def is_zero(self) -> bool:
        return self.numerator.is_zero()

    # ------------- comparisons (structural) -------------

    def _cmp_core(self, other: "DigitalFraction") -> int:
        # (numerator, denominator) order, not rational value.
        k1 = (self.numerator, self.denominator)
        k2 = (other.numerator, other.denominator)
        return (k1 > k2) - (k1 < k2)

    def __lt__(self, other: "DigitalFraction") -> bool:
        if not isinstance(other, DigitalFraction):
            return NotImplemented
        return self._cmp_core(other) < 0

    def __le__(self, other: "DigitalFraction") -> bool:
        if not isinstance(other, DigitalFraction):
            return NotImplemented
        return self._cmp_core(other) <= 0

    def __gt__(self, other: "DigitalFraction") -> bool:
        if not isinstance(other, DigitalFraction):
            return NotImplemented
        return self._cmp_core(other) > 0

    def __ge__(self, other: "DigitalFraction") -> bool:
        if not isinstance(other, DigitalFraction):
            return NotImplemented
        return self._cmp_core(other) >= 0

    # ------------- arithmetic (digit domain) -------------

    def multiply(self, other: "DigitalFraction") -> "DigitalFraction":
        _require_fraction(other, "multiply")
        return DigitalFraction(
            self.numerator.multiply(other.numerator),
            self.denominator.multiply(other.denominator),
        )

    def divide(self, other: "DigitalFraction") -> "DigitalFraction":
        """Cross-multiply: (a/b) / (c/d) = (a*d) / (b*c)."""
        _require_fraction(other, "divide")
        return DigitalFraction(
            self.numerator.multiply(other.denominator),
            self.denominator.multiply(other.numerator),
        )

    def add(self, other: "DigitalFraction") -> "DigitalFraction":
        """(a/b) + (c/d) = (a*d + b*c) / (b*d), unreduced."""
        _require_fraction(other, "add")
        num = self.numerator.multiply(other.denominator).add(self.denominator.multiply(other.numerator))
        den = self.denominator.multiply(other.denominator)
        return DigitalFraction(num, den)

    def reciprocal(self) -> "DigitalFraction":
        return DigitalFraction(self.denominator, self.numerator)

    def __mul__(self, other: "DigitalFraction") -> "DigitalFraction":
        return self.multiply(other)

    def __truediv__(self, other: "DigitalFraction") -> "DigitalFraction":
        return self.divide(other)

    def __add__(self, other: "DigitalFraction") -> "DigitalFraction":
        return self.add(other)

    # ------------- reduction -------------

    def reduce(self, width: int = DEFAULT_WIDTH) -> "DigitalFraction":
        """Divide numerator and denominator by their gcd (computed at `width` bits).

        Raises PrecisionCeilingError when an operand does not fit `width`, and
        ZeroDenominatorError when both operands are zero (gcd == 0).
        """
        from ..primes import gcd

        if width is None:
            raise DigitDomainError("reduce requires a fixed width")
        try:
            num = self.numerator.to_integer(width, OVERFLOW_CHECKED)
            den = self.denominator.to_integer(width, OVERFLOW_CHECKED)
        except WidthOverflowError as e:
            raise PrecisionCeilingError(e.value, e.width, context="reduce") from e
        g = gcd(num, den)
        _dbg(f"reduce: num={num}, den={den}, gcd={g}")
        if g == 0:
            raise ZeroDenominatorError("cannot reduce 0/0 (gcd is zero)")
        return DigitalFraction.from_integers(num // g, den // g)

    # ------------- conversions -------------

    def to_number(self, width: Optional[int] = DEFAULT_WIDTH, mode: str = DEFAULT_OVERFLOW_MODE) -> int:
        """Integer quotient numerator // denominator after converting both at `width`."""
        num = self.numerator.to_integer(width, mode)
        den = self.denominator.to_integer(width, mode)
        if den == 0:
            raise ZeroDenominatorError(f"to_number: zero denominator (numerator={self.numerator})")
        return num // den

    def as_fraction(self) -> Fraction:
        """Exact Fraction view (unbounded ints); reduced by Fraction itself."""
        num = self.numerator.to_integer(width=None)
        den = self.denominator.to_integer(width=None)
        if den == 0:
            raise ZeroDenominatorError(f"as_fraction: zero denominator (numerator={self.numerator})")
        return Fraction(num, den)

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    def __repr__(self) -> str:
        return f"DigitalFraction({self})"


__all__ = [
    "DigitalFraction",
]
