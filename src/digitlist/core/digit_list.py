"""
DigitList: a non-negative integer stored as an explicit sequence of base-10 digits.

- Physical storage is most-significant digit first.
- Logical indexing is little-endian: seq[0] is the LEAST significant digit,
  i.e. seq[i] == seq.digits[len(seq) - 1 - i]. All arithmetic walks logical
  positions upward.
- Canonical form: no leading zero digit; zero is the empty sequence.
- Values are immutable; every operation returns a new canonical DigitList.

Arithmetic is built from digit-level primitives only (carry propagation,
repeated addition). Native ints appear solely as conversion endpoints, fitted
to an explicit unsigned width (see width.py).

# Alignment notes:
# - multiply() is schoolbook long multiplication by repeated addition; its cost
#   scales with the digit VALUES of the right operand, not just its length.
# - Division is not defined here: divide_as_fraction() builds a DigitalFraction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator, Optional, Tuple

from .constants import RADIX, DEFAULT_WIDTH, DEFAULT_OVERFLOW_MODE
from .digit import Digit
from .exc import (
    DigitDomainError,
    DigitIndexError,
    InvariantViolation,
    MultiplicationBudgetError,
)
from .width import check_mode, check_width, fit_unsigned, require_unsigned

if TYPE_CHECKING:  # pragma: no cover
    from .fraction import DigitalFraction

# Debug printing control
DEBUG_DIGITS = False

def _dbg(msg: str) -> None:
    if DEBUG_DIGITS:
        print(msg)


# ----------------------------
# Internal helpers
# ----------------------------

def _strip_leading_zeros(digits: Iterable[Digit]) -> Tuple[Digit, ...]:
    out = tuple(digits)
    k = 0
    while k < len(out) and out[k] == Digit.ZERO:
        k += 1
    return out[k:]


def _require_digit_list(x: object, op: str) -> "DigitList":
    if not isinstance(x, DigitList):
        raise DigitDomainError(f"DigitList.{op} requires a DigitList operand, got {type(x).__name__}")
    return x


# ----------------------------
# DigitList
# ----------------------------

@dataclass(frozen=True)
class DigitList:
    """Ordered base-10 digits, most significant first (canonical, non-negative)."""
    digits: Tuple[Digit, ...] = ()

    def __post_init__(self):
        digits = tuple(self.digits)
        for d in digits:
            if not isinstance(d, Digit):
                raise DigitDomainError(f"DigitList expects Digit elements, got {d!r}")
        if digits and digits[0] == Digit.ZERO:
            raise InvariantViolation("DigitList must not start with a zero digit; use from_digits() to normalise")
        object.__setattr__(self, "digits", digits)

    # ------------- constructors -------------

    @staticmethod
    def zero() -> "DigitList":
        return DigitList(())

    @staticmethod
    def one() -> "DigitList":
        return DigitList((Digit.ONE,))

    @classmethod
    def from_integer(cls, n: int) -> "DigitList":
        """Split a non-negative int into digits; 0 yields the empty sequence."""
        n = require_unsigned(n, "from_integer input")
        out = []
        while n != 0:
            n, r = divmod(n, RADIX)
            out.append(Digit(r))
        out.reverse()
        return cls(tuple(out))

    @classmethod
    def from_digits(cls, digits: Iterable[object]) -> "DigitList":
        """Build from most-significant-first digit values, stripping leading zeros.

        Each element is validated with Digit.of (ints 0..9 or Digit members).
        """
        return cls(_strip_leading_zeros(Digit.of(d) for d in digits))

    # ------------- conversions -------------

    def to_integer(self, width: Optional[int] = DEFAULT_WIDTH, mode: str = DEFAULT_OVERFLOW_MODE) -> int:
        """Fold digits most-significant first (acc = acc*10 + d) into an unsigned int.

        Every step is fitted to `width` bits under `mode` (checked raises
        WidthOverflowError, wrapping reduces mod 2**width, saturating clamps).
        `width=None` is unbounded.
        """
        check_width(width)
        check_mode(mode)
        acc = 0
        for d in self.digits:
            acc = fit_unsigned(acc * RADIX + d, width, mode, context="to_integer")
        return acc

    def digital_sum(self, width: Optional[int] = DEFAULT_WIDTH, mode: str = DEFAULT_OVERFLOW_MODE) -> int:
        """Sum of all digits, fitted to `width` under `mode` like to_integer."""
        check_width(width)
        check_mode(mode)
        acc = 0
        for d in self.digits:
            acc = fit_unsigned(acc + d, width, mode, context="digital_sum")
        return acc

    # ------------- predicates -------------

    def is_zero(self) -> bool:
        return not self.digits

    def is_palindrome(self) -> bool:
        return self == self.reverse()

    # ------------- sequence protocol -------------

    def __len__(self) -> int:
        return len(self.digits)

    def __iter__(self) -> Iterator[Digit]:
        # Physical order (most significant first).
        return iter(self.digits)

    def __bool__(self) -> bool:
        return bool(self.digits)

    def __getitem__(self, index: int) -> Digit:
        """Logical index: 0 is the least significant digit."""
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"DigitList indices must be int, not {type(index).__name__}")
        n = len(self.digits)
        if index < 0 or index >= n:
            raise DigitIndexError(f"logical digit index {index} out of range for length {n}")
        return self.digits[n - 1 - index]

    def with_digit(self, index: int, digit: object) -> "DigitList":
        """Return a copy with logical position `index` replaced by `digit`."""
        self[index]  # bounds check
        d = Digit.of(digit)
        out = list(self.digits)
        out[len(out) - 1 - index] = d
        return DigitList.from_digits(out)

    # ------------- comparisons -------------

    def _cmp_core(self, other: "DigitList") -> int:
        # Canonical form makes (length, digits) the numeric order.
        k1 = (len(self.digits), self.digits)
        k2 = (len(other.digits), other.digits)
        return (k1 > k2) - (k1 < k2)

    def __lt__(self, other: "DigitList") -> bool:
        if not isinstance(other, DigitList):
            return NotImplemented
        return self._cmp_core(other) < 0

    def __le__(self, other: "DigitList") -> bool:
        if not isinstance(other, DigitList):
            return NotImplemented
        return self._cmp_core(other) <= 0

    def __gt__(self, other: "DigitList") -> bool:
        if not isinstance(other, DigitList):
            return NotImplemented
        return self._cmp_core(other) > 0

    def __ge__(self, other: "DigitList") -> bool:
        if not isinstance(other, DigitList):
            return NotImplemented
        return self._cmp_core(other) >= 0

    # ------------- digit-level transforms -------------

    def reverse(self) -> "DigitList":
        """Reverse the digit order ("123" -> "321").

        Zeros that become leading are dropped ("120" -> "21"), so reversing twice
        only restores values without trailing zeros.
        """
        return DigitList.from_digits(reversed(self.digits))

    def _shifted(self, places: int) -> "DigitList":
        # Multiply by 10**places by appending zeros at the least significant end.
        if not self.digits or places == 0:
            return self
        return DigitList(self.digits + (Digit.ZERO,) * places)

    # ------------- arithmetic (digit domain) -------------

    def add(self, other: "DigitList") -> "DigitList":
        """Schoolbook addition with carry over logical positions."""
        _require_digit_list(other, "add")
        n1, n2 = len(self.digits), len(other.digits)
        out = []
        carry = 0
        i = 0
        while i < n1 or i < n2:
            total = carry
            if i < n1:
                total += self[i]
            if i < n2:
                total += other[i]
            carry, d = divmod(total, RADIX)
            out.append(Digit(d))
            i += 1
        if carry != 0:
            out.append(Digit(carry))
        # Built least significant first.
        out.reverse()
        return DigitList(_strip_leading_zeros(out))

    def multiply(self, other: "DigitList", *, max_additions: Optional[int] = None) -> "DigitList":
        """Long multiplication by repeated addition.

        For each logical position i of `other`, `self` is added other[i] times,
        the partial is shifted by i places and accumulated. The number of
        additions equals other.digital_sum(); `max_additions` caps it.
        """
        _require_digit_list(other, "multiply")
        if max_additions is not None:
            budget = require_unsigned(max_additions, "max_additions")
            required = other.digital_sum(width=None)
            if required > budget:
                raise MultiplicationBudgetError(required, budget)
        result = DigitList.zero()
        for i in range(len(other.digits)):
            partial = DigitList.zero()
            for _ in range(other[i]):
                partial = partial.add(self)
            partial = partial._shifted(i)
            _dbg(f"multiply: position={i}, digit={other[i]}, partial={partial}")
            result = result.add(partial)
        return result

    def power(self, exponent: int) -> "DigitList":
        """Repeated multiplication starting from one; power(0) is one."""
        exponent = require_unsigned(exponent, "exponent")
        result = DigitList.one()
        for k in range(exponent):
            result = result.multiply(self)
            _dbg(f"power: step={k + 1}, result={result}")
        return result

    def divide_as_fraction(self, other: "DigitList") -> "DigitalFraction":
        """Form the exact fraction self/other; no quotient is computed."""
        from .fraction import DigitalFraction

        _require_digit_list(other, "divide_as_fraction")
        return DigitalFraction(self, other)

    # ------------- operator conveniences -------------

    def __add__(self, other: "DigitList") -> "DigitList":
        return self.add(other)

    def __mul__(self, other: "DigitList") -> "DigitList":
        return self.multiply(other)

    def __pow__(self, exponent: int) -> "DigitList":
        return self.power(exponent)

    def __truediv__(self, other: "DigitList") -> "DigitalFraction":
        return self.divide_as_fraction(other)

    # ------------- text / int views -------------

    def __int__(self) -> int:
        return self.to_integer(width=None)

    def __str__(self) -> str:
        if not self.digits:
            return "0"
        return "".join(str(d) for d in self.digits)

    def __repr__(self) -> str:
        return f"DigitList({self})"


__all__ = [
    "DigitList",
]
