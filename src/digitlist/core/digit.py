"""
Digit primitive: a closed enumeration of the ten base-10 digit values.

- Construction from an arbitrary value is fallible: `from_value` returns None
  outside 0..9, `of` raises DigitDomainError. Values are never clamped.
- Widening to any supported unsigned width is total and lossless.
- Text form (str and repr) is the single decimal character.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Optional

from .constants import DIGIT_MIN, DIGIT_MAX, DEFAULT_WIDTH
from .exc import DigitDomainError
from .width import check_width


class Digit(IntEnum):
    """A single base-10 digit (0..9)."""

    ZERO = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9

    # ------------- constructors -------------

    @classmethod
    def from_value(cls, value: object) -> Optional["Digit"]:
        """Return the Digit for `value`, or None when it is not an int in 0..9."""
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        if value < DIGIT_MIN or value > DIGIT_MAX:
            return None
        return cls(value)

    @classmethod
    def of(cls, value: object) -> "Digit":
        d = cls.from_value(value)
        if d is None:
            raise DigitDomainError(f"not a base-10 digit: {value!r}")
        return d

    # ------------- conversions -------------

    def to_unsigned(self, width: int = DEFAULT_WIDTH) -> int:
        # 0..9 fits every supported width; only the width itself is validated.
        if width is None:
            raise DigitDomainError("to_unsigned requires an explicit width")
        check_width(width)
        return int(self.value)

    def __str__(self) -> str:
        return str(int(self.value))

    __repr__ = __str__

    def __format__(self, spec: str) -> str:
        return format(int(self.value), spec)


__all__ = [
    "Digit",
]
