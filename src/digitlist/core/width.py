"""
Fixed-width unsigned helpers (integer domain).

Python ints never wrap, so native u8..u128 unsigned behaviour is
reproduced here explicitly. Every helper takes the width in bits and an
overflow mode:

- checked: raise WidthOverflowError on overflow.
- wrapping: reduce modulo 2**width (native wraparound).
- saturating: clamp to the width's maximum.

A width of None means unbounded; the mode is then irrelevant.
"""

from __future__ import annotations

from typing import Optional

from .constants import SUPPORTED_WIDTHS, OVERFLOW_MODES, OVERFLOW_CHECKED, OVERFLOW_WRAPPING
from .exc import DigitDomainError, WidthOverflowError


def check_width(width: Optional[int]) -> Optional[int]:
    """Validate a width argument and return it unchanged."""
    if width is None:
        return None
    if isinstance(width, bool) or width not in SUPPORTED_WIDTHS:
        raise DigitDomainError(
            f"unsupported width: {width!r} (expected one of {SUPPORTED_WIDTHS} or None)"
        )
    return width


def require_unsigned(n: object, what: str) -> int:
    """Return `n` if it is a non-negative int (bool excluded), else raise DigitDomainError."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise DigitDomainError(f"{what} must be an int, got {type(n).__name__}")
    if n < 0:
        raise DigitDomainError(f"{what} must be >= 0, got {n}")
    return n


def check_mode(mode: str) -> str:
    if mode not in OVERFLOW_MODES:
        raise DigitDomainError(f"unknown overflow mode: {mode!r} (expected one of {OVERFLOW_MODES})")
    return mode


def max_unsigned(width: int) -> int:
    """Return the largest value representable in `width` unsigned bits."""
    check_width(width)
    return (1 << width) - 1


def fit_unsigned(value: int, width: Optional[int], mode: str = OVERFLOW_CHECKED, *, context: Optional[str] = None) -> int:
    """Fit a non-negative int into `width` bits according to `mode`."""
    if value < 0:
        raise DigitDomainError(f"fit_unsigned expects value >= 0, got {value}")
    if width is None:
        return value
    top = max_unsigned(width)
    check_mode(mode)
    if value <= top:
        return value
    if mode == OVERFLOW_CHECKED:
        raise WidthOverflowError(value, width, context=context)
    if mode == OVERFLOW_WRAPPING:
        return value & top
    return top


__all__ = [
    "check_width",
    "check_mode",
    "require_unsigned",
    "max_unsigned",
    "fit_unsigned",
]
