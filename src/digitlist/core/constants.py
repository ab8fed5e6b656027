"""
digitlist Core Constants (integer domain)
=========================================

Only integer constants live here. Decimal display helpers live in `fmt.py`.
"""

# NOTE: widths stand in for the native unsigned integer types (u8..u128);
# Python ints are unbounded, so every conversion out of a DigitList is fitted
# to one of these explicitly.

# ---------------------------------------------------------------------------
# Digit domain
# ---------------------------------------------------------------------------

#: Base of the digit representation.
RADIX: int = 10

#: Smallest and largest value a single Digit can hold.
DIGIT_MIN: int = 0
DIGIT_MAX: int = RADIX - 1


# ---------------------------------------------------------------------------
# Unsigned conversion widths
# ---------------------------------------------------------------------------

#: Supported unsigned widths in bits.
SUPPORTED_WIDTHS = (8, 16, 32, 64, 128)

#: Default conversion width (u128).
DEFAULT_WIDTH: int = 128


# ---------------------------------------------------------------------------
# Overflow handling for fixed-width conversions
# ---------------------------------------------------------------------------

OVERFLOW_CHECKED: str = "checked"
OVERFLOW_WRAPPING: str = "wrapping"
OVERFLOW_SATURATING: str = "saturating"

OVERFLOW_MODES = (OVERFLOW_CHECKED, OVERFLOW_WRAPPING, OVERFLOW_SATURATING)

DEFAULT_OVERFLOW_MODE: str = OVERFLOW_CHECKED


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "RADIX",
    "DIGIT_MIN",
    "DIGIT_MAX",
    "SUPPORTED_WIDTHS",
    "DEFAULT_WIDTH",
    "OVERFLOW_CHECKED",
    "OVERFLOW_WRAPPING",
    "OVERFLOW_SATURATING",
    "OVERFLOW_MODES",
    "DEFAULT_OVERFLOW_MODE",
]
