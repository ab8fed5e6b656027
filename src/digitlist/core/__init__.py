"""
digitlist Core
==============

Unified exports for the digit-domain primitives.
All arithmetic is performed on base-10 digit sequences with explicit carry
propagation; native ints are only conversion endpoints, fitted to an explicit
unsigned width. Decimal helpers are provided *only* for display.

Core exposes Digit, DigitList and DigitalFraction as public API.
"""

# NOTE:
#   DigitList stores digits most-significant first but indexes them
#   least-significant first (seq[0] is the units digit). Every operator in
#   digit_list.py and fraction.py relies on that convention.

# Integer-domain constants
from .constants import (
    RADIX,
    DIGIT_MIN,
    DIGIT_MAX,
    SUPPORTED_WIDTHS,
    DEFAULT_WIDTH,
    OVERFLOW_CHECKED,
    OVERFLOW_WRAPPING,
    OVERFLOW_SATURATING,
    OVERFLOW_MODES,
    DEFAULT_OVERFLOW_MODE,
)

# Fixed-width helpers
from .width import (
    max_unsigned,
    fit_unsigned,
)

# Digit primitives
from .digit import Digit
from .digit_list import DigitList
from .fraction import DigitalFraction

# Formatting helpers (non-core arithmetic)
from .fmt import (
    DEFAULT_FRACTION_PLACES,
    fmt_digits,
    fmt_logical,
    fmt_fraction,
    fraction_to_decimal,
    fmt_dec,
)

# Core exceptions
from .exc import (
    DigitDomainError,
    DigitIndexError,
    InvariantViolation,
    WidthOverflowError,
    PrecisionCeilingError,
    ZeroDenominatorError,
    MultiplicationBudgetError,
)

__all__ = [
    # constants
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
    # width
    "max_unsigned",
    "fit_unsigned",
    # primitives
    "Digit",
    "DigitList",
    "DigitalFraction",
    # fmt
    "DEFAULT_FRACTION_PLACES",
    "fmt_digits",
    "fmt_logical",
    "fmt_fraction",
    "fraction_to_decimal",
    "fmt_dec",
    # exceptions
    "DigitDomainError",
    "DigitIndexError",
    "InvariantViolation",
    "WidthOverflowError",
    "PrecisionCeilingError",
    "ZeroDenominatorError",
    "MultiplicationBudgetError",
]
