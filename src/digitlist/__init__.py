# Top-level API for digitlist (digit-domain).
"""
Top-level API for digitlist (digit-domain).

This module exposes the stable interface:
  - Digit: a single base-10 digit
  - DigitList: a non-negative integer as an explicit digit sequence
  - DigitalFraction: an exact numerator/denominator pair of DigitLists
  - primes_less_than / is_prime / gcd: plain-int numeric utilities

Formatting helpers and fixed-width constants remain under `digitlist.core`.
"""

from __future__ import annotations


from .core import (
    Digit,
    DigitList,
    DigitalFraction,
    DEFAULT_WIDTH,
    DigitDomainError,
    DigitIndexError,
    InvariantViolation,
    WidthOverflowError,
    PrecisionCeilingError,
    ZeroDenominatorError,
    MultiplicationBudgetError,
)
from .primes import primes_less_than, is_prime, gcd, reverse_number

__all__ = [
    # digit-domain types
    "Digit",
    "DigitList",
    "DigitalFraction",
    "DEFAULT_WIDTH",
    # numeric utilities
    "primes_less_than",
    "is_prime",
    "gcd",
    "reverse_number",
    # exceptions
    "DigitDomainError",
    "DigitIndexError",
    "InvariantViolation",
    "WidthOverflowError",
    "PrecisionCeilingError",
    "ZeroDenominatorError",
    "MultiplicationBudgetError",
]
