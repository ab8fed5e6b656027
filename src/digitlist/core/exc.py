"""
Core exception types for digitlist.core.

These are dependency-free and may be imported by all core modules.
"""

__all__ = [
    "DigitDomainError",
    "DigitIndexError",
    "InvariantViolation",
    "WidthOverflowError",
    "PrecisionCeilingError",
    "ZeroDenominatorError",
    "MultiplicationBudgetError",
]


class DigitDomainError(Exception):
    """Raised when inputs violate the non-negative digit domain or basic preconditions."""
    pass


class DigitIndexError(IndexError):
    """Raised when a logical digit index lies outside the sequence."""
    pass


class InvariantViolation(Exception):
    """Raised when construction or arithmetic would break core invariants."""
    pass


class WidthOverflowError(Exception):
    """Raised when a checked conversion does not fit the requested unsigned width.

    Attributes
    ----------
    value : int
        The (partial) value that overflowed.
    width : int
        The unsigned width in bits that was exceeded.
    """

    def __init__(self, value, width, *, context=None):
        where = f" during {context}" if context else ""
        super().__init__(f"value {value} exceeds u{width}{where}")
        self.value = value
        self.width = width
        self.context = context


class PrecisionCeilingError(WidthOverflowError):
    """Raised when a fraction operand is too large to be reduced exactly at the gcd width."""
    pass


class ZeroDenominatorError(ZeroDivisionError):
    """Raised when a fraction is evaluated or reduced against a zero denominator."""
    pass


class MultiplicationBudgetError(Exception):
    """Raised when repeated-addition multiplication would exceed a caller budget.

    Attributes
    ----------
    required : int
        Number of additions the multiplication needs (digit sum of the right operand).
    budget : int
        The caller-supplied maximum.
    """

    def __init__(self, required, budget):
        super().__init__(
            f"multiplication needs {required} additions, budget is {budget}"
        )
        self.required = required
        self.budget = budget
