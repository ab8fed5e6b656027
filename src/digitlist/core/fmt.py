"""
Formatting helpers and Decimal views (non-core arithmetic).

Core arithmetic works on digits only. Decimal here is used for display
(e.g., tests, logs, the demo script), never to compute results.
"""

from decimal import Decimal, localcontext
from typing import Any

from .exc import DigitDomainError, ZeroDenominatorError
from .digit_list import DigitList
from .fraction import DigitalFraction

# Debug printing control (formatting layer)
DEBUG_FMT = False

def _dbg(msg: str) -> None:
    if DEBUG_FMT:
        print(msg)


#: Default number of fractional places for Decimal fraction views.
DEFAULT_FRACTION_PLACES: int = 18


# ---------------------------------------------------------------------------
# Digit sequences
# ---------------------------------------------------------------------------

def fmt_digits(x: DigitList) -> str:
    """Canonical text: digits most-significant first, "0" for the empty sequence."""
    if not isinstance(x, DigitList):
        raise DigitDomainError("fmt_digits(): expected DigitList")
    return str(x)


def fmt_logical(x: DigitList) -> str:
    """Debug text listing logical positions, least significant first.

      DigitList(120) -> '[0]=0 [1]=2 [2]=1'
    """
    if not isinstance(x, DigitList):
        raise DigitDomainError("fmt_logical(): expected DigitList")
    if x.is_zero():
        return "(empty)"
    return " ".join(f"[{i}]={x[i]}" for i in range(len(x)))


# ---------------------------------------------------------------------------
# Fractions
# ---------------------------------------------------------------------------

def fmt_fraction(f: DigitalFraction) -> str:
    if not isinstance(f, DigitalFraction):
        raise DigitDomainError("fmt_fraction(): expected DigitalFraction")
    return f"{fmt_digits(f.numerator)}/{fmt_digits(f.denominator)}"


def fraction_to_decimal(f: DigitalFraction, places: int = DEFAULT_FRACTION_PLACES) -> Decimal:
    """Decimal value of a fraction rounded half-even to `places` fractional digits (display only)."""
    if not isinstance(f, DigitalFraction):
        raise DigitDomainError("fraction_to_decimal(): expected DigitalFraction")
    if places < 0:
        raise DigitDomainError("fraction_to_decimal(): places must be >= 0")
    num = f.numerator.to_integer(width=None)
    den = f.denominator.to_integer(width=None)
    if den == 0:
        raise ZeroDenominatorError("fraction_to_decimal(): zero denominator")
    _dbg(f"fraction_to_decimal: num={num}, den={den}, places={places}")
    # Exact integer quotient at `places`, rounded half-even once.
    q, r = divmod(num * 10 ** places, den)
    twice = 2 * r
    if twice > den or (twice == den and q % 2 == 1):
        q += 1
    with localcontext() as ctx:
        ctx.prec = len(str(q)) + 1
        return Decimal(q).scaleb(-places)


def fmt_dec(x: Any, places: int = 18) -> str:
    """Format a Decimal (or int) in scientific notation with fixed fractional digits.

      Decimal('1')        -> '1.000000000000000000E+0'
      Decimal('123456')   -> '1.234560000000000000E+5'
    """
    return format(Decimal(x), f".{places}E")


__all__ = [
    "DEFAULT_FRACTION_PLACES",
    "fmt_digits",
    "fmt_logical",
    "fmt_fraction",
    "fraction_to_decimal",
    "fmt_dec",
]
