import pytest
from decimal import Decimal

from digitlist.core import DigitList, DigitalFraction, DigitDomainError, ZeroDenominatorError
from digitlist.core.fmt import (
    fmt_digits,
    fmt_logical,
    fmt_fraction,
    fraction_to_decimal,
    fmt_dec,
)


def _f(num: int, den: int) -> DigitalFraction:
    return DigitalFraction.from_integers(num, den)


# -----------------------------
# fmt_digits / fmt_logical
# -----------------------------

def test_fmt_digits_canonical_text():
    print("[fmt_digits] 1234567890 and zero")
    assert fmt_digits(DigitList.from_integer(1234567890)) == "1234567890"
    assert fmt_digits(DigitList.zero()) == "0"


def test_fmt_logical_lists_least_significant_first():
    s = fmt_logical(DigitList.from_integer(120))
    print("fmt_logical(120) ->", s)
    assert s == "[0]=0 [1]=2 [2]=1"
    assert fmt_logical(DigitList.zero()) == "(empty)"


def test_fmt_helpers_reject_wrong_types():
    with pytest.raises(DigitDomainError):
        fmt_digits(120)  # type: ignore[arg-type]
    with pytest.raises(DigitDomainError):
        fmt_logical(None)  # type: ignore[arg-type]
    with pytest.raises(DigitDomainError):
        fmt_fraction(DigitList.one())  # type: ignore[arg-type]


# -----------------------------
# Fractions
# -----------------------------

def test_fmt_fraction():
    assert fmt_fraction(_f(7, 6)) == "7/6"
    assert fmt_fraction(_f(0, 6)) == "0/6"


def test_fraction_to_decimal_display():
    print("[fraction_to_decimal] 1/3 @6 -> 0.333333; 7/6 @4 -> 1.1667")
    assert fraction_to_decimal(_f(1, 3), 6) == Decimal("0.333333")
    assert fraction_to_decimal(_f(7, 6), 4) == Decimal("1.1667")
    assert fraction_to_decimal(_f(12, 4), 2) == Decimal("3.00")


def test_fraction_to_decimal_errors():
    with pytest.raises(ZeroDenominatorError):
        fraction_to_decimal(_f(1, 0))
    with pytest.raises(DigitDomainError):
        fraction_to_decimal(_f(1, 2), -1)


# -----------------------------
# fmt_dec stability
# -----------------------------

def test_fmt_dec_scientific_formatting():
    s1 = fmt_dec(Decimal("1"))
    s2 = fmt_dec(Decimal("123456"))
    print("fmt_dec(1) ->", s1)
    print("fmt_dec(123456) ->", s2)
    assert s1 == "1.000000000000000000E+0"
    assert s2 == "1.234560000000000000E+5"
    assert fmt_dec(DigitList.from_integer(2**70).to_integer(width=None), places=3) == "1.181E+21"


# -----------------------------
# fraction_to_decimal rounding (single half-even rounding step)
# -----------------------------

@pytest.mark.parametrize(
    "num,den,places,expected",
    [
        (34999, 10000, 0, Decimal("3")),
        (14999999, 10**11, 4, Decimal("0.0001")),
        (35, 10, 0, Decimal("4")),
        (25, 10, 0, Decimal("2")),
        (15, 1000, 2, Decimal("0.02")),
        (2, 3, 3, Decimal("0.667")),
        (0, 7, 3, Decimal("0")),
    ],
)
def test_fraction_to_decimal_rounds_once(num, den, places, expected):
    got = fraction_to_decimal(_f(num, den), places)
    print(f"[fraction_to_decimal-rounding] {num}/{den} @{places} -> {got} (expect {expected})")
    assert got == expected


def test_fraction_to_decimal_keeps_large_integer_part_exact():
    n = 10**40 + 1
    got = fraction_to_decimal(_f(n, 2), 1)
    assert got == Decimal("5000000000000000000000000000000000000000.5")
