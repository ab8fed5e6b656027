"""Digit-engine demo: arithmetic on explicit base-10 digit sequences.

Scenarios covered:
D1) Addition with carry propagation
D2) Long multiplication by repeated addition (with an optional budget)
D3) Exponentiation by repeated multiplication
D4) Digit transforms: reverse, palindrome, digit sum, logical indexing
D5) Fractions: multiply / divide / add (unreduced) and reduce
D6) Fixed-width conversion: checked, wrapping, saturating
D7) Prime / gcd utilities
"""
from __future__ import annotations

from typing import Callable, List
import argparse
import sys

from digitlist import (
    DigitList,
    DigitalFraction,
    WidthOverflowError,
    MultiplicationBudgetError,
    primes_less_than,
    is_prime,
    gcd,
    reverse_number,
)
from digitlist.core import (
    DEFAULT_WIDTH,
    SUPPORTED_WIDTHS,
    fmt_digits,
    fmt_logical,
    fmt_fraction,
    fraction_to_decimal,
)
import digitlist.core.digit_list as digit_list_mod
import digitlist.core.fraction as fraction_mod
import digitlist.core.fmt as fmt_mod

# ---------- pretty printers ----------

def banner(title: str) -> None:
    print(f"\n=== {title} ===")


def show(label: str, x: DigitList) -> None:
    print(f"  {label:<10} {fmt_digits(x):>24}  (len={len(x)})")


def show_fraction(label: str, f: DigitalFraction, places: int = 6) -> None:
    print(f"  {label:<10} {fmt_fraction(f):>24}  ~ {fraction_to_decimal(f, places)}")


def as_width(x: DigitList, width: int) -> str:
    try:
        return str(x.to_integer(width))
    except WidthOverflowError as e:
        return f"overflow ({e})"


# ---------- scenarios ----------

def scenario_add(width: int) -> None:
    banner("D1) Addition with carry (987654321 + 123456789)")
    a = DigitList.from_integer(987654321)
    b = DigitList.from_integer(123456789)
    c = a + b
    show("a", a)
    show("b", b)
    show("a + b", c)
    print(f"  as u{width}: {as_width(c, width)}")


def scenario_multiply(width: int, budget: int) -> None:
    banner("D2) Multiplication by repeated addition (1234567890 * 9876543210)")
    a = DigitList.from_integer(1234567890)
    b = DigitList.from_integer(9876543210)
    print(f"  additions needed: {b.digital_sum(width=None)}")
    try:
        c = a.multiply(b, max_additions=budget if budget >= 0 else None)
    except MultiplicationBudgetError as e:
        print(f"  multiplication refused: {e}")
        return
    show("a * b", c)
    print(f"  as u{width}: {as_width(c, width)}")


def scenario_power(width: int) -> None:
    banner("D3) Exponentiation (1234567890 ** 2, 2 ** 100)")
    show("x ** 2", DigitList.from_integer(1234567890).power(2))
    p = DigitList.from_integer(2) ** 100
    show("2 ** 100", p)
    print(f"  digit sum of 2**100: {p.digital_sum(width)}")


def scenario_transforms(width: int) -> None:
    banner("D4) Digit transforms (12321, 1230)")
    for n in (12321, 1230):
        x = DigitList.from_integer(n)
        print(f"  {n}: reverse={x.reverse()}, palindrome={x.is_palindrome()}, digit_sum={x.digital_sum(width)}")
        print(f"    logical: {fmt_logical(x)}")
    print(f"  reverse_number(1230) -> {reverse_number(1230)}")


def scenario_fractions(width: int) -> None:
    banner("D5) Fractions (1/2, 2/3)")
    a = DigitalFraction.from_integers(1, 2)
    b = DigitalFraction.from_integers(2, 3)
    show_fraction("a", a)
    show_fraction("b", b)
    show_fraction("a * b", a * b)
    show_fraction("a / b", a / b)
    show_fraction("a + b", a + b)
    show_fraction("12/4 red.", DigitalFraction.from_integers(12, 4).reduce(width))
    show_fraction("(a*b) red.", (a * b).reduce(width))


def scenario_widths(width: int) -> None:
    banner("D6) Fixed-width conversion of 2**70")
    x = DigitList.from_integer(2) ** 70
    show("2 ** 70", x)
    for w in SUPPORTED_WIDTHS:
        try:
            checked = x.to_integer(w)
        except WidthOverflowError as e:
            checked = f"overflow ({e})"
        print(f"  u{w:<4} checked={checked}; wrapping={x.to_integer(w, 'wrapping')}; saturating={x.to_integer(w, 'saturating')}")


def scenario_primes(width: int) -> None:
    banner("D7) Primes and gcd")
    print(f"  primes < 50: {primes_less_than(50)}")
    print(f"  is_prime(97)={is_prime(97)}, is_prime(91)={is_prime(91)}")
    print(f"  gcd(1071, 462)={gcd(1071, 462)}")


#
# -------- scenario registry helpers --------
class Scenario:
    def __init__(self, sid: str, fn: Callable[[], None]):
        self.sid = sid
        self.fn = fn

scenarios: List[Scenario] = []

def add(sid: str, fn: Callable[[], None]) -> None:
    scenarios.append(Scenario(sid, fn))


def _split_ids(raw):
    if not raw:
        return set()
    return {s.strip() for s in raw.split(",") if s.strip()}


# ---------- run scenarios ----------
if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Digit-sequence arithmetic demo")
    parser.add_argument("--only", type=str, default=None, help="Comma-separated scenario ids to run (e.g., D1,D5)")
    parser.add_argument("--skip", type=str, default=None, help="Comma-separated scenario ids to skip")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, choices=SUPPORTED_WIDTHS, help="Unsigned width for conversions")
    parser.add_argument("--budget", type=int, default=-1, help="Max additions for D2 (negative = unbounded)")
    parser.add_argument("--debug", action="store_true", help="Enable DEBUG_* tracing in the digit, fraction and fmt modules")
    parser.add_argument("--list", action="store_true", help="List scenario ids and exit")
    args = parser.parse_args(sys.argv[1:])

    if args.debug:
        digit_list_mod.DEBUG_DIGITS = True
        fraction_mod.DEBUG_FRACTION = True
        fmt_mod.DEBUG_FMT = True

    w = args.width
    add("D1", lambda: scenario_add(w))
    add("D2", lambda: scenario_multiply(w, args.budget))
    add("D3", lambda: scenario_power(w))
    add("D4", lambda: scenario_transforms(w))
    add("D5", lambda: scenario_fractions(w))
    add("D6", lambda: scenario_widths(w))
    add("D7", lambda: scenario_primes(w))

    if args.list:
        for sc in scenarios:
            print(sc.sid)
        sys.exit(0)

    only = _split_ids(args.only)
    skip = _split_ids(args.skip)
    for sc in scenarios:
        if only and sc.sid not in only:
            continue
        if sc.sid in skip:
            continue
        sc.fn()
