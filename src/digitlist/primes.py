"""
Prime and gcd utilities over plain non-negative ints.

Independent of the digit engine except that DigitalFraction.reduce() uses gcd(),
and reverse_number() routes a native int through a DigitList.
"""

from __future__ import annotations

from math import isqrt
from typing import List

from .core.digit_list import DigitList
from .core.width import require_unsigned


def primes_less_than(bound: int) -> List[int]:
    """All primes strictly below `bound`, ascending.

    Starts from every number in [2, bound) and removes the multiples of each
    surviving divisor; divisors beyond isqrt(bound) cannot remove anything new.
    """
    bound = require_unsigned(bound, "primes_less_than")
    candidates = list(range(2, bound))
    limit = isqrt(bound)
    i = 0
    while i < len(candidates) and candidates[i] <= limit:
        divisor = candidates[i]
        candidates = [x for x in candidates if x % divisor != 0 or x == divisor]
        i += 1
    return candidates


def is_prime(n: int) -> bool:
    """Trial division by 2, then odd divisors up to isqrt(n). 0 and 1 are not prime."""
    n = require_unsigned(n, "is_prime")
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    for divisor in range(3, isqrt(n) + 1, 2):
        if n % divisor == 0:
            return False
    return True


def gcd(a: int, b: int) -> int:
    """Euclid's algorithm; gcd(a, 0) == a."""
    a = require_unsigned(a, "gcd")
    b = require_unsigned(b, "gcd")
    while b != 0:
        a, b = b, a % b
    return a


def reverse_number(n: int) -> int:
    """Reverse the decimal digits of `n` (1230 -> 321) via DigitList."""
    n = require_unsigned(n, "reverse_number")
    return DigitList.from_integer(n).reverse().to_integer(width=None)


__all__ = [
    "primes_less_than",
    "is_prime",
    "gcd",
    "reverse_number",
]
