import pytest

from digitlist import DigitDomainError
from digitlist.primes import primes_less_than, is_prime, gcd, reverse_number


# -----------------------------
# primes_less_than
# -----------------------------

@pytest.mark.parametrize("bound", [0, 1, 2])
def test_primes_less_than_small_bounds_empty(bound):
    assert primes_less_than(bound) == []


def test_primes_less_than_is_strict_and_ascending():
    print("[primes] bound=30 and bound=11 (11 excluded)")
    assert primes_less_than(3) == [2]
    assert primes_less_than(11) == [2, 3, 5, 7]
    assert primes_less_than(30) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
    assert len(primes_less_than(100)) == 25


@pytest.mark.parametrize("bound", [4, 25, 26, 49, 50, 200])
def test_primes_less_than_agrees_with_is_prime(bound):
    got = primes_less_than(bound)
    assert got == sorted(set(got))
    assert got == [n for n in range(bound) if is_prime(n)]


# -----------------------------
# is_prime
# -----------------------------

@pytest.mark.parametrize("n,expected", [(0, False), (1, False), (2, True), (3, True), (4, False), (9, False), (25, False), (97, True), (7919, True), (7921, False)])
def test_is_prime(n, expected):
    assert is_prime(n) is expected


# -----------------------------
# gcd / reverse_number
# -----------------------------

@pytest.mark.parametrize("a,b,expected", [(12, 4, 4), (4, 12, 4), (5, 0, 5), (0, 5, 5), (0, 0, 0), (1071, 462, 21), (17, 5, 1)])
def test_gcd(a, b, expected):
    assert gcd(a, b) == expected


def test_reverse_number():
    assert reverse_number(1230) == 321
    assert reverse_number(12321) == 12321
    assert reverse_number(0) == 0


@pytest.mark.parametrize(
    "call",
    [
        lambda: primes_less_than(-1),
        lambda: is_prime(-7),
        lambda: gcd(-1, 3),
        lambda: gcd(3, 1.5),
        lambda: reverse_number(-10),
    ],
)
def test_negative_or_non_int_inputs_rejected(call):
    with pytest.raises(DigitDomainError):
        call()
