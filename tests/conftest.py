from __future__ import annotations

import pytest

# Import project primitives
from digitlist.core import DigitList, DigitalFraction


# -----------------------------
# Test helpers (pure functions)
# -----------------------------

def dl(n: int) -> DigitList:
    """Shorthand: DigitList from a non-negative int."""
    return DigitList.from_integer(n)


def frac(num: int, den: int) -> DigitalFraction:
    return DigitalFraction.from_integers(num, den)


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def big_pair() -> tuple[DigitList, DigitList]:
    return dl(1234567890), dl(9876543210)


@pytest.fixture()
def half() -> DigitalFraction:
    return frac(1, 2)


@pytest.fixture()
def two_thirds() -> DigitalFraction:
    return frac(2, 3)
