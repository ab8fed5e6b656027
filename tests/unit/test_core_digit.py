import pytest

from digitlist.core import Digit, DigitDomainError


# -----------------------------
# Construction
# -----------------------------

@pytest.mark.parametrize("value", list(range(10)))
def test_from_value_total_on_digits(value):
    d = Digit.from_value(value)
    print(f"[digit-from_value] {value} -> {d!r}")
    assert d is not None
    assert int(d) == value
    assert Digit.of(value) is d


@pytest.mark.parametrize("value", [10, -1, 255, 3.0, "7", None, True, False])
def test_from_value_rejects_without_clamping(value):
    print(f"[digit-invalid] {value!r} -> expect None from from_value, DigitDomainError from of")
    assert Digit.from_value(value) is None
    with pytest.raises(DigitDomainError):
        Digit.of(value)


def test_from_value_accepts_digit_members():
    assert Digit.from_value(Digit.NINE) is Digit.NINE


# -----------------------------
# Conversions / text
# -----------------------------

@pytest.mark.parametrize("width", [8, 16, 32, 64, 128])
def test_to_unsigned_lossless_for_every_width(width):
    print(f"[digit-to_unsigned] all digits at u{width}")
    assert [d.to_unsigned(width) for d in Digit] == list(range(10))


@pytest.mark.parametrize("width", [0, 12, 256, None])
def test_to_unsigned_unsupported_width_raises(width):
    with pytest.raises(DigitDomainError):
        Digit.SEVEN.to_unsigned(width)


def test_text_form_is_single_character():
    print("[digit-text] str/repr/format of SEVEN -> '7'")
    assert str(Digit.SEVEN) == "7"
    assert repr(Digit.SEVEN) == "7"
    assert f"{Digit.SEVEN}" == "7"
    assert "".join(str(d) for d in Digit) == "0123456789"


def test_total_order_by_value():
    assert Digit.TWO < Digit.THREE
    assert max(Digit) is Digit.NINE
    assert sorted([Digit.FIVE, Digit.ZERO, Digit.NINE]) == [Digit.ZERO, Digit.FIVE, Digit.NINE]
