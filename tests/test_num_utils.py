import pytest

from chromagrad.errors import FractionError
from chromagrad.utils.num_utils import is_close_to_int, parse_number, read_fraction


def test_read_fraction_plain():
    assert read_fraction("0.25") == pytest.approx(0.25)
    assert read_fraction("  1 ") == pytest.approx(1.0)


def test_read_fraction_percent():
    assert read_fraction("50%") == pytest.approx(0.5)
    assert read_fraction("12.5%") == pytest.approx(0.125)


def test_read_fraction_negative_clamped_to_zero():
    assert read_fraction("-0.3") == 0.0
    assert read_fraction("-20%") == 0.0


def test_read_fraction_above_one_not_clamped():
    assert read_fraction("150%") == pytest.approx(1.5)
    assert read_fraction("2") == pytest.approx(2.0)


@pytest.mark.parametrize("text", ["", "abc", "red", "%", "nan", "inf"])
def test_read_fraction_invalid(text):
    with pytest.raises(FractionError):
        read_fraction(text)


def test_fraction_error_is_value_error():
    with pytest.raises(ValueError):
        parse_number("1.2.3")


def test_is_close_to_int():
    assert is_close_to_int(45.0)
    assert is_close_to_int(-90.0000000001)
    assert not is_close_to_int(37.5)
