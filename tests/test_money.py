import pytest

from tamboon.money import DivideByZeroError, MismatchedCurrencyError, Money, MoneyError


def test_new_rounds_to_two_places():
    result = Money.from_float("thb", 234.1259)
    assert result.amount == 234.13
    assert str(result) == "234.13"
    assert result.currency == "thb"


def test_new_has_trailing_decimals_in_string():
    assert str(Money.from_float("thb", 234)) == "234.00"


def test_value_objects_are_equal():
    first = Money.from_float("thb", 234.1259)
    second = Money.from_float("thb", 234.1259)
    assert first == second
    assert hash(first) == hash(second)


def test_zero():
    result = Money.zero("thb")
    assert result.amount == 0
    assert str(result) == "0.00"
    assert result.currency == "thb"


def test_add():
    a = Money.from_float("thb", 234.1259)
    b = Money.from_float("thb", 234.1259)
    expected = Money.from_float("thb", 468.26)
    result = a.add(b)
    assert result.currency == expected.currency
    assert result.amount == expected.amount


def test_add_mismatched_currency():
    a = Money.from_float("thb", 234.1259)
    b = Money.from_float("vnd", 234.1259)
    with pytest.raises(MismatchedCurrencyError, match="money currencies do not match"):
        a.add(b)


def test_subtract():
    a = Money.from_float("thb", 7595.1259)
    b = Money.from_float("thb", 234.1259)
    expected = Money.from_float("thb", 7361)
    result = a.subtract(b)
    assert result.currency == expected.currency
    assert result.amount == expected.amount


def test_subtract_operand_larger_than_original():
    a = Money.from_float("thb", 234.1259)
    b = Money.from_float("thb", 7595.1259)
    expected = Money.from_float("thb", -7361)
    result = a.subtract(b)
    assert result.currency == expected.currency
    assert result.amount == expected.amount


def test_subtract_mismatched_currency():
    a = Money.from_float("thb", 234.1259)
    b = Money.from_float("vnd", 234.1259)
    with pytest.raises(MismatchedCurrencyError, match="money currencies do not match"):
        a.subtract(b)


def test_multiplied_by():
    a = Money.from_float("thb", 234.1259)
    expected = Money.from_float("thb", 11735.3)
    result = a.multiplied_by(50.123)
    assert result.currency == expected.currency
    assert result.amount == expected.amount


def test_divided_by():
    a = Money.from_float("thb", 234.1259)
    expected = Money.from_float("thb", 4.67)
    result = a.divided_by(50.123)
    assert result.currency == expected.currency
    assert result.amount == expected.amount


def test_divided_by_zero():
    a = Money.from_float("thb", 234.1259)
    with pytest.raises(DivideByZeroError, match="money cannot be divided by zero"):
        a.divided_by(0)


def test_errors_share_base_class():
    with pytest.raises(MoneyError):
        Money.zero("thb").divided_by(0)