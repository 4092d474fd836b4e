import os
from decimal import Decimal

import pytest

from money_math.config import DEFAULT_CURRENCY_ENV
from money_math.domain.monetary.currency import Currency
from money_math.domain.monetary.currency_registry import CZK, EUR, USD
from money_math.domain.monetary.errors import (
    CurrencyMismatchError,
    DivisionByZeroError,
    EmptyInputError,
    InvalidArgumentError,
    InvalidOperandError,
)
from money_math.domain.monetary.fixed_decimal import FixedDecimal
from money_math.domain.monetary.int_factor import IntFactor
from money_math.domain.monetary.money import Money


def test_money_construction():
    money = Money(39999, USD)
    assert money.amount == FixedDecimal(39999)
    assert money.currency == USD
    assert money.units == 39999
    assert Money("39999", USD) == money
    assert Money(FixedDecimal(39999), USD) == money


def test_money_requires_currency_instance():
    with pytest.raises(TypeError):
        Money(100, "USD")


def test_add_and_subtract():
    assert Money(500, USD).add(Money(250, USD)) == Money(750, USD)
    assert Money(500, USD).subtract(Money(750, USD)) == Money(-250, USD)
    assert Money(500, USD) + Money(1, USD) == Money(501, USD)
    assert Money(500, USD) - Money(1, USD) == Money(499, USD)


def test_add_rejects_other_currency():
    with pytest.raises(CurrencyMismatchError):
        Money(500, USD).add(Money(500, EUR))
    with pytest.raises(CurrencyMismatchError):
        Money(500, USD) - Money(500, EUR)


def test_currency_mismatch_is_a_value_error():
    with pytest.raises(ValueError, match="different currencies: USD and EUR"):
        Money(500, USD).add(Money(500, EUR))


def test_multiply_by_plain_int():
    assert Money(150, USD).multiply(3) == Money(450, USD)
    assert Money(150, USD).multiply(IntFactor(-1)) == Money(-150, USD)
    assert Money(150, USD) * 2 == Money(300, USD)
    assert 2 * Money(150, USD) == Money(300, USD)


@pytest.mark.parametrize("multiplier", [1.5, Decimal("2"), "2", True, FixedDecimal(2)])
def test_multiply_rejects_non_int(multiplier):
    with pytest.raises(InvalidOperandError):
        Money(150, USD).multiply(multiplier)


def test_divide():
    assert Money(1000, USD).divide(3) == Money(333, USD)
    assert Money(-1000, USD).divide(3) == Money(-333, USD)
    assert Money(1000, USD).divide(FixedDecimal(-3)) == Money(-333, USD)


def test_divide_rejects_bad_divisor():
    with pytest.raises(InvalidOperandError):
        Money(1000, USD).divide(2.5)
    with pytest.raises(DivisionByZeroError):
        Money(1000, USD).divide(0)
    with pytest.raises(DivisionByZeroError):
        Money(1000, USD).divide(FixedDecimal(0))


def test_comparison():
    assert Money(1000, USD).greater_than(Money(999, USD))
    assert not Money(999, USD).greater_than(Money(1000, USD))
    assert Money(999, USD).less_than(Money(1000, USD))
    assert Money(1000, USD).compare(Money(1000, USD)) == 0
    assert Money(1000, USD).compare(Money(-1, USD)) == 1
    assert Money(-1, USD).compare(Money(1000, USD)) == -1
    assert Money(1, USD) < Money(2, USD) <= Money(2, USD)


def test_equal_amounts_are_equal_regardless_of_identity():
    a = Money(1000, USD)
    b = Money(1000, Currency("usd"))
    assert a is not b
    assert a == b
    assert a.equals(b)
    assert hash(a) == hash(b)


def test_comparison_rejects_other_currency():
    with pytest.raises(CurrencyMismatchError):
        Money(1000, USD).compare(Money(1000, EUR))
    with pytest.raises(CurrencyMismatchError):
        Money(1000, USD).equals(Money(1000, EUR))
    with pytest.raises(CurrencyMismatchError):
        Money(1000, USD) < Money(1000, EUR)
    # `==` stays usable for dicts and sets
    assert Money(1000, USD) != Money(1000, EUR)


def test_sign_predicates():
    assert Money(0, USD).is_zero()
    assert Money(1, USD).is_positive()
    assert Money(-1, USD).is_negative()


def test_sum():
    items = [Money(100, USD), Money(250, USD), Money(-50, USD)]
    assert Money.sum(items) == Money(300, USD)
    assert sum(items) == Money(300, USD)
    assert Money.sum([], currency=USD) == Money(0, USD)
    with pytest.raises(EmptyInputError):
        Money.sum([])
    with pytest.raises(CurrencyMismatchError):
        Money.sum([Money(1, USD), Money(1, EUR)])


def test_unary_operators():
    assert -Money(100, USD) == Money(-100, USD)
    assert abs(Money(-100, USD)) == Money(100, USD)


def test_string_representation():
    assert str(Money(39999, USD)) == "399.99 USD"
    assert str(Money(-5, EUR)) == "-0.05 EUR"
    assert repr(Money(100050, USD)) == "Money(100050, USD)"


def test_from_str():
    assert Money.from_str("1000.50 USD") == Money(100050, USD)
    assert Money.from_str("-12,5 czk") == Money(-1250, CZK)
    assert Money.from_str("7", default_currency=EUR) == Money(700, EUR)


def test_from_str_errors():
    with pytest.raises(InvalidArgumentError):
        Money.from_str("")
    with pytest.raises(InvalidArgumentError):
        Money.from_str("12.345 USD")
    with pytest.raises(ValueError, match="Invalid currency part"):
        Money.from_str("12.34 XYZ")
    with pytest.raises(ValueError, match="format"):
        Money.from_str("12.34 USD extra")


@pytest.fixture
def isolated_env(monkeypatch):
    # load_dotenv writes into os.environ, so give each test its own copy
    environ = dict(os.environ)
    environ.pop(DEFAULT_CURRENCY_ENV, None)
    monkeypatch.setattr(os, "environ", environ)
    return environ


def test_from_str_without_code_uses_configured_currency(isolated_env):
    assert Money.from_str("12.34") == Money(1234, USD)

    isolated_env[DEFAULT_CURRENCY_ENV] = "czk"
    assert Money.from_str("12.34") == Money(1234, CZK)
    # An explicit default still wins over the configured one
    assert Money.from_str("12.34", default_currency=EUR) == Money(1234, EUR)


def test_from_str_with_unknown_configured_currency(isolated_env):
    isolated_env[DEFAULT_CURRENCY_ENV] = "XYZ"
    with pytest.raises(ValueError, match="not found in registry"):
        Money.from_str("12.34")
