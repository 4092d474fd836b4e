from __future__ import annotations

from typing import Iterable, Sequence

from money_math.config import load_settings
from money_math.domain.monetary.allocation import allocate_amount
from money_math.domain.monetary.currency import Currency
from money_math.domain.monetary.errors import (
    CurrencyMismatchError,
    DivisionByZeroError,
    EmptyInputError,
    InvalidArgumentError,
    InvalidOperandError,
)
from money_math.domain.monetary.fixed_decimal import FixedDecimal, FixedDecimalLike
from money_math.domain.monetary.int_factor import IntFactor, is_plain_int
from money_math.parsing.amount_parser import string_to_units


class Money:
    """Represents a monetary amount with currency.

    The amount is a `FixedDecimal`, i.e. an exact integer of hundredths with no upper
    bound. All binary operations (add, subtract, compare, equals) require both values to
    have the same currency and raise `CurrencyMismatchError` otherwise.

    Instances are immutable; every operation returns a new Money in the same currency.
    """

    # region Init

    def __init__(self, amount: FixedDecimalLike, currency: Currency):
        """Initialize Money with an amount in hundredths and a currency.

        Args:
            amount: `FixedDecimal`, or an int / integer string of hundredths (39999 is 399.99).
            currency (Currency): Currency object.

        Raises:
            TypeError: If $currency is not a Currency instance.
            InvalidOperandError: If $amount has an unsupported type.
            InvalidArgumentError: If $amount is a malformed string.
        """
        # Raise: currency must be an instance of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        self._amount = FixedDecimal.from_value(amount)
        self._currency = currency

    @classmethod
    def zero(cls, currency: Currency) -> Money:
        return cls(FixedDecimal.zero(), currency)

    @classmethod
    def from_str(cls, value_str: str, default_currency: Currency | None = None) -> Money:
        """Parse Money from a string like '1000.50 USD' or '-12,5 EUR'.

        The amount part follows `money_math.parsing.amount_parser`. The currency code is
        looked up in the currency registry. When the string holds only an amount,
        $default_currency is used, or the configured default currency
        (`MONEY_MATH_DEFAULT_CURRENCY`, see `money_math.config`) when it is None.

        Args:
            value_str (str): String representation.
            default_currency (Currency | None): Currency to use when $value_str has no code.
                If None, `load_settings().default_currency` is used.

        Returns:
            Money: Parsed Money object.

        Raises:
            InvalidArgumentError: If the amount part cannot be parsed.
            ValueError: If the format or the currency code is invalid.
        """
        if not isinstance(value_str, str) or not value_str.strip():
            raise InvalidArgumentError(f"Value string with $value_str = '{value_str}' cannot be empty")

        parts = value_str.split()
        if len(parts) == 2:
            amount_part, currency_part = parts
            try:
                currency = Currency.from_str(currency_part)
            except ValueError as e:
                raise ValueError(f"Invalid currency part '{currency_part}' in string '{value_str}'") from e
        elif len(parts) == 1:
            amount_part = parts[0]
            currency = default_currency if default_currency is not None else load_settings().default_currency
        else:
            raise ValueError(f"Value string with $value_str = '{value_str}' must be in format 'value currency_code'")

        return cls(string_to_units(amount_part), currency)

    # endregion

    # region Properties

    @property
    def amount(self) -> FixedDecimal:
        """Get the amount as FixedDecimal."""
        return self._amount

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    @property
    def units(self) -> int:
        """Get the amount as signed integer of hundredths (399.99 -> 39999)."""
        return self._amount.integer_value()

    # endregion

    # region Currency checks

    def is_same_currency(self, other: Money) -> bool:
        return self.currency == other.currency

    def _check_same_currency(self, other: Money) -> None:
        """Check if two Money objects have the same currency.

        Raises:
            TypeError: If $other is not Money.
            CurrencyMismatchError: If currencies don't match.
        """
        if not isinstance(other, Money):
            raise TypeError(f"$other must be a Money instance, but provided value is: {other!r}")
        if not self.is_same_currency(other):
            raise CurrencyMismatchError(self.currency, other.currency)

    # endregion

    # region Arithmetic

    def add(self, other: Money) -> Money:
        self._check_same_currency(other)
        return Money(FixedDecimal.plus(self.amount, other.amount), self.currency)

    def subtract(self, other: Money) -> Money:
        self._check_same_currency(other)
        return Money(FixedDecimal.minus(self.amount, other.amount), self.currency)

    def multiply(self, multiplier: int | IntFactor) -> Money:
        """Multiply by a plain integer; 1.50 USD * 3 = 4.50 USD.

        Raises:
            InvalidOperandError: If $multiplier is not a plain integer (floats, Decimals,
                FixedDecimals and bools are rejected).
        """
        # Raise: only plain integer multipliers keep the two-digit scale intact
        if not (isinstance(multiplier, IntFactor) or is_plain_int(multiplier)):
            raise InvalidOperandError(f"$multiplier must be a plain int, but provided value is: {multiplier!r}")

        return Money(FixedDecimal.static_multiply(self.amount, multiplier), self.currency)

    def divide(self, divisor: int | FixedDecimal) -> Money:
        """Divide the amount, truncating toward zero.

        A plain int divides the amount by that number (10.00 / 3 = 3.33). A FixedDecimal
        divisor divides the scaled integers as they are (see `FixedDecimal.div`).

        Raises:
            InvalidOperandError: If $divisor is neither int nor FixedDecimal.
            DivisionByZeroError: If $divisor is zero.
        """
        # Raise: divisor must be an integer or a FixedDecimal
        if not (isinstance(divisor, FixedDecimal) or is_plain_int(divisor)):
            raise InvalidOperandError(f"$divisor must be an int or FixedDecimal, but provided value is: {divisor!r}")

        divisor_decimal = FixedDecimal.from_value(divisor)
        if divisor_decimal.is_zero():
            raise DivisionByZeroError(f"Cannot divide {self!r} by zero")

        return Money(FixedDecimal.div(self.amount, divisor_decimal), self.currency)

    def allocate(self, ratios: Sequence[int]) -> list[Money]:
        """Split this Money into shares proportional to $ratios.

        The shares always add up exactly to this Money. The indivisible remainder is
        given out one hundredth at a time starting with the first ratio, so
        `Money(100, USD).allocate([1, 1, 1])` gives 0.34, 0.33, 0.33.

        Args:
            ratios: Non-empty sequence of plain non-negative ints with a positive sum.

        Returns:
            list[Money]: One share per ratio, in input order, all in this currency.

        Raises:
            EmptyInputError: If $ratios is empty.
            InvalidOperandError: If a ratio is not a plain int.
            InvalidArgumentError: If a ratio is negative or the ratios sum to zero.
        """
        shares = allocate_amount(self.amount, ratios)
        return [Money(share, self.currency) for share in shares]

    @staticmethod
    def sum(items: Iterable[Money], currency: Currency | None = None) -> Money:
        """Return the sum of same-currency $items.

        Args:
            items: Money values to add.
            currency: Currency of the result when $items is empty.

        Raises:
            EmptyInputError: If $items is empty and no $currency is given.
            CurrencyMismatchError: If the items (or $currency) disagree on currency.
        """
        result = Money.zero(currency) if currency is not None else None
        for item in items:
            result = item if result is None else result.add(item)

        # Raise: currency of an empty sum is unknown
        if result is None:
            raise EmptyInputError("Cannot sum empty $items without $currency")

        return result

    # endregion

    # region Comparison

    def compare(self, other: Money) -> int:
        """Return -1, 0 or 1 as this Money is less than, equal to or greater than $other."""
        self._check_same_currency(other)
        result = self.amount.compare(other.amount)
        if result < 0:
            return -1
        if result > 0:
            return 1
        return 0

    def greater_than(self, other: Money) -> bool:
        return self.compare(other) == 1

    def less_than(self, other: Money) -> bool:
        return self.compare(other) == -1

    def equals(self, other: Money) -> bool:
        """Check equality; unlike `==`, a different currency raises CurrencyMismatchError."""
        return self.compare(other) == 0

    def is_zero(self) -> bool:
        return self.amount.is_zero()

    def is_positive(self) -> bool:
        return self.amount.is_positive()

    def is_negative(self) -> bool:
        return self.amount.is_negative()

    # endregion

    # region Operators

    def __eq__(self, other) -> bool:
        """Check equality with another Money object; other currencies are simply not equal."""
        if not isinstance(other, Money):
            return False
        if not self.is_same_currency(other):
            return False
        return self.amount == other.amount

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) >= 0

    def __add__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        """Support builtin `sum()`, which starts from the int 0."""
        if is_plain_int(other) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if isinstance(other, IntFactor) or is_plain_int(other):
            return self.multiply(other)
        return NotImplemented

    def __rmul__(self, other):
        return self.__mul__(other)

    def __neg__(self) -> Money:
        return Money(-self.amount, self.currency)

    def __pos__(self) -> Money:
        return Money(self.amount, self.currency)

    def __abs__(self) -> Money:
        return Money(abs(self.amount), self.currency)

    def __hash__(self) -> int:
        """Hash based on amount and currency code."""
        return hash((self.amount, self.currency.code))

    def __str__(self) -> str:
        """Return string like '1000.50 USD'."""
        return f"{self.amount.to_decimal()} {self.currency.code}"

    def __repr__(self) -> str:
        """Return string like 'Money(100050, USD)'."""
        return f"{self.__class__.__name__}({self.amount.scaled}, {self.currency.code})"

    # endregion
