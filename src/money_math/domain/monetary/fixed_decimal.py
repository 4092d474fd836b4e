from __future__ import annotations

import re
from decimal import Decimal
from typing import Iterable, TypeAlias

from money_math.domain.monetary.errors import (
    DivisionByZeroError,
    EmptyInputError,
    InvalidArgumentError,
    InvalidOperandError,
)
from money_math.domain.monetary.int_factor import IntFactor, is_plain_int

# Base-10 integer with an optional sign; no decimal point is interpreted at this layer
_SCALED_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def _parse_scaled(value) -> int:
    """Convert constructor input into the scaled integer (value × 100)."""
    if is_plain_int(value):
        return value

    if isinstance(value, str):
        text = value.strip()
        # Raise: string must hold a plain base-10 integer
        if not _SCALED_INTEGER_PATTERN.fullmatch(text):
            raise InvalidArgumentError(f"$value must be a base-10 integer string (hundredths), but provided value is: '{value}'")
        return int(text, 10)

    raise InvalidOperandError(f"$value must be an int or an integer string, but provided value is: {value!r}")


class FixedDecimal:
    """Arbitrary-precision decimal number with exactly two fractional digits.

    The value is stored as a single Python `int` named `scaled`, equal to the represented
    value multiplied by 100. For example 399.99 is stored as `39999` and
    99999999999999999999999999999999.99 is stored as `9999999999999999999999999999999999`.

    The constructor takes the already-scaled integer: `FixedDecimal(39999)` represents
    399.99. Callers holding a "whole amount + cents" string must convert it first
    (see `money_math.parsing.amount_parser`).

    Instances are immutable. Every arithmetic operation returns a new instance.

    Two multiplications exist and they are intentionally different:

    - `static_multiply(decimal, factor)` / `multiply_by(factor)` / `decimal * factor`
      multiply by a plain (unscaled) integer. The result keeps the ×100 scale. This is
      the right operation for "N times this amount".
    - `mul(a, b)` / `a.multiply(b)` multiply two scaled integers directly. Both operands
      already carry ×100, so the result carries ×10000. Callers multiplying two true
      decimal amounts must rescale the result themselves.
    """

    __slots__ = ("_scaled",)

    # region Init

    def __init__(self, value: int | str):
        """Initialize FixedDecimal from an already-scaled integer value.

        Args:
            value: Scaled integer (value × 100) as `int` or base-10 integer string.

        Raises:
            InvalidArgumentError: If $value is a string that is not a base-10 integer.
            InvalidOperandError: If $value is neither `int` nor `str`.
        """
        self._scaled = _parse_scaled(value)

    @classmethod
    def from_value(cls, value: FixedDecimalLike) -> FixedDecimal:
        """Create FixedDecimal from another FixedDecimal, an int or an integer string.

        Args:
            value: Source value. Ints and strings are taken as already scaled.

        Returns:
            FixedDecimal: New instance holding the same scaled value.
        """
        if isinstance(value, FixedDecimal):
            return cls(value._scaled)
        return cls(value)

    @classmethod
    def zero(cls) -> FixedDecimal:
        """Return the zero value."""
        return cls(0)

    # endregion

    # region Properties and conversion

    @property
    def scaled(self) -> int:
        """Get the scaled integer (value × 100)."""
        return self._scaled

    def integer_value(self) -> int:
        """Return the stored value as the caller's display integer.

        This is not `scaled / 100`: it is `scaled` itself, reinterpreted as a signed
        integer of hundredths. The sign comes from the numeric value, never from text.

        Returns:
            int: Signed integer of hundredths.
        """
        sign = -1 if self._scaled < 0 else 1
        return sign * abs(self._scaled)

    def to_decimal(self) -> Decimal:
        """Return the exact value as `Decimal` with two fractional digits (39999 -> 399.99)."""
        sign = 1 if self._scaled < 0 else 0
        digits = tuple(int(digit) for digit in str(abs(self._scaled)))
        # Tuple constructor is exact; context precision does not apply
        return Decimal((sign, digits, -2))

    # endregion

    # region Static arithmetic

    @staticmethod
    def _require_decimal(value, name: str) -> FixedDecimal:
        # Raise: static operations take FixedDecimal operands only
        if not isinstance(value, FixedDecimal):
            raise InvalidOperandError(f"${name} must be a FixedDecimal, but provided value is: {value!r}")
        return value

    @staticmethod
    def plus(a: FixedDecimal, b: FixedDecimal) -> FixedDecimal:
        """Return a new decimal equal to $a + $b."""
        FixedDecimal._require_decimal(a, "a")
        FixedDecimal._require_decimal(b, "b")
        return FixedDecimal(a._scaled + b._scaled)

    @staticmethod
    def minus(a: FixedDecimal, b: FixedDecimal) -> FixedDecimal:
        """Return a new decimal equal to $a - $b."""
        FixedDecimal._require_decimal(a, "a")
        FixedDecimal._require_decimal(b, "b")
        return FixedDecimal(a._scaled - b._scaled)

    @staticmethod
    def mul(a: FixedDecimal, b: FixedDecimal) -> FixedDecimal:
        """Multiply the two scaled integers directly.

        Both operands carry the implicit ×100 scale, so the result is scaled by ×10000,
        not ×100: `mul(FixedDecimal(200), FixedDecimal(300))` (2.00 × 3.00) holds
        `60000`, which reads as 600.00 and not 6.00. The result is only a correctly
        scaled amount when one operand is a raw (unscaled) multiplier, as in
        `get_percents_of`. To multiply an amount by N use `static_multiply`.

        Args:
            a (FixedDecimal): Left operand.
            b (FixedDecimal): Right operand.

        Returns:
            FixedDecimal: Product of the two scaled integers.
        """
        FixedDecimal._require_decimal(a, "a")
        FixedDecimal._require_decimal(b, "b")
        return FixedDecimal(a._scaled * b._scaled)

    @staticmethod
    def static_multiply(decimal: FixedDecimal, factor: int | IntFactor) -> FixedDecimal:
        """Multiply $decimal by a plain (unscaled) integer $factor; scale stays ×100.

        Args:
            decimal (FixedDecimal): Amount to multiply.
            factor: Plain integer multiplier, as `int` or `IntFactor`.

        Returns:
            FixedDecimal: $decimal × $factor.

        Raises:
            InvalidOperandError: If $factor is not a plain integer.
        """
        FixedDecimal._require_decimal(decimal, "decimal")
        int_factor = IntFactor.coerce(factor)
        return FixedDecimal(decimal._scaled * int_factor.value)

    @staticmethod
    def div(a: FixedDecimal, b: FixedDecimal) -> FixedDecimal:
        """Divide $a by $b, truncating toward zero.

        Magnitudes are divided first and the sign `sign(a) * sign(b)` is applied
        afterwards, so `div(FixedDecimal(-7), FixedDecimal(2))` gives `-3`, not the
        `-4` that floor division would give.

        Args:
            a (FixedDecimal): Dividend.
            b (FixedDecimal): Divisor.

        Returns:
            FixedDecimal: Truncated quotient of the scaled integers.

        Raises:
            DivisionByZeroError: If $b is zero.
        """
        FixedDecimal._require_decimal(a, "a")
        FixedDecimal._require_decimal(b, "b")

        # Raise: divisor must not be zero
        if b._scaled == 0:
            raise DivisionByZeroError(f"Cannot divide {a!r} by zero")

        quotient = abs(a._scaled) // abs(b._scaled)
        if (a._scaled < 0) != (b._scaled < 0):
            quotient = -quotient
        return FixedDecimal(quotient)

    @staticmethod
    def get_percents_of(decimal: FixedDecimal, percents: FixedDecimal) -> FixedDecimal:
        """Return $percents percent of $decimal, rounded toward positive infinity.

        Computes `ceil(decimal.scaled * percents.scaled / 100)`. $percents is read as a
        raw count of percent (`FixedDecimal(10)` means 10 %), which is what makes the
        `mul` scale accounting come out at ×100: ×100 from $decimal, ×1 from $percents.

        Example:
            `get_percents_of(FixedDecimal(1001), FixedDecimal(10))` is `FixedDecimal(101)`
            (10 % of 10.01 is 1.001, ceiled to 1.01).
        """
        product = FixedDecimal.mul(decimal, percents)._scaled
        return FixedDecimal(-(-product // 100))

    @staticmethod
    def cmp(a: FixedDecimal, b: FixedDecimal) -> int:
        """Three-way comparison.

        Returns:
            int: A positive value if a > b, zero if a == b and a negative value if a < b.
        """
        FixedDecimal._require_decimal(a, "a")
        FixedDecimal._require_decimal(b, "b")
        return (a._scaled > b._scaled) - (a._scaled < b._scaled)

    @staticmethod
    def sum(decimals: Iterable[FixedDecimal]) -> FixedDecimal:
        """Return the sum of all $decimals; an empty input gives zero."""
        result = FixedDecimal.zero()
        for decimal in decimals:
            result = FixedDecimal.plus(result, decimal)
        return result

    @staticmethod
    def avg(decimals: Iterable[FixedDecimal]) -> FixedDecimal:
        """Return the truncated average of $decimals.

        Raises:
            EmptyInputError: If $decimals is empty; the average of nothing is undefined.
        """
        items = list(decimals)

        # Raise: average needs at least one item
        if not items:
            raise EmptyInputError("Cannot compute average because $decimals is empty")

        return FixedDecimal.div(FixedDecimal.sum(items), FixedDecimal(len(items)))

    # endregion

    # region Instance arithmetic

    def add(self, other: FixedDecimalLike) -> FixedDecimal:
        return FixedDecimal.plus(self, FixedDecimal.from_value(other))

    def subtract(self, other: FixedDecimalLike) -> FixedDecimal:
        return FixedDecimal.minus(self, FixedDecimal.from_value(other))

    def multiply(self, other: FixedDecimal) -> FixedDecimal:
        """Scale-squaring multiplication, see `mul`. Use `multiply_by` for "N times"."""
        # Raise: plain integers must go through `multiply_by`, which keeps the scale
        if not isinstance(other, FixedDecimal):
            raise InvalidOperandError(f"$other must be a FixedDecimal (use `multiply_by` for plain integer factors), but provided value is: {other!r}")
        return FixedDecimal.mul(self, other)

    def multiply_by(self, factor: int | IntFactor) -> FixedDecimal:
        return FixedDecimal.static_multiply(self, factor)

    def divide(self, other: FixedDecimalLike) -> FixedDecimal:
        return FixedDecimal.div(self, FixedDecimal.from_value(other))

    def compare(self, other: FixedDecimal) -> int:
        return FixedDecimal.cmp(self, other)

    def is_zero(self) -> bool:
        return self.compare(FixedDecimal.zero()) == 0

    def is_positive(self) -> bool:
        return self.compare(FixedDecimal.zero()) > 0

    def is_negative(self) -> bool:
        return self.compare(FixedDecimal.zero()) < 0

    def iterated_quotient(self, divisor: FixedDecimalLike) -> FixedDecimal:
        """Divide repeatedly by $divisor while the truncated quotient stays positive.

        Starting from this value, the current value is replaced by `div(current, divisor)`
        as long as that quotient is positive. The last value reached is returned (this
        value itself when the first quotient is not positive).

        This is NOT the arithmetic remainder `a - floor(a / b) * b`. For example
        `FixedDecimal(1000).iterated_quotient(10)` walks 1000 -> 100 -> 10 -> 1 and
        returns `FixedDecimal(1)`. It only matches a conventional modulo in a few small
        cases, so use it for nothing but the narrow purpose it was built for.

        Args:
            divisor: Divisor, anything accepted by `from_value`.

        Returns:
            FixedDecimal: The last positive quotient.

        Raises:
            DivisionByZeroError: If $divisor is zero.
            InvalidArgumentError: If $divisor is 1 and this value is positive (no progress).
        """
        divisor_decimal = FixedDecimal.from_value(divisor)

        # Raise: divisor must not be zero
        if divisor_decimal.is_zero():
            raise DivisionByZeroError(f"Cannot compute iterated quotient of {self!r} by zero")

        # Raise: dividing a positive value by 1 never shrinks it
        if divisor_decimal._scaled == 1 and self.is_positive():
            raise InvalidArgumentError(f"Cannot compute iterated quotient of {self!r} by $divisor = 1 because it never terminates")

        current = self
        quotient = FixedDecimal.div(current, divisor_decimal)
        while quotient.is_positive():
            current = quotient
            quotient = FixedDecimal.div(current, divisor_decimal)

        return FixedDecimal(current.integer_value())

    def modulo(self, divisor: FixedDecimalLike) -> FixedDecimal:
        """Historical name of `iterated_quotient`; it does not compute a remainder."""
        return self.iterated_quotient(divisor)

    # endregion

    # region Operators

    def __add__(self, other):
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return FixedDecimal.plus(self, other)

    def __sub__(self, other):
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return FixedDecimal.minus(self, other)

    def __mul__(self, other):
        # Only plain integer factors; FixedDecimal x FixedDecimal must be spelled `mul`
        if isinstance(other, IntFactor) or is_plain_int(other):
            return FixedDecimal.static_multiply(self, other)
        return NotImplemented

    def __rmul__(self, other):
        return self.__mul__(other)

    def __neg__(self) -> FixedDecimal:
        return FixedDecimal(-self._scaled)

    def __pos__(self) -> FixedDecimal:
        return FixedDecimal(self._scaled)

    def __abs__(self) -> FixedDecimal:
        return FixedDecimal(abs(self._scaled))

    def __eq__(self, other) -> bool:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return FixedDecimal.cmp(self, other) == 0

    def __lt__(self, other) -> bool:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return FixedDecimal.cmp(self, other) < 0

    def __le__(self, other) -> bool:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return FixedDecimal.cmp(self, other) <= 0

    def __gt__(self, other) -> bool:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return FixedDecimal.cmp(self, other) > 0

    def __ge__(self, other) -> bool:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return FixedDecimal.cmp(self, other) >= 0

    def __hash__(self) -> int:
        return hash(self._scaled)

    def __int__(self) -> int:
        return self.integer_value()

    def __str__(self) -> str:
        """Return the scaled integer as text, e.g. '39999' for 399.99."""
        return str(self.integer_value())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._scaled})"

    # endregion


# Use where optimal type is `FixedDecimal`, but ints and integer strings (already scaled) are also accepted
FixedDecimalLike: TypeAlias = FixedDecimal | int | str
