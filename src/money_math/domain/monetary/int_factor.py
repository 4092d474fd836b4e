from __future__ import annotations

from money_math.domain.monetary.errors import InvalidOperandError


def is_plain_int(value) -> bool:
    """Check that $value is an `int` and not a `bool`.

    `bool` is a subclass of `int` in Python, but `True` as a multiplier is almost
    always a bug, so it is rejected everywhere a plain integer is required.
    """
    return isinstance(value, int) and not isinstance(value, bool)


class IntFactor:
    """Plain (unscaled) integer multiplier.

    A `FixedDecimal` already carries an implicit ×100 scale. Multiplying it by another
    `FixedDecimal` squares the scale, while multiplying it by an `IntFactor` keeps the
    scale at ×100. Having a separate type makes the intent explicit at every call site.

    Attributes:
        value (int): The raw integer factor.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int):
        """Initialize an IntFactor.

        Args:
            value (int): Raw integer factor.

        Raises:
            InvalidOperandError: If $value is not a plain `int`.
        """
        if isinstance(value, IntFactor):
            value = value.value

        # Raise: factor must be a plain integer (floats, Decimals and bools are rejected)
        if not is_plain_int(value):
            raise InvalidOperandError(f"$value must be a plain int, but provided value is: {value!r}")

        self._value = value

    @classmethod
    def coerce(cls, factor: int | IntFactor) -> IntFactor:
        """Return $factor as `IntFactor`, wrapping plain ints."""
        if isinstance(factor, IntFactor):
            return factor
        return cls(factor)

    @property
    def value(self) -> int:
        """Get the raw integer factor."""
        return self._value

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other) -> bool:
        if isinstance(other, IntFactor):
            return self._value == other._value
        if is_plain_int(other):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value})"
