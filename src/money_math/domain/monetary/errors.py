"""Errors raised by the monetary domain.

Every error derives from `MoneyMathError` and from the closest builtin exception, so
callers that already catch `ValueError` / `TypeError` / `ZeroDivisionError` keep working.
"""


class MoneyMathError(Exception):
    """Base class for all monetary arithmetic errors."""


class DivisionByZeroError(MoneyMathError, ZeroDivisionError):
    """Raised when a division (or iterated division) gets a zero divisor."""


class InvalidArgumentError(MoneyMathError, ValueError):
    """Raised for malformed input values (unparsable strings, invalid ratio lists, ...)."""


class EmptyInputError(InvalidArgumentError):
    """Raised when an operation that needs at least one item gets an empty collection."""


class CurrencyMismatchError(MoneyMathError, ValueError):
    """Raised when a binary `Money` operation mixes two different currencies."""

    def __init__(self, left, right):
        self.left = left
        self.right = right
        super().__init__(f"Cannot operate on different currencies: {left} and {right}")


class InvalidOperandError(MoneyMathError, TypeError):
    """Raised when an operand has an unsupported type (e.g. a float multiplier)."""


class AllocationInvariantError(MoneyMathError, RuntimeError):
    """Raised when allocation cannot distribute its remainder within the number of shares."""
