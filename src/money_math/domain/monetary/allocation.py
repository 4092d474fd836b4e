from __future__ import annotations

import logging
from typing import Sequence

from money_math.domain.monetary.errors import (
    AllocationInvariantError,
    EmptyInputError,
    InvalidArgumentError,
    InvalidOperandError,
)
from money_math.domain.monetary.fixed_decimal import FixedDecimal
from money_math.domain.monetary.int_factor import is_plain_int

logger = logging.getLogger(__name__)

# Smallest representable increment: one hundredth
_ONE_UNIT = FixedDecimal(1)


def validate_ratios(ratios: Sequence[int]) -> int:
    """Validate allocation $ratios and return their total.

    Args:
        ratios: Non-empty sequence of plain non-negative integers.

    Returns:
        int: Sum of $ratios (always positive).

    Raises:
        EmptyInputError: If $ratios is empty.
        InvalidOperandError: If any ratio is not a plain integer.
        InvalidArgumentError: If any ratio is negative or the total is zero.
    """
    # Raise: at least one share is needed
    if len(ratios) == 0:
        raise EmptyInputError("Cannot allocate because $ratios is empty")

    for index, ratio in enumerate(ratios):
        # Raise: ratios are plain integers, never floats or decimals
        if not is_plain_int(ratio):
            raise InvalidOperandError(f"Each ratio must be a plain int, but $ratios[{index}] is: {ratio!r}")
        # Raise: negative ratios would break the exact-sum distribution
        if ratio < 0:
            raise InvalidArgumentError(f"Each ratio must be >= 0, but $ratios[{index}] is: {ratio}")

    total = sum(ratios)

    # Raise: proportions of a zero total are undefined
    if total == 0:
        raise InvalidArgumentError(f"Cannot allocate because sum of $ratios is zero: {list(ratios)}")

    return total


def allocate_amount(amount: FixedDecimal, ratios: Sequence[int]) -> list[FixedDecimal]:
    """Split $amount into shares proportional to $ratios that add up exactly to $amount.

    Each share starts as `amount * ratio / total` truncated toward zero. Whatever is left
    over (always fewer hundredths than there are shares) is handed out one hundredth at a
    time, in input order, starting at index 0. Earlier ratios therefore receive the
    rounding surplus first. A negative $amount works the same way with negative hundredths.

    Example:
        `allocate_amount(FixedDecimal(100), [1, 1, 1])` returns shares `[34, 33, 33]`.

    Args:
        amount (FixedDecimal): Amount to split.
        ratios: Non-empty sequence of plain non-negative integers with a positive sum.

    Returns:
        list[FixedDecimal]: One share per ratio, in input order.

    Raises:
        EmptyInputError: If $ratios is empty.
        InvalidOperandError: If a ratio is not a plain integer.
        InvalidArgumentError: If a ratio is negative or the ratios sum to zero.
        AllocationInvariantError: If the remainder cannot be distributed within len($ratios) steps.
    """
    total = validate_ratios(ratios)
    total_decimal = FixedDecimal(total)

    shares = [FixedDecimal.div(FixedDecimal.static_multiply(amount, ratio), total_decimal) for ratio in ratios]
    remainder = FixedDecimal.minus(amount, FixedDecimal.sum(shares))

    logger.debug(f"Allocating {amount!r} by $ratios {list(ratios)}: truncated shares {shares}, remainder {remainder!r}")

    # Remainder has the sign of $amount; hand out one hundredth of that sign per step
    step = _ONE_UNIT if remainder.is_positive() else -_ONE_UNIT
    index = 0
    while not remainder.is_zero() and index < len(shares):
        shares[index] = FixedDecimal.plus(shares[index], step)
        remainder = FixedDecimal.minus(remainder, step)
        index += 1

    # Raise: truncation loses less than one hundredth per share, so nothing may be left
    if not remainder.is_zero():
        message = f"Allocation of {amount!r} by $ratios {list(ratios)} left undistributed remainder {remainder!r}"
        logger.error(message)
        raise AllocationInvariantError(message)

    return shares
