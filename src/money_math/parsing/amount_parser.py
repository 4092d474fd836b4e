"""Parsing of user-entered amounts such as '399.99', '-12,5' or '+7'.

This is a boundary adapter: it turns text into a signed integer of hundredths, which is
exactly what `FixedDecimal` and `Money` take as input.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from money_math.domain.monetary.errors import InvalidArgumentError

_AMOUNT_PATTERN = re.compile(r"^(?P<sign>[-+])?(?P<digits>[0-9]*)(?P<separator>[.,])?(?P<decimal1>[0-9])?(?P<decimal2>[0-9])?$")


class ParsedAmount(NamedTuple):
    """Result of parsing an amount.

    Attributes:
        sign: -1 for negative input, +1 otherwise.
        units: Non-negative number of hundredths.
    """

    sign: int
    units: int

    def signed_units(self) -> int:
        return self.sign * self.units


def parse_units(text: str) -> ParsedAmount:
    """Parse $text into a `(sign, units)` pair.

    Accepted shape is `[sign]digits[separator][d1][d2]` where sign is '+' or '-',
    separator is '.' or ',' and at most two fractional digits follow. Missing fractional
    digits count as zero, so '12' and '12.' are both 1200 units and '1,2' is 120.

    Args:
        text (str): Amount text; surrounding whitespace is ignored.

    Returns:
        ParsedAmount: Sign and magnitude in hundredths.

    Raises:
        InvalidArgumentError: If $text is not a string or does not look like an amount.
    """
    if not isinstance(text, str):
        raise InvalidArgumentError(f"The value could not be parsed as money: {text!r}")

    match = _AMOUNT_PATTERN.match(text.strip())

    # Raise: shape must match and at least one digit must be present ('', '-', '.' are rejected)
    if match is None or not (match["digits"] or match["decimal1"]):
        raise InvalidArgumentError(f"The value could not be parsed as money: '{text}'")

    digits = match["digits"] or "0"
    decimal1 = match["decimal1"] or "0"
    decimal2 = match["decimal2"] or "0"

    sign = -1 if match["sign"] == "-" else 1
    units = int(digits + decimal1 + decimal2, 10)
    return ParsedAmount(sign=sign, units=units)


def string_to_units(text: str) -> int:
    """Parse $text into a signed integer of hundredths ('-0.5' -> -50)."""
    return parse_units(text).signed_units()
