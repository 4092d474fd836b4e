import pytest

from money_math.domain.monetary.errors import InvalidArgumentError
from money_math.parsing.amount_parser import ParsedAmount, parse_units, string_to_units


@pytest.mark.parametrize(
    "text,expected",
    [
        ("399.99", 39999),
        ("12", 1200),
        ("12.", 1200),
        ("1,2", 120),
        ("-0.5", -50),
        ("+7", 700),
        ("-12,5", -1250),
        (".5", 50),
        ("  42.01  ", 4201),
        ("0", 0),
        ("99999999999999999999999999.99", 9999999999999999999999999999),
    ],
)
def test_string_to_units(text, expected):
    assert string_to_units(text) == expected


def test_parse_units_returns_sign_and_magnitude():
    assert parse_units("-3.07") == ParsedAmount(sign=-1, units=307)
    assert parse_units("3.07") == ParsedAmount(sign=1, units=307)
    assert parse_units("-3.07").signed_units() == -307


@pytest.mark.parametrize("text", ["", "-", ".", "abc", "1.234", "1..2", "1.2.3", "--1", "1 000", "1e5"])
def test_string_to_units_rejects_malformed(text):
    with pytest.raises(InvalidArgumentError, match="could not be parsed as money"):
        string_to_units(text)


def test_string_to_units_rejects_non_string():
    with pytest.raises(InvalidArgumentError):
        string_to_units(12)
