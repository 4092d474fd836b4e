from decimal import Decimal

import pytest

from money_math.domain.monetary.errors import InvalidOperandError
from money_math.domain.monetary.int_factor import IntFactor, is_plain_int


def test_int_factor_wraps_plain_int():
    factor = IntFactor(3)
    assert factor.value == 3
    assert int(factor) == 3
    assert factor == IntFactor(3)
    assert factor == 3
    assert IntFactor(IntFactor(-2)) == IntFactor(-2)
    assert IntFactor.coerce(factor) is factor
    assert IntFactor.coerce(5) == IntFactor(5)


@pytest.mark.parametrize("value", [1.0, Decimal("2"), "3", True, None])
def test_int_factor_rejects_non_int(value):
    with pytest.raises(InvalidOperandError):
        IntFactor(value)


def test_is_plain_int():
    assert is_plain_int(0)
    assert is_plain_int(-10**40)
    assert not is_plain_int(False)
    assert not is_plain_int(1.0)
