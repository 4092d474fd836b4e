__version__ = "0.1.0"

from money_math.config import Settings, load_settings
from money_math.domain.monetary.currency import Currency
from money_math.domain.monetary.fixed_decimal import FixedDecimal
from money_math.domain.monetary.money import Money
from money_math.utils.logging_tools import configure_logging

__all__ = ["Currency", "FixedDecimal", "Money", "Settings", "load_settings", "configure_logging"]
