from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from money_math.domain.monetary.currency import Currency

LOG_LEVEL_ENV = "MONEY_MATH_LOG_LEVEL"
DEFAULT_CURRENCY_ENV = "MONEY_MATH_DEFAULT_CURRENCY"

_LOG_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Runtime settings read from the environment (and an optional `.env` file).

    Attributes:
        log_level: Name of the logging level used by `configure_logging`.
        default_currency_code: Code of the currency assumed when text has none.
    """

    log_level: str = "WARNING"
    default_currency_code: str = "USD"

    def __post_init__(self):
        # Raise: only standard logging level names are accepted
        if self.log_level not in _LOG_LEVEL_NAMES:
            raise ValueError(f"$log_level must be one of {_LOG_LEVEL_NAMES}, but provided value is: '{self.log_level}'")

    @property
    def log_level_value(self) -> int:
        """Numeric logging level (e.g. `logging.WARNING`)."""
        return logging.getLevelName(self.log_level)

    @property
    def default_currency(self) -> Currency:
        """Resolve $default_currency_code through the currency registry."""
        return Currency.from_str(self.default_currency_code)


def load_settings(env_file: str | os.PathLike | None = None) -> Settings:
    """Load settings from environment variables.

    Values from $env_file (or a `.env` file found by python-dotenv when None) are loaded
    first; variables already present in the environment win.

    Args:
        env_file: Optional path to a dotenv file.

    Returns:
        Settings: Settings with defaults applied for missing variables.
    """
    if env_file is not None:
        load_dotenv(Path(env_file), override=False)
    else:
        load_dotenv(override=False)

    return Settings(
        log_level=os.environ.get(LOG_LEVEL_ENV, Settings.log_level).strip().upper(),
        default_currency_code=os.environ.get(DEFAULT_CURRENCY_ENV, Settings.default_currency_code).strip().upper(),
    )
