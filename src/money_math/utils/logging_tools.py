from __future__ import annotations

import logging

from money_math.config import load_settings

PACKAGE_LOGGER_NAME = "money_math"


class ShortLevelFormatter(logging.Formatter):
    """Formatter printing the level as its first three letters (WAR, ERR, DEB, ...)."""

    def __init__(self):
        super().__init__(fmt="%(asctime)s | %(shortlevel)s | %(name)s | %(message)s", datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record) -> str:
        record.shortlevel = record.levelname[:3]
        return super().format(record)


def configure_logging(level: int | str | None = None) -> logging.Logger:
    """Attach one stream handler to the package logger and return it.

    Args:
        level: Logging level. If None, `MONEY_MATH_LOG_LEVEL` from `load_settings()` is used.

    Calling this again only updates the level; no second handler is added.
    """
    if level is None:
        level = load_settings().log_level_value

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)

    if not any(isinstance(handler.formatter, ShortLevelFormatter) for handler in package_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(ShortLevelFormatter())
        package_logger.addHandler(handler)

    return package_logger
