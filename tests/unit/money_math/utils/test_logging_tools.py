import logging
import os

import pytest

from money_math.config import LOG_LEVEL_ENV
from money_math.utils.logging_tools import PACKAGE_LOGGER_NAME, ShortLevelFormatter, configure_logging


@pytest.fixture
def package_logger(monkeypatch):
    # load_dotenv writes into os.environ, so give each test its own copy
    environ = dict(os.environ)
    environ.pop(LOG_LEVEL_ENV, None)
    monkeypatch.setattr(os, "environ", environ)

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    yield logger
    logger.setLevel(logging.NOTSET)


def test_configure_logging_is_idempotent(package_logger):
    logger = configure_logging(logging.INFO)
    handler_count = len(logger.handlers)

    again = configure_logging("DEBUG")

    assert again is logger is package_logger
    assert len(logger.handlers) == handler_count
    assert logger.level == logging.DEBUG


def test_configure_logging_uses_configured_level(package_logger):
    os.environ[LOG_LEVEL_ENV] = "error"
    assert configure_logging().level == logging.ERROR


def test_configure_logging_defaults_to_warning(package_logger):
    assert configure_logging().level == logging.WARNING


def test_short_level_formatter():
    record = logging.LogRecord("money_math.test", logging.WARNING, __file__, 1, "remainder left", None, None)
    text = ShortLevelFormatter().format(record)
    assert "| WAR | money_math.test | remainder left" in text
