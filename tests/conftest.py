"""Test configuration and fixtures.

The test environment is loaded from .env.test before any fieldcheck module
reads its settings. Date of birth checks run against a pinned reference date
so results do not drift as the calendar moves.
"""

import logging
from datetime import date
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load test environment variables
test_env_path = Path(__file__).parent.parent / ".env.test"
load_dotenv(test_env_path, override=True)

from fieldcheck.config.logging_config import ROOT_LOGGER_NAME  # noqa: E402


@pytest.fixture
def today() -> date:
    """Fixed reference date for date of birth validation."""
    return date(2024, 6, 15)


@pytest.fixture
def debug_logs(caplog):
    """Capture DEBUG records emitted by the fieldcheck loggers."""
    caplog.set_level(logging.DEBUG, logger=ROOT_LOGGER_NAME)
    return caplog


@pytest.fixture
def clean_logger():
    """Restore the fieldcheck logger after a test configures it."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)
