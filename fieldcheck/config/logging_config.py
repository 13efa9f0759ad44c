"""Logging setup for the fieldcheck logger hierarchy."""

import logging
from typing import TextIO

from pythonjsonlogger import jsonlogger

from fieldcheck.config.settings import Settings
from fieldcheck.config.settings import settings as default_settings

ROOT_LOGGER_NAME = "fieldcheck"

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
JSON_FIELDS = "%(asctime)s %(levelname)s %(name)s %(message)s"


def build_formatter(log_format: str) -> logging.Formatter:
    """Return the formatter for a ``log_format`` setting value."""
    if log_format == "json":
        return jsonlogger.JsonFormatter(JSON_FIELDS)
    return logging.Formatter(LOG_FORMAT)


def configure_logging(settings: Settings | None = None, stream: TextIO | None = None) -> logging.Logger:
    """Attach a stream handler to the ``fieldcheck`` logger.

    Level and output format come from settings. Calling this again replaces the
    handler installed by the previous call instead of stacking a second one.

    Args:
        settings: Settings to read from, defaults to the module-level instance
        stream: Output stream, defaults to stderr

    Returns:
        The configured ``fieldcheck`` logger

    """
    settings = settings or default_settings

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_fieldcheck_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(build_formatter(settings.log_format))
    handler._fieldcheck_handler = True  # type: ignore[attr-defined]

    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if settings.debug else settings.log_level)

    logger.debug(f"Logging configured for {settings.app_name} {settings.app_version} ({settings.log_format})")
    return logger
