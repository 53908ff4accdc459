"""Shared logger instance for the Thin configuration package."""

import logging

from .config import LOGGER_NAME

_LOGGER_INSTANCE = None


def get_logger() -> logging.Logger:
    """Return a singleton logging.Logger instance."""
    global _LOGGER_INSTANCE
    if _LOGGER_INSTANCE is None:
        _LOGGER_INSTANCE = logging.getLogger(LOGGER_NAME)
        _LOGGER_INSTANCE.addHandler(logging.NullHandler())
    return _LOGGER_INSTANCE


# Convenience alias so other modules can `from .logger import logger`
logger = get_logger()
