"""Logging configuration for the deck package."""
import logging
import sys
from typing import Optional

from standard_deck.config import config

PACKAGE_LOGGER = "standard_deck"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a configured logger instance.

    Each named logger gets its own stdout handler and does not propagate,
    so a message is printed once even when the package logger is also set up.

    Args:
        name: Logger name, typically __name__ of the calling module.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(name or PACKAGE_LOGGER)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
        logger.propagate = False
        logger.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))

    return logger
