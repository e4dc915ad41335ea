"""Centralized logging configuration.

Module loggers under ``habit_dna`` carry no level of their own; they
inherit from the package logger, which owns the single handler. Call
``configure_logging`` once at startup to apply the configured level.
"""

import logging
from typing import Optional


PACKAGE_LOGGER = "habit_dna"
DEFAULT_LEVEL = "INFO"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _level(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


def _attach_handler(logger: logging.Logger) -> None:
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)


def _package_logger() -> logging.Logger:
    logger = logging.getLogger(PACKAGE_LOGGER)
    if logger.level == logging.NOTSET:
        logger.setLevel(_level(DEFAULT_LEVEL))
    _attach_handler(logger)
    return logger


def configure_logging(level: str) -> logging.Logger:
    """Set the level for every ``habit_dna`` logger at once."""
    logger = _package_logger()
    logger.setLevel(_level(level))
    return logger


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Get a logger wired to the package handler.

    Loggers outside the package (scripts, ``__main__``) get their own
    handler. An explicit ``level`` pins that one logger.
    """
    logger = logging.getLogger(name)
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        _package_logger()
    else:
        _attach_handler(logger)
        if level is None and logger.level == logging.NOTSET:
            logger.setLevel(_level(DEFAULT_LEVEL))

    if level is not None:
        logger.setLevel(_level(level))

    return logger
