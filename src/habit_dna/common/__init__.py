"""Common utilities - logging, config, exceptions."""

from habit_dna.common.logging.logger import configure_logging, get_logger
from habit_dna.common.config import Settings, get_settings, reset_settings
from habit_dna.common.exceptions import (
    HabitDNAException,
    ConfigurationError,
    ValidationError,
    StoreError,
    RevisionConflictError,
    FingerprintNotFoundError,
)

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    # Config
    "Settings",
    "get_settings",
    "reset_settings",
    # Exceptions
    "HabitDNAException",
    "ConfigurationError",
    "ValidationError",
    "StoreError",
    "RevisionConflictError",
    "FingerprintNotFoundError",
]
