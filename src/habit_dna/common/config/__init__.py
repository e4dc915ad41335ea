"""Configuration module."""

from habit_dna.common.config.settings import (
    Environment,
    LogLevel,
    Settings,
    get_settings,
    reset_settings,
)

__all__ = [
    "Environment",
    "LogLevel",
    "Settings",
    "get_settings",
    "reset_settings",
]
