"""Configuration management - Centralized configuration for HabitDNA.

Provides environment-aware configuration with sensible defaults.
All configuration is loaded from environment variables with fallbacks.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from habit_dna.common.constants import FingerprintConstants, StoreConstants
from habit_dna.common.exceptions import ConfigurationError


ENV_PREFIX = "HABIT_DNA_"


class Environment(str, Enum):
    """Application environment."""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _parse_enum(enum_cls, name: str, default: str):
    raw = _env(name, default)
    try:
        return enum_cls(raw)
    except ValueError:
        raise ConfigurationError(
            f"Invalid value for {ENV_PREFIX}{name}: {raw!r}",
            details={"allowed": [m.value for m in enum_cls]},
        )


def _parse_int(name: str, default: int) -> int:
    raw = _env(name, str(default))
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}")


@dataclass
class Settings:
    """Central configuration object for HabitDNA.
    
    All settings can be overridden via environment variables prefixed with HABIT_DNA_.
    
    Example:
        HABIT_DNA_ENVIRONMENT=production
        HABIT_DNA_LOG_LEVEL=INFO
        HABIT_DNA_STORE_DIR=/var/lib/habit_dna
    """
    
    # Core settings
    environment: Environment = field(
        default_factory=lambda: _parse_enum(Environment, "ENVIRONMENT", "development")
    )
    debug: bool = field(
        default_factory=lambda: (_env("DEBUG", "false") or "").lower() == "true"
    )
    log_level: LogLevel = field(
        default_factory=lambda: _parse_enum(LogLevel, "LOG_LEVEL", "INFO")
    )
    
    # Storage
    store_dir: Optional[Path] = field(
        default_factory=lambda: Path(_env("STORE_DIR")) if _env("STORE_DIR") else None
    )
    
    # Fingerprint generation
    algorithm_version: str = field(
        default_factory=lambda: _env("ALGORITHM_VERSION", FingerprintConstants.ALGORITHM_VERSION)
    )
    max_regenerate_retries: int = field(
        default_factory=lambda: _parse_int(
            "MAX_REGENERATE_RETRIES", StoreConstants.DEFAULT_MAX_REGENERATE_RETRIES
        )
    )
    
    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.max_regenerate_retries < 0:
            raise ConfigurationError(
                "max_regenerate_retries must be >= 0",
                details={"value": self.max_regenerate_retries},
            )
        if not self.algorithm_version:
            raise ConfigurationError("algorithm_version must not be empty")
        
        # Warn about debug in production
        if self.environment == Environment.PRODUCTION and self.debug:
            import warnings
            warnings.warn(
                "Debug mode is enabled in production environment",
                RuntimeWarning,
                stacklevel=2
            )
    
    @property
    def effective_log_level(self) -> str:
        """Log level actually applied; DEBUG wins when debug is on."""
        return LogLevel.DEBUG.value if self.debug else self.log_level.value


# Singleton instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance.
    
    Returns:
        Settings: The global configuration singleton.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings (for testing)."""
    global _settings
    _settings = None
