"""Tests for configuration settings.

Tests the Settings class and environment variable handling.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from habit_dna.common.config.settings import (
    Environment,
    LogLevel,
    Settings,
    get_settings,
    reset_settings,
)
from habit_dna.common.exceptions import ConfigurationError


class TestSettings:
    """Tests for Settings class."""
    
    def test_default_settings(self):
        """Test Settings with default values."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()
            
            assert settings.environment == Environment.DEVELOPMENT
            assert settings.debug is False
            assert settings.log_level == LogLevel.INFO
            assert settings.store_dir is None
            assert settings.algorithm_version == "1.0"
            assert settings.max_regenerate_retries == 3
    
    def test_values_from_env_vars(self):
        env = {
            "HABIT_DNA_ENVIRONMENT": "staging",
            "HABIT_DNA_LOG_LEVEL": "WARNING",
            "HABIT_DNA_STORE_DIR": "/tmp/habit_dna",
            "HABIT_DNA_ALGORITHM_VERSION": "1.1",
            "HABIT_DNA_MAX_REGENERATE_RETRIES": "5",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings()
            
            assert settings.environment == Environment.STAGING
            assert settings.log_level == LogLevel.WARNING
            assert settings.store_dir == Path("/tmp/habit_dna")
            assert settings.algorithm_version == "1.1"
            assert settings.max_regenerate_retries == 5
    
    def test_debug_forces_debug_log_level(self):
        with patch.dict(os.environ, {"HABIT_DNA_DEBUG": "true"}, clear=True):
            settings = Settings()
            
            assert settings.debug is True
            assert settings.effective_log_level == "DEBUG"
    
    def test_invalid_environment_raises(self):
        with patch.dict(os.environ, {"HABIT_DNA_ENVIRONMENT": "moon"}, clear=True):
            with pytest.raises(ConfigurationError) as exc_info:
                Settings()
            
            assert exc_info.value.code == "CONFIG_ERROR"
    
    def test_non_integer_retries_raises(self):
        with patch.dict(os.environ, {"HABIT_DNA_MAX_REGENERATE_RETRIES": "many"}, clear=True):
            with pytest.raises(ConfigurationError):
                Settings()
    
    def test_negative_retries_raises(self):
        with pytest.raises(ConfigurationError):
            Settings(max_regenerate_retries=-1)
    
    def test_debug_in_production_warns(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.warns(RuntimeWarning):
                Settings(environment=Environment.PRODUCTION, debug=True)


class TestSettingsSingleton:
    
    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
    
    def test_reset_settings(self):
        first = get_settings()
        reset_settings()
        
        assert get_settings() is not first
