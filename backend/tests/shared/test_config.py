"""Tests for shared/config.py."""

from unittest.mock import patch
import os

import pytest
from pydantic import ValidationError

from shared.config import Settings, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        assert settings.app_name == "PrismWorlds"
        assert settings.debug is False
        assert settings.port == 8000
        assert settings.app_version == "0.1.0"
        assert settings.log_level == "INFO"
        assert settings.frontend_url == "http://localhost:5173"
        assert settings.supabase_url == ""
        assert settings.supabase_anon_key == ""

    def test_loads_from_env(self):
        """Settings should load from environment variables."""
        with patch.dict(os.environ, {"DEBUG": "true", "PORT": "9000", "LOG_LEVEL": "DEBUG"}):
            settings = Settings()
            assert settings.debug is True
            assert settings.port == 9000
            assert settings.log_level == "DEBUG"

    def test_loads_supabase_config_from_env(self):
        """Settings should load the two Supabase credentials from the environment."""
        with patch.dict(os.environ, {
            "SUPABASE_URL": "https://test.supabase.co",
            "SUPABASE_ANON_KEY": "test-anon-key",
        }):
            settings = Settings()
            assert settings.supabase_url == "https://test.supabase.co"
            assert settings.supabase_anon_key == "test-anon-key"

    def test_env_vars_are_case_insensitive(self):
        """Lower-case variable names should work too."""
        with patch.dict(os.environ, {"supabase_url": "https://lower.supabase.co"}):
            settings = Settings()
            assert settings.supabase_url == "https://lower.supabase.co"


    def test_log_level_is_normalized(self):
        """Log level should be upper-cased."""
        settings = Settings(_env_file=None, log_level="debug")
        assert settings.log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        """Unknown log levels should fail validation."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="chatty")


class TestGetSettings:
    def test_get_settings_returns_settings_instance(self):
        """get_settings should return a Settings instance."""
        get_settings.cache_clear()
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_get_settings_caches(self):
        """get_settings should return cached instance."""
        get_settings.cache_clear()
        settings1 = get_settings()
        settings2 = get_settings()
        assert settings1 is settings2
