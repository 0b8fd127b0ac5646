"""Tests for application configuration."""

import os
from unittest.mock import patch

from src.config import Settings, get_settings


class TestSettingsDefaults:
    """Tests for default configuration values."""

    def test_default_seed_is_none(self):
        """Dice are unseeded by default."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
            assert settings.dice_seed is None

    def test_default_debug_is_false(self):
        """Debug mode should be off by default."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
            assert settings.debug is False

    def test_default_log_level(self):
        """Default log level should be WARNING."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
            assert settings.log_level == "WARNING"


class TestSettingsFromEnvironment:
    """Tests for loading settings from environment variables."""

    def test_seed_from_env(self):
        """DICE_SEED is parsed as an integer."""
        with patch.dict(os.environ, {"DICE_SEED": "42"}, clear=False):
            assert Settings(_env_file=None).dice_seed == 42

    def test_env_is_case_insensitive(self):
        """Environment variable names are case-insensitive."""
        with patch.dict(os.environ, {"dice_seed": "7"}, clear=False):
            assert Settings(_env_file=None).dice_seed == 7

    def test_debug_from_env(self):
        """DEBUG=true enables debug mode."""
        with patch.dict(os.environ, {"DEBUG": "true"}, clear=False):
            assert Settings(_env_file=None).debug is True

    def test_env_file_is_read(self, tmp_path):
        """Settings can come from a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("DICE_SEED=99\nLOG_LEVEL=INFO\n")
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=env_file)
        assert settings.dice_seed == 99
        assert settings.log_level == "INFO"


class TestGetSettings:
    """Tests for the cached settings accessor."""

    def test_get_settings_is_cached(self):
        """get_settings returns the same instance."""
        assert get_settings() is get_settings()


class TestSettingsExtraKeys:
    """Tests for keys that belong to other applications."""

    def test_unknown_env_file_keys_ignored(self, tmp_path):
        """Unknown keys in .env are ignored instead of rejected."""
        env_file = tmp_path / ".env"
        env_file.write_text("DATABASE_URL=postgresql://x/y\nDICE_SEED=3\n")
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=env_file)
        assert settings.dice_seed == 3
        assert not hasattr(settings, "database_url")
