"""
Test suite for config.py module.

Covers default values, environment loading, validation and caching.
"""

import os
import math
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from google_adwords.core.config import Settings, get_settings, reload_settings
from google_adwords.__version__ import __version__


class TestSettingsDefaults:
    """Test Settings class with default values."""

    def test_credentials_default_to_none(self):
        """Credentials have no defaults."""
        test_settings = Settings(_env_file=None)

        assert test_settings.GOOGLE_ADWORDS_MANAGER_ID is None
        assert test_settings.GOOGLE_ADWORDS_CLIENT_ID is None
        assert test_settings.GOOGLE_ADWORDS_CLIENT_SECRET is None
        assert test_settings.GOOGLE_ADWORDS_REFRESH_TOKEN is None
        assert test_settings.GOOGLE_ADWORDS_DEVELOPER_TOKEN is None

    def test_client_and_retry_defaults(self):
        """Test client library and retry default values."""
        test_settings = Settings(_env_file=None)

        assert test_settings.GOOGLE_ADWORDS_USE_PROTO_PLUS is True
        assert test_settings.GOOGLE_ADWORDS_API_LOG_LEVEL == "ERROR"
        assert test_settings.GOOGLE_ADWORDS_PAGE_SIZE == 800
        assert test_settings.GOOGLE_ADWORDS_MAX_RETRIES == 5
        assert math.isclose(test_settings.GOOGLE_ADWORDS_DEFAULT_RETRY_AFTER, 30.0)
        assert math.isclose(test_settings.GOOGLE_ADWORDS_MAX_BACKOFF, 600.0)

    def test_application_defaults(self):
        test_settings = Settings(_env_file=None)

        assert test_settings.LOG_LEVEL == "INFO"
        assert test_settings.LOG_FORMAT == "json"
        assert test_settings.PROJECT_NAME == "google-adwords"
        assert test_settings.VERSION == __version__


class TestSettingsEnvironmentLoading:
    """Test Settings loading from environment variables."""

    @patch.dict(os.environ, {
        "GOOGLE_ADWORDS_MANAGER_ID": "111-222-3333",
        "GOOGLE_ADWORDS_CLIENT_ID": "env-client",
        "GOOGLE_ADWORDS_CLIENT_SECRET": "env-secret",
        "GOOGLE_ADWORDS_REFRESH_TOKEN": "env-refresh",
        "GOOGLE_ADWORDS_DEVELOPER_TOKEN": "env-developer",
    })
    def test_credentials_from_environment(self):
        test_settings = Settings(_env_file=None)

        assert test_settings.GOOGLE_ADWORDS_MANAGER_ID == "111-222-3333"
        assert test_settings.GOOGLE_ADWORDS_CLIENT_ID == "env-client"
        assert test_settings.GOOGLE_ADWORDS_CLIENT_SECRET == "env-secret"
        assert test_settings.GOOGLE_ADWORDS_REFRESH_TOKEN == "env-refresh"
        assert test_settings.GOOGLE_ADWORDS_DEVELOPER_TOKEN == "env-developer"

    @patch.dict(os.environ, {
        "google_adwords_max_retries": "2",
        "GOOGLE_ADWORDS_API_LOG_LEVEL": "warning",
        "LOG_LEVEL": "debug",
    })
    def test_case_insensitive_names_and_log_levels(self):
        """Env names are case-insensitive and log levels are upper-cased."""
        test_settings = Settings(_env_file=None)

        assert test_settings.GOOGLE_ADWORDS_MAX_RETRIES == 2
        assert test_settings.GOOGLE_ADWORDS_API_LOG_LEVEL == "WARNING"
        assert test_settings.LOG_LEVEL == "DEBUG"

    @patch.dict(os.environ, {"GOOGLE_ADWORDS_MAX_RETRIES": "-1"})
    def test_negative_max_retries_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_env_file_is_read(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("GOOGLE_ADWORDS_DEVELOPER_TOKEN=from-dotenv\n")
        monkeypatch.chdir(tmp_path)

        test_settings = Settings()

        assert test_settings.GOOGLE_ADWORDS_DEVELOPER_TOKEN == "from-dotenv"


class TestSettingsCaching:
    """Test get_settings caching behaviour."""

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_reload_settings_picks_up_changes(self):
        first = get_settings()

        with patch.dict(os.environ, {"GOOGLE_ADWORDS_MAX_RETRIES": "9"}):
            reloaded = reload_settings()

        assert reloaded is not first
        assert reloaded.GOOGLE_ADWORDS_MAX_RETRIES == 9
