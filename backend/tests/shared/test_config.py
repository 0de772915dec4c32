"""Tests for shared/config.py."""

import pytest
from unittest.mock import patch
import os

from shared.config import Settings, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        settings = Settings(_env_file=None)
        assert settings.service_account_key == ""
        assert settings.firebase_credentials == ""
        assert settings.firebase_credentials_path == "config/service-account.json"
        assert settings.auth.claims.use_default is False
        assert settings.auth.reconciliation_failure == "empty"
        assert settings.messaging.registration_token is None

    def test_loads_from_env(self):
        """Settings should load flat values from environment variables."""
        with patch.dict(os.environ, {"SERVICE_ACCOUNT_KEY": '{"a": 1}', "FIREBASE_APP_NAME": "bridge-env"}):
            settings = Settings(_env_file=None)
            assert settings.firebase_app_name == "bridge-env"
            assert settings.service_account_key == '{"a": 1}'

    def test_loads_nested_from_env(self):
        """Nested sections should load with the double-underscore delimiter."""
        with patch.dict(os.environ, {
            "AUTH__CLAIMS__USE_DEFAULT": "true",
            "AUTH__RECONCILIATION_FAILURE": "propagate",
            "MESSAGING__REGISTRATION_TOKEN": "device-token",
        }):
            settings = Settings(_env_file=None)
            assert settings.auth.claims.use_default is True
            assert settings.auth.reconciliation_failure == "propagate"
            assert settings.messaging.registration_token == "device-token"

    def test_credentials_kept_as_raw_string(self):
        """FIREBASE_CREDENTIALS should be kept verbatim for the credential chain."""
        with patch.dict(os.environ, {"FIREBASE_CREDENTIALS": '{"project_id": "demo"}'}):
            settings = Settings(_env_file=None)
            assert settings.firebase_credentials == '{"project_id": "demo"}'

    def test_malformed_credentials_do_not_break_settings(self):
        """A malformed FIREBASE_CREDENTIALS should not fail settings loading."""
        with patch.dict(os.environ, {"FIREBASE_CREDENTIALS": "{broken"}):
            settings = Settings(_env_file=None)
            assert settings.firebase_credentials == "{broken"

    def test_rejects_unknown_reconciliation_policy(self):
        """Only the known reconciliation policies are accepted."""
        with pytest.raises(Exception):  # Pydantic ValidationError
            Settings(_env_file=None, auth={"reconciliation_failure": "retry"})


class TestGetSettings:
    def test_get_settings_returns_settings_instance(self):
        """get_settings should return a Settings instance."""
        get_settings.cache_clear()
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_get_settings_is_cached(self):
        """get_settings should return the same instance."""
        get_settings.cache_clear()
        assert get_settings() is get_settings()
