"""
Unit tests for config_module.py.

Tests cover:
- .env file loading and environment variable overriding
- get_config and the typed getters
- validate_config passing and failing scenarios
- client_settings_from_env collection
"""

import os
import logging
import pytest

from .config_module import (
    load_config,
    get_config,
    get_int_config,
    get_float_config,
    validate_config,
    client_settings_from_env,
    ConfigError,
    API_KEY_ENV,
    LANGUAGE_ENV,
    REGION_ENV,
    CHANNEL_ENV,
    TIMEOUT_ENV,
    MAX_RETRIES_ENV,
)


@pytest.fixture
def clean_maps_env(monkeypatch):
    """Remove every GOOGLE_MAPS_* variable for the duration of a test."""
    for key in (API_KEY_ENV, LANGUAGE_ENV, REGION_ENV, CHANNEL_ENV,
                TIMEOUT_ENV, MAX_RETRIES_ENV):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


class TestLoadConfig:
    """Test cases for load_config function."""

    def test_load_existing_file(self, tmp_path, clean_maps_env, caplog):
        env_file = tmp_path / ".env"
        env_file.write_text(f"{API_KEY_ENV}=file_key\n{REGION_ENV}=de\n")

        with caplog.at_level(logging.INFO):
            loaded = load_config(str(env_file))

        assert loaded is True
        assert os.getenv(API_KEY_ENV) == "file_key"
        assert os.getenv(REGION_ENV) == "de"
        assert f"Loaded configuration from {env_file}" in caplog.text

    def test_load_missing_file(self, caplog):
        missing = "/path/that/does/not/exist/.env"

        with caplog.at_level(logging.WARNING):
            loaded = load_config(missing)

        assert loaded is False
        assert f"Configuration file {missing} not found" in caplog.text

    def test_override_existing_env(self, tmp_path, clean_maps_env):
        clean_maps_env.setenv(API_KEY_ENV, "shell_key")
        env_file = tmp_path / ".env"
        env_file.write_text(f"{API_KEY_ENV}=file_key\n")

        load_config(str(env_file))

        assert os.getenv(API_KEY_ENV) == "file_key"

    def test_no_override(self, tmp_path, clean_maps_env):
        clean_maps_env.setenv(API_KEY_ENV, "shell_key")
        env_file = tmp_path / ".env"
        env_file.write_text(f"{API_KEY_ENV}=file_key\n")

        load_config(str(env_file), override=False)

        assert os.getenv(API_KEY_ENV) == "shell_key"


class TestGetConfig:
    """Test cases for get_config and typed getters."""

    def test_existing_key(self, clean_maps_env):
        clean_maps_env.setenv(LANGUAGE_ENV, "fr")
        assert get_config(LANGUAGE_ENV) == "fr"

    def test_missing_key_default(self, clean_maps_env):
        assert get_config(LANGUAGE_ENV, "en") == "en"
        assert get_config(LANGUAGE_ENV) is None

    def test_empty_value_is_returned(self, clean_maps_env):
        clean_maps_env.setenv(REGION_ENV, "")
        assert get_config(REGION_ENV, "us") == ""

    def test_int_config(self, clean_maps_env):
        clean_maps_env.setenv(MAX_RETRIES_ENV, "3")
        assert get_int_config(MAX_RETRIES_ENV) == 3

    def test_int_config_blank_uses_default(self, clean_maps_env):
        clean_maps_env.setenv(MAX_RETRIES_ENV, "  ")
        assert get_int_config(MAX_RETRIES_ENV, 1) == 1

    def test_int_config_invalid(self, clean_maps_env):
        clean_maps_env.setenv(MAX_RETRIES_ENV, "three")
        with pytest.raises(ConfigError) as exc_info:
            get_int_config(MAX_RETRIES_ENV)
        assert "must be an integer" in str(exc_info.value)

    def test_float_config(self, clean_maps_env):
        clean_maps_env.setenv(TIMEOUT_ENV, "2.5")
        assert get_float_config(TIMEOUT_ENV) == 2.5

    def test_float_config_invalid(self, clean_maps_env):
        clean_maps_env.setenv(TIMEOUT_ENV, "soon")
        with pytest.raises(ConfigError):
            get_float_config(TIMEOUT_ENV)


class TestValidateConfig:
    """Test cases for validate_config function."""

    def test_all_present(self, clean_maps_env, caplog):
        clean_maps_env.setenv(API_KEY_ENV, "key")
        with caplog.at_level(logging.INFO):
            validate_config([API_KEY_ENV])
        assert "Configuration validation passed" in caplog.text

    def test_missing_key(self, clean_maps_env, caplog):
        with pytest.raises(ConfigError) as exc_info:
            validate_config([API_KEY_ENV])

        assert f"Missing keys: {API_KEY_ENV}" in str(exc_info.value)
        assert "Configuration validation failed" in caplog.text

    def test_whitespace_is_empty(self, clean_maps_env):
        clean_maps_env.setenv(API_KEY_ENV, "   ")
        with pytest.raises(ConfigError) as exc_info:
            validate_config([API_KEY_ENV])
        assert f"Empty keys: {API_KEY_ENV}" in str(exc_info.value)

    def test_missing_and_empty(self, clean_maps_env):
        clean_maps_env.setenv(REGION_ENV, "")
        with pytest.raises(ConfigError) as exc_info:
            validate_config([API_KEY_ENV, REGION_ENV])

        message = str(exc_info.value)
        assert f"Missing keys: {API_KEY_ENV}" in message
        assert f"Empty keys: {REGION_ENV}" in message


class TestClientSettingsFromEnv:
    """Test cases for client_settings_from_env."""

    def test_nothing_set(self, clean_maps_env):
        assert client_settings_from_env() == {}

    def test_all_set(self, clean_maps_env):
        clean_maps_env.setenv(LANGUAGE_ENV, "en")
        clean_maps_env.setenv(REGION_ENV, "gb")
        clean_maps_env.setenv(CHANNEL_ENV, "web")
        clean_maps_env.setenv(TIMEOUT_ENV, "5")
        clean_maps_env.setenv(MAX_RETRIES_ENV, "2")

        assert client_settings_from_env() == {
            "language": "en",
            "region": "gb",
            "channel": "web",
            "timeout": 5.0,
            "max_retries": 2,
        }

    def test_blank_strings_skipped(self, clean_maps_env):
        clean_maps_env.setenv(LANGUAGE_ENV, "")
        assert "language" not in client_settings_from_env()
