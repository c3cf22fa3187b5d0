"""
Configuration management for the Google Maps web service clients.

Loads environment variables from a .env file, reads typed configuration
values, and validates that required keys (such as the API key) are set.
The clients only fall back to this module for the API key; every other
setting is a constructor option.
"""

import os
import logging
from typing import Any, Dict, List, Optional
from dotenv import load_dotenv


API_KEY_ENV = "GOOGLE_MAPS_API_KEY"
LANGUAGE_ENV = "GOOGLE_MAPS_LANGUAGE"
REGION_ENV = "GOOGLE_MAPS_REGION"
CHANNEL_ENV = "GOOGLE_MAPS_CHANNEL"
TIMEOUT_ENV = "GOOGLE_MAPS_TIMEOUT"
MAX_RETRIES_ENV = "GOOGLE_MAPS_MAX_RETRIES"


class ConfigError(Exception):
    """Raised when configuration is missing or malformed."""
    pass


def load_config(env_path: str = ".env", override: bool = True) -> bool:
    """
    Load environment variables from a .env file.

    Args:
        env_path: Path to the .env file (default: ".env")
        override: Whether .env values replace variables already set

    Returns:
        True if the file existed and was loaded
    """
    logger = logging.getLogger(__name__)

    if os.path.exists(env_path):
        load_dotenv(env_path, override=override)
        logger.info(f"Loaded configuration from {env_path}")
        return True

    logger.warning(f"Configuration file {env_path} not found, using system environment variables only")
    return False


def get_config(key: str, default: Any = None) -> Any:
    """
    Get a configuration value from environment variables.

    Args:
        key: Environment variable key
        default: Default value if key not found

    Returns:
        Configuration value or default
    """
    logger = logging.getLogger(__name__)

    value = os.getenv(key)
    if value is None:
        if default is not None:
            logger.debug(f"Configuration key '{key}' not found, using default value: {default}")
        else:
            logger.debug(f"Configuration key '{key}' not found and no default provided")
        return default

    return value


def get_int_config(key: str, default: Optional[int] = None) -> Optional[int]:
    """Read an integer setting; blank values count as unset."""
    raw = get_config(key)
    if raw is None or not str(raw).strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"Configuration key '{key}' must be an integer, got {raw!r}")


def get_float_config(key: str, default: Optional[float] = None) -> Optional[float]:
    """Read a float setting; blank values count as unset."""
    raw = get_config(key)
    if raw is None or not str(raw).strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"Configuration key '{key}' must be a number, got {raw!r}")


def validate_config(required_keys: List[str]) -> None:
    """
    Validate that all required configuration keys are present and non-empty.

    Args:
        required_keys: List of required environment variable keys

    Raises:
        ConfigError: If any required key is missing or empty
    """
    logger = logging.getLogger(__name__)
    missing_keys = []
    empty_keys = []

    for key in required_keys:
        value = os.getenv(key)
        if value is None:
            missing_keys.append(key)
        elif value.strip() == "":
            empty_keys.append(key)

    if missing_keys or empty_keys:
        error_msg = "Configuration validation failed:"
        if missing_keys:
            error_msg += f" Missing keys: {', '.join(missing_keys)}."
        if empty_keys:
            error_msg += f" Empty keys: {', '.join(empty_keys)}."

        logger.error(error_msg)
        raise ConfigError(error_msg)

    logger.info(f"Configuration validation passed for keys: {', '.join(required_keys)}")


def client_settings_from_env() -> Dict[str, Any]:
    """
    Collect optional client settings from the environment.

    Only keys that are actually set are returned, so the result can be
    splatted into a client constructor without clobbering its defaults.

    Returns:
        Dictionary with any of 'language', 'region', 'channel', 'timeout'
        and 'max_retries'
    """
    settings: Dict[str, Any] = {}

    for name, env_key in (("language", LANGUAGE_ENV),
                          ("region", REGION_ENV),
                          ("channel", CHANNEL_ENV)):
        value = get_config(env_key)
        if value:
            settings[name] = value

    timeout = get_float_config(TIMEOUT_ENV)
    if timeout is not None:
        settings["timeout"] = timeout

    max_retries = get_int_config(MAX_RETRIES_ENV)
    if max_retries is not None:
        settings["max_retries"] = max_retries

    return settings
