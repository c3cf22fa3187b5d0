"""
Configuration and logging helpers shared by the Google Maps clients.
"""

from .config_module import (
    ConfigError,
    client_settings_from_env,
    get_config,
    load_config,
    validate_config,
)
from .logger_module import initialize_logger

__all__ = [
    "ConfigError",
    "client_settings_from_env",
    "get_config",
    "initialize_logger",
    "load_config",
    "validate_config",
]
