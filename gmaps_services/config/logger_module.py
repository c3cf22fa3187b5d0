"""
Logging utilities for the Google Maps web service clients.

Provides one-time logging setup for applications (the CLI) and thin
helpers the library modules use so all records go through the
"gmaps_services" logger.
"""

import logging
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER_NAME = "gmaps_services"

# Flag to track if logger has been initialized to ensure idempotency
_logger_initialized = False


def initialize_logger(log_level: str = "INFO",
                      log_file: Optional[str] = "logs/gmaps_services.log") -> None:
    """
    Initialize the root logger with a console handler and an optional file handler.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file, or None for console output only
    """
    global _logger_initialized

    if _logger_initialized:
        return

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Clear any existing handlers to prevent duplicates
    root_logger.handlers.clear()

    console_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

    _logger_initialized = True

    root_logger.info(f"Logger initialized with level {log_level}, file: {log_file or 'none'}")


def get_logger() -> logging.Logger:
    """Return the package logger."""
    return logging.getLogger(PACKAGE_LOGGER_NAME)


def log_debug(message: str) -> None:
    get_logger().debug(message)


def log_info(message: str) -> None:
    get_logger().info(message)


def log_warning(message: str) -> None:
    """Log a warning, e.g. a retry about to be scheduled."""
    get_logger().warning(message)


def log_error(message: str) -> None:
    """Log an error on the package logger (terminal failures, CLI errors)."""
    get_logger().error(message)
