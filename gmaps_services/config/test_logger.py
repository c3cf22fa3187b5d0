"""
Unit tests for logger_module.py.

Tests cover:
- Logger initialization and handler attachment
- Console-only setup when no log file is given
- Idempotency of initialization
- Package-level convenience methods
"""

import logging
from unittest.mock import patch, MagicMock
import pytest

from . import logger_module
from .logger_module import (
    initialize_logger,
    get_logger,
    log_debug,
    log_info,
    log_warning,
    log_error,
    PACKAGE_LOGGER_NAME,
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset root logger state and the module-level flag around each test."""
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level

    root_logger.handlers.clear()
    logger_module._logger_initialized = False
    yield

    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)
    logger_module._logger_initialized = False


def _flush():
    for handler in logging.getLogger().handlers:
        handler.flush()


class TestInitializeLogger:
    """Test cases for initialize_logger function."""

    def test_default_level_and_handlers(self, tmp_path):
        """Console and file handlers are attached at INFO level."""
        log_file = tmp_path / "logs" / "maps.log"

        initialize_logger(log_file=str(log_file))

        root_logger = logging.getLogger()
        assert root_logger.level == logging.INFO
        assert len(root_logger.handlers) == 2
        handler_types = [type(h).__name__ for h in root_logger.handlers]
        assert "StreamHandler" in handler_types
        assert "FileHandler" in handler_types
        assert log_file.exists()

    def test_console_only(self):
        """Passing log_file=None attaches only the console handler."""
        initialize_logger(log_level="WARNING", log_file=None)

        root_logger = logging.getLogger()
        assert root_logger.level == logging.WARNING
        assert len(root_logger.handlers) == 1
        assert not isinstance(root_logger.handlers[0], logging.FileHandler)

    def test_invalid_level_defaults_to_info(self, tmp_path):
        initialize_logger(log_level="LOUD", log_file=str(tmp_path / "maps.log"))

        assert logging.getLogger().level == logging.INFO

    def test_idempotency(self, tmp_path):
        """Repeated calls don't duplicate handlers or change the level."""
        log_file = tmp_path / "maps.log"

        initialize_logger(log_file=str(log_file))
        initialize_logger(log_file=str(log_file))
        initialize_logger(log_level="DEBUG", log_file=str(log_file))

        root_logger = logging.getLogger()
        assert len(root_logger.handlers) == 2
        assert root_logger.level == logging.INFO

    def test_file_handler_captures_debug(self, tmp_path):
        """The file handler records everything the root level lets through."""
        log_file = tmp_path / "maps.log"
        initialize_logger(log_level="DEBUG", log_file=str(log_file))

        log_debug("retry schedule computed")
        _flush()

        content = log_file.read_text()
        assert "DEBUG" in content
        assert "retry schedule computed" in content


class TestConvenienceMethods:
    """Test cases for package-level logging helpers."""

    def test_records_use_package_logger(self, caplog):
        with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER_NAME):
            log_info("geocoding client ready")
            log_warning("retrying request")
            log_error("request failed")

        names = {record.name for record in caplog.records}
        assert names == {PACKAGE_LOGGER_NAME}
        assert [r.levelname for r in caplog.records] == ["INFO", "WARNING", "ERROR"]

    def test_messages_reach_log_file(self, tmp_path):
        log_file = tmp_path / "maps.log"
        initialize_logger(log_level="INFO", log_file=str(log_file))

        log_info("Places client initialized")
        log_warning("OVER_QUERY_LIMIT, retrying")
        log_error("REQUEST_DENIED")
        _flush()

        content = log_file.read_text()
        assert "Places client initialized" in content
        assert "OVER_QUERY_LIMIT, retrying" in content
        assert "REQUEST_DENIED" in content

    def test_helpers_work_before_initialization(self):
        """Helpers must not raise when no handlers are configured."""
        log_warning("Warning without initialization")

    def test_get_logger_name(self):
        assert get_logger().name == PACKAGE_LOGGER_NAME

    @patch('gmaps_services.config.logger_module.logging.getLogger')
    def test_helpers_call_correct_levels(self, mock_get_logger):
        mock_logger = MagicMock()
        mock_get_logger.return_value = mock_logger

        log_debug("debug message")
        log_info("info message")
        log_warning("warning message")
        log_error("error message")

        mock_get_logger.assert_called_with(PACKAGE_LOGGER_NAME)
        mock_logger.debug.assert_called_once_with("debug message")
        mock_logger.info.assert_called_once_with("info message")
        mock_logger.warning.assert_called_once_with("warning message")
        mock_logger.error.assert_called_once_with("error message")
