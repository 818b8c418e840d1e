"""Unit tests for logger configuration."""

import io

import pytest
from loguru import logger as _logger

from syndication_ext.logger import get_logger, remove_handlers, setup_logger


@pytest.fixture(autouse=True)
def cleanup_handlers():
    """Drop sinks added by setup_logger after each test."""
    yield
    remove_handlers()


class TestSetupLogger:
    """Tests for setup_logger function."""

    def test_setup_logger_returns_handler_ids(self):
        """Test that setup_logger reports the sinks it added."""
        handler_ids = setup_logger()

        assert len(handler_ids) == 1

    def test_setup_logger_with_file(self, tmp_path):
        """Test that passing a log file enables the file handler."""
        log_file = tmp_path / "test.log"

        setup_logger(level="DEBUG", log_file=str(log_file), rotation="10 MB", retention="1 day")
        get_logger("syndication_ext.test").info("Test message")

        # Removing the handlers flushes the enqueued file sink
        remove_handlers()

        content = log_file.read_text(encoding="utf-8")
        assert "Test message" in content
        assert "INFO" in content
        assert "syndication_ext.test" in content

    def test_unbound_records_use_module_name(self, tmp_path):
        """Test that records logged without a bound name still format."""
        log_file = tmp_path / "test.log"

        setup_logger(log_file=str(log_file), format="{extra[name]}|{message}")
        _logger.warning("plain")
        remove_handlers()

        assert f"{__name__}|plain" in log_file.read_text(encoding="utf-8")

    def test_setup_logger_keeps_other_handlers(self):
        """Test that host sinks survive repeated setup."""
        output = io.StringIO()
        handler_id = _logger.add(output, format="{message}")
        try:
            setup_logger()
            setup_logger()
            _logger.info("still here")
        finally:
            _logger.remove(handler_id)

        assert "still here" in output.getvalue()


class TestGetLogger:
    """Tests for get_logger."""

    def test_get_logger_with_name(self):
        """Test that a named logger carries its name."""
        output = io.StringIO()
        handler_id = _logger.add(output, format="{extra[name]}|{message}")

        get_logger("syndication_ext.test").info("bound")

        _logger.remove(handler_id)
        assert "syndication_ext.test|bound" in output.getvalue()

    def test_get_logger_without_name(self):
        """Test that the root logger is returned."""
        assert get_logger() is _logger
