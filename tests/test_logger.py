"""Tests for logger setup."""

import logging

from spray_planner.logger import setup_logger


class TestSetupLogger:
    """Tests for setup_logger."""

    def test_console_only(self, monkeypatch):
        """Test that only a console handler is added without a log file."""
        monkeypatch.delenv("LOG_FILE", raising=False)
        logger = setup_logger(name="spray_planner_test_console", log_level="DEBUG")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert not logger.propagate

    def test_file_handler(self, tmp_path):
        """Test that a file handler writes to the given path."""
        log_file = tmp_path / "logs" / "spray.log"
        logger = setup_logger(name="spray_planner_test_file", log_file=str(log_file))
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()
        assert log_file.exists()
        assert "hello" in log_file.read_text(encoding="utf-8")
        for handler in logger.handlers:
            handler.close()

    def test_no_duplicate_handlers(self, monkeypatch):
        """Test that repeated setup does not stack handlers."""
        monkeypatch.delenv("LOG_FILE", raising=False)
        setup_logger(name="spray_planner_test_repeat")
        logger = setup_logger(name="spray_planner_test_repeat")
        assert len(logger.handlers) == 1

    def test_unknown_level_defaults_to_info(self, monkeypatch):
        """Test that an unknown level name falls back to INFO."""
        monkeypatch.delenv("LOG_FILE", raising=False)
        logger = setup_logger(name="spray_planner_test_level", log_level="chatty")
        assert logger.level == logging.INFO
