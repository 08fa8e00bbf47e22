"""Tests for logging configuration."""

from __future__ import annotations

import json
import logging
from logging.handlers import TimedRotatingFileHandler

import pytest

from reelswipe.logging_utils import JsonFormatter, configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestConfigureLogging:
    """Test handler installation."""

    def test_console_only_by_default(self, config, restore_root_logger):
        configure_logging(config)
        assert restore_root_logger.level == logging.INFO
        assert not any(isinstance(h, TimedRotatingFileHandler) for h in restore_root_logger.handlers)

    def test_file_handler_when_path_set(self, config, tmp_path, restore_root_logger):
        log_path = tmp_path / "logs" / "reelswipe.log"
        configure_logging(config.model_copy(update={"log_path": log_path, "log_level": "DEBUG"}))

        assert restore_root_logger.level == logging.DEBUG
        assert log_path.parent.is_dir()
        assert any(isinstance(h, TimedRotatingFileHandler) for h in restore_root_logger.handlers)


class TestJsonFormatter:
    """Test structured log output."""

    def test_includes_provider(self):
        record = logging.LogRecord("reelswipe", logging.WARNING, __file__, 1, "fetch failed", None, None)
        record.provider = "reddit"
        payload = json.loads(JsonFormatter().format(record))

        assert payload["level"] == "WARNING"
        assert payload["message"] == "fetch failed"
        assert payload["provider"] == "reddit"
