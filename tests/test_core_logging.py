"""
Tests for the logging configuration module.
"""
import logging

import pytest

from core.config import Settings
from core.logging_config import (
    ColoredFormatter,
    configure_logging_from_settings,
    get_logger,
    setup_logging,
)


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest left it."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestSetupLogging:
    """Test the setup_logging function."""

    def test_sets_level_and_single_console_handler(self, restore_root_logger):
        root = setup_logging(log_level="WARNING", enable_colors=False)
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1

    def test_unknown_level_defaults_to_info(self, restore_root_logger):
        root = setup_logging(log_level="chatty", enable_colors=False)
        assert root.level == logging.INFO

    def test_file_handler(self, tmp_path, restore_root_logger):
        log_file = tmp_path / "normalizer.log"
        root = setup_logging(log_level="INFO", log_file=log_file, enable_colors=False)
        assert len(root.handlers) == 2
        get_logger("core.template").info("normalized")
        for handler in root.handlers:
            handler.flush()
        assert "normalized" in log_file.read_text()

    def test_json_format(self, restore_root_logger):
        root = setup_logging(log_format="json", enable_colors=False)
        record = logging.LogRecord("core.template", logging.INFO, __file__, 1, "hello", None, None)
        assert root.handlers[0].formatter.format(record).startswith('{"timestamp": ')


class TestConfigureFromSettings:
    """Test configuration from application settings."""

    def test_debug_overrides_level(self, restore_root_logger):
        root = configure_logging_from_settings(Settings(_env_file=None, debug=True, log_level="ERROR"))
        assert root.level == logging.DEBUG

    def test_uses_settings_level(self, restore_root_logger):
        root = configure_logging_from_settings(Settings(_env_file=None, log_level="ERROR"))
        assert root.level == logging.ERROR


class TestColoredFormatter:
    """Test the colored formatter."""

    def test_level_name_is_colored(self):
        formatter = ColoredFormatter("%(levelname)s - %(message)s")
        record = logging.LogRecord("core.template", logging.ERROR, __file__, 1, "boom", None, None)
        formatted = formatter.format(record)
        assert "\033[91mERROR\033[0m" in formatted
        assert formatted.endswith("boom")
