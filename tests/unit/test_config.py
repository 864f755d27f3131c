"""
Tests for configuration and logging setup.

Checked behaviour:
1. setup_logging installs console and rotating file handlers
2. Startup lines name the portal, its log level and display defaults
"""

import logging
import logging.handlers

from config import Config


def run_setup_logging():
    """Run Config.setup_logging and hand back the installed handlers and level."""
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        Config.setup_logging()
        installed, level = list(root.handlers), root.level
        for handler in installed:
            handler.flush()
            handler.close()
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
    return installed, level


class TestSetupLogging:

    def test_handlers_and_startup_lines(self, tmp_path, monkeypatch):
        log_file = tmp_path / "portal.log"
        monkeypatch.setattr(Config, "LOG_FILE", str(log_file))
        monkeypatch.setattr(Config, "LOG_LEVEL", "debug")

        handlers, level = run_setup_logging()

        assert level == logging.DEBUG
        assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in handlers)
        text = log_file.read_text()
        assert f"{Config.APP_TITLE} logging at DEBUG, writing to {log_file}" in text
        assert "Display defaults: locale=en-US" in text

    def test_unknown_level_falls_back_to_info(self, tmp_path, monkeypatch):
        monkeypatch.setattr(Config, "LOG_FILE", str(tmp_path / "portal.log"))
        monkeypatch.setattr(Config, "LOG_LEVEL", "chatty")

        _, level = run_setup_logging()

        assert level == logging.INFO
