# File: tests/unit/test_config.py
"""
Unit tests for configuration and logging setup.
"""

import logging
from pathlib import Path

from daybook.core.config_manager import Config
from daybook.utils.logger import setup_logger, LoggerMixin


class TestConfig:
    """Tests for Config."""

    def test_schedule_path_default(self, monkeypatch):
        """Test the default store location."""
        monkeypatch.setattr(Config, "SCHEDULE_FILE", Path(Config.DEFAULT_SCHEDULE_FILE))

        assert Config.schedule_path() == Path("schedules.json")

    def test_schedule_path_override(self, tmp_path):
        """Test an explicit path takes precedence."""
        assert Config.schedule_path(tmp_path / "x.json") == tmp_path / "x.json"
        assert Config.schedule_path(str(tmp_path / "y.json")) == tmp_path / "y.json"

    def test_log_level_fallback(self, monkeypatch):
        """Test an unknown level falls back to WARNING and is reported."""
        monkeypatch.setattr(Config, "LOG_LEVEL", "CHATTY")

        assert Config.log_level() == logging.WARNING
        assert any("DAYBOOK_LOG_LEVEL" in problem for problem in Config.validate())

    def test_validate_directory_as_store(self, monkeypatch, tmp_path):
        """Test a directory configured as the store is reported."""
        monkeypatch.setattr(Config, "LOG_LEVEL", "INFO")
        monkeypatch.setattr(Config, "SCHEDULE_FILE", tmp_path)

        problems = Config.validate()

        assert len(problems) == 1
        assert "directory" in problems[0]

    def test_validate_uses_overridden_store(self, monkeypatch, tmp_path):
        """Test a stale default is ignored when another store is in use."""
        monkeypatch.setattr(Config, "LOG_LEVEL", "INFO")
        monkeypatch.setattr(Config, "SCHEDULE_FILE", tmp_path)

        assert Config.validate(tmp_path / "schedules.json") == []

    def test_validate_ok(self, monkeypatch, tmp_path):
        """Test a sane configuration has no problems."""
        monkeypatch.setattr(Config, "LOG_LEVEL", "DEBUG")
        monkeypatch.setattr(Config, "SCHEDULE_FILE", tmp_path / "schedules.json")

        assert Config.validate() == []


class TestLogger:
    """Tests for logger setup."""

    def test_module_loggers_share_root(self):
        """Test module loggers live under the daybook logger."""
        logger = setup_logger("daybook.services.calendar_store")
        other = setup_logger("somewhere_else")

        assert logger.name == "daybook.services.calendar_store"
        assert other.name == "daybook.somewhere_else"
        assert logging.getLogger("daybook").handlers

    def test_handlers_not_duplicated(self):
        """Test repeated setup does not add handlers."""
        setup_logger()
        count = len(logging.getLogger("daybook").handlers)
        setup_logger()

        assert len(logging.getLogger("daybook").handlers) == count

    def test_logger_mixin(self):
        """Test LoggerMixin names the logger after the class."""
        class Widget(LoggerMixin):
            pass

        assert Widget().logger.name.endswith(".Widget")
