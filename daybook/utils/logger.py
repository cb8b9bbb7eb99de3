# File: logger.py
"""
Centralized logging configuration for daybook.
"""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional

from daybook.core.config_manager import Config

ROOT_LOGGER_NAME = "daybook"


def setup_logger(name: str = ROOT_LOGGER_NAME, level: Optional[int] = None) -> logging.Logger:
    """
    Configure and return a logger instance.

    Handlers are attached once, to the ``daybook`` root logger; module
    loggers (``daybook.services.calendar_store`` etc.) propagate to it.

    Args:
        name: Logger name
        level: Logging level (default: Config.LOG_LEVEL)

    Returns:
        Configured logger instance
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)

    if not root.handlers:
        root_level = level if level is not None else Config.log_level()
        root.setLevel(logging.DEBUG)
        root.propagate = False

        # Console goes to stderr; stdout carries command output
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(root_level)
        console_format = logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
            datefmt='%H:%M:%S'
        )
        console_handler.setFormatter(console_format)
        root.addHandler(console_handler)

        if Config.LOG_TO_FILE:
            root.addHandler(_file_handler(Config.LOGS_DIR))

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return root.getChild(name)


def _file_handler(log_dir: Path) -> logging.Handler:
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / f"daybook_{datetime.now().strftime('%Y%m%d')}.log"
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)

    # More detailed format for file
    file_format = logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    file_handler.setFormatter(file_format)
    return file_handler


def set_console_level(level: int) -> None:
    """Change the console verbosity (used by --verbose)."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in root.handlers:
        if not isinstance(handler, logging.FileHandler):
            handler.setLevel(level)


class LoggerMixin:
    """Mixin to add logging capability to any class."""

    @property
    def logger(self) -> logging.Logger:
        """Get logger for this class."""
        if not hasattr(self, '_logger'):
            self._logger = setup_logger(f"{self.__class__.__module__}.{self.__class__.__name__}")
        return self._logger
