# File: daybook/core/config_manager.py
"""
Centralized configuration management for daybook.
Loads settings from environment variables and an optional .env file.
"""

import os
import logging
from pathlib import Path
from typing import List, Optional, Union
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ['yes', 'true', '1', 'on', 'y', 't']


class Config:
    """Application configuration singleton."""

    # Files (relative paths resolve against the working directory)
    DEFAULT_SCHEDULE_FILE = "schedules.json"
    SCHEDULE_FILE = Path(os.getenv("DAYBOOK_SCHEDULE_FILE", DEFAULT_SCHEDULE_FILE))
    LOGS_DIR = Path(os.getenv("DAYBOOK_LOGS_DIR", "logs"))

    # Logging
    LOG_LEVEL = os.getenv("DAYBOOK_LOG_LEVEL", "WARNING").upper()
    LOG_TO_FILE = _env_flag("DAYBOOK_LOG_TO_FILE")

    # Storage format
    JSON_INDENT = 2
    FILE_ENCODING = "utf-8"

    @classmethod
    def schedule_path(cls, override: Optional[Union[str, Path]] = None) -> Path:
        """Resolve the schedule store location, preferring an explicit override."""
        if override:
            return Path(override)
        return cls.SCHEDULE_FILE

    @classmethod
    def log_level(cls) -> int:
        """Numeric logging level for LOG_LEVEL, falling back to WARNING."""
        level = logging.getLevelName(cls.LOG_LEVEL)
        return level if isinstance(level, int) else logging.WARNING

    @classmethod
    def validate(cls, schedule_file: Optional[Union[str, Path]] = None) -> List[str]:
        """
        Return a list of configuration problems (empty when valid).

        Args:
            schedule_file: Store location in use, when overridden (e.g. --file)
        """
        errors = []
        store_path = cls.schedule_path(schedule_file)

        if not isinstance(logging.getLevelName(cls.LOG_LEVEL), int):
            errors.append(f"DAYBOOK_LOG_LEVEL is not a logging level: {cls.LOG_LEVEL}")

        if not str(store_path).strip():
            errors.append("Schedule file path is empty")

        if store_path.is_dir():
            errors.append(f"Schedule file points to a directory: {store_path}")

        return errors
