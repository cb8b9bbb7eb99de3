# File: daybook/services/calendar_store.py

import json
import os
import stat
import tempfile
from pathlib import Path
from typing import Optional, Union

from daybook.core.config_manager import Config
from daybook.core.exceptions import MalformedInput, MalformedStorage, StorageUnavailable
from daybook.models.calendar import Calendar, calendar_from_dict
from daybook.utils.logger import setup_logger

logger = setup_logger(__name__)


class CalendarStore:
    """Reads and writes the whole calendar document as JSON."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        """
        Initialize the store.

        Args:
            path: Location of the schedule file (default: Config.SCHEDULE_FILE)
        """
        self.path = Config.schedule_path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> Calendar:
        """
        Read the calendar from disk.

        Raises:
            StorageUnavailable: if the file cannot be opened
            MalformedStorage: if the content is not a calendar document
        """
        logger.debug(f"Loading calendar from {self.path}")

        try:
            with open(self.path, 'r', encoding=Config.FILE_ENCODING) as f:
                raw = f.read()
        except FileNotFoundError as e:
            raise StorageUnavailable(self.path, "file not found, run 'daybook init' first") from e
        except UnicodeDecodeError as e:
            raise MalformedStorage(self.path, f"not valid {Config.FILE_ENCODING} at byte {e.start}") from e
        except OSError as e:
            raise StorageUnavailable(self.path, e.strerror or str(e)) from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise MalformedStorage(self.path, f"invalid JSON at line {e.lineno}: {e.msg}") from e

        try:
            calendar = calendar_from_dict(data)
        except KeyError as e:
            raise MalformedStorage(self.path, f"missing field {e}") from e
        except (TypeError, ValueError, MalformedInput) as e:
            raise MalformedStorage(self.path, str(e)) from e

        logger.debug(f"Loaded {len(calendar)} schedules")
        return calendar

    def save(self, calendar: Calendar) -> None:
        """
        Replace the stored document with ``calendar``.

        The document is written to a temporary file next to the target and
        moved into place, so readers see either the old or the new content.

        Raises:
            StorageUnavailable: if the file cannot be written
        """
        content = json.dumps(
            calendar.to_dict(),
            indent=Config.JSON_INDENT,
            ensure_ascii=False
        ) + "\n"

        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                dir=self.path.parent
            )
            with os.fdopen(fd, 'w', encoding=Config.FILE_ENCODING) as f:
                f.write(content)
            os.chmod(tmp_name, self._file_mode())
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as e:
            raise StorageUnavailable(self.path, e.strerror or str(e)) from e
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

        logger.info(f"Saved {len(calendar)} schedules to {self.path}")

    def _file_mode(self) -> int:
        """Mode for the replacement file: keep the existing one, else honour the umask."""
        try:
            return stat.S_IMODE(os.stat(self.path).st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    def initialize(self, force: bool = False) -> Calendar:
        """
        Create an empty store.

        Raises:
            FileExistsError: if the store exists and ``force`` is not set
            StorageUnavailable: if the file cannot be written
        """
        if self.exists() and not force:
            raise FileExistsError(f"Schedule store already exists: {self.path}")

        calendar = Calendar()
        self.save(calendar)
        logger.info(f"Initialized empty schedule store at {self.path}")
        return calendar
