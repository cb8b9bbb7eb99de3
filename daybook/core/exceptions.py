# File: daybook/core/exceptions.py
"""
Error types raised by daybook.

Storage and input errors are fatal for the current command. A schedule
conflict is the one expected failure and is reported without touching
the store.
"""

from pathlib import Path
from typing import Union


class DaybookError(Exception):
    """Base class for all daybook errors."""


class StorageUnavailable(DaybookError):
    """The schedule store could not be opened for reading or writing."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Schedule store unavailable: {self.path} ({reason})")


class MalformedStorage(DaybookError):
    """The schedule store exists but does not hold a valid calendar document."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Malformed schedule store {self.path}: {reason}")


class MalformedInput(DaybookError):
    """A user supplied value (date-time or interval) is not acceptable."""


class ScheduleConflict(DaybookError):
    """The candidate schedule overlaps an existing one."""

    def __init__(self, candidate, existing):
        self.candidate = candidate
        self.existing = existing
        super().__init__(
            f"'{candidate.subject}' ({candidate.start} - {candidate.end}) overlaps "
            f"schedule {existing.id} '{existing.subject}' ({existing.start} - {existing.end})"
        )
