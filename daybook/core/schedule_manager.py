# File: daybook/core/schedule_manager.py
"""
Runs a single daybook command against the schedule store.

Every call reloads the calendar from disk; nothing is cached between
commands. There is no locking, so two concurrent ``add`` runs against the
same file can lose one of the appointments.
"""

from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

from daybook.core.exceptions import MalformedInput, ScheduleConflict
from daybook.models.schedule import Schedule
from daybook.services.calendar_store import CalendarStore
from daybook.utils.logger import LoggerMixin


class ScheduleManager(LoggerMixin):
    """Coordinates loading, the calendar operation, and saving."""

    def __init__(self, store: Optional[CalendarStore] = None,
                 path: Optional[Union[str, Path]] = None):
        """
        Args:
            store: Store to use (takes precedence over ``path``)
            path: Schedule file location when no store is given
        """
        self.store = store if store is not None else CalendarStore(path)

    def list_schedules(self) -> List[Schedule]:
        """Return all schedules in stored order."""
        calendar = self.store.load()
        return calendar.list_schedules()

    def add_schedule(self, subject: str, start: datetime, end: datetime) -> Schedule:
        """
        Add a schedule and persist the calendar.

        Raises:
            MalformedInput: if ``start`` is not before ``end``
            ScheduleConflict: if the interval overlaps an existing schedule
            StorageUnavailable, MalformedStorage: on storage failures
        """
        validate_interval(start, end)

        calendar = self.store.load()
        result = calendar.insert(subject, start, end)

        if not result.is_success():
            self.logger.info(
                f"Rejected '{subject}': overlaps schedule {result.conflict_with.id}"
            )
            raise ScheduleConflict(result.schedule, result.conflict_with)

        self.store.save(calendar)
        self.logger.info(f"Added schedule {result.schedule.id} '{subject}'")
        return result.schedule


def validate_interval(start: datetime, end: datetime) -> None:
    """Reject empty or inverted intervals."""
    if start >= end:
        raise MalformedInput(
            f"Start must be before end: {start.isoformat()} >= {end.isoformat()}"
        )
