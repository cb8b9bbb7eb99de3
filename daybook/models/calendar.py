# File: daybook/models/calendar.py

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from .schedule import Schedule, schedule_from_dict
from .results import InsertResult


@dataclass
class Calendar:
    """Ordered collection of schedules. Insertion order is the stored order."""
    schedules: List[Schedule] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.schedules)

    def next_id(self) -> int:
        """Ids are positional; there is no delete, so len() never repeats."""
        return len(self.schedules)

    def list_schedules(self) -> List[Schedule]:
        """Return schedules in stored order."""
        return list(self.schedules)

    def find_conflict(self, candidate: Schedule) -> Optional[Schedule]:
        """Return the first existing schedule overlapping the candidate, if any."""
        for existing in self.schedules:
            if existing.intersects(candidate):
                return existing
        return None

    def insert(self, subject: str, start: datetime, end: datetime) -> InsertResult:
        """
        Append a new schedule unless it overlaps an existing one.

        On conflict the calendar is left untouched and the result names the
        first overlapping schedule.
        """
        candidate = Schedule(id=self.next_id(), subject=subject, start=start, end=end)

        existing = self.find_conflict(candidate)
        if existing is not None:
            return InsertResult.conflict(candidate, existing)

        self.schedules.append(candidate)
        return InsertResult.added(candidate)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {'schedules': [s.to_dict() for s in self.schedules]}


def insert(calendar: Calendar, subject: str, start: datetime, end: datetime) -> InsertResult:
    """Module-level form of Calendar.insert."""
    return calendar.insert(subject, start, end)


def calendar_from_dict(data: dict) -> Calendar:
    """
    Create Calendar from a stored document.

    Raises:
        KeyError, TypeError: if the document does not have the calendar shape
        ValueError: if the ids are not 0..n-1 in stored order
        MalformedInput: if a stored date-time cannot be parsed
    """
    if not isinstance(data, dict):
        raise TypeError(f"document must be an object, got {type(data).__name__}")

    raw_schedules = data['schedules']
    if not isinstance(raw_schedules, list):
        raise TypeError(f"'schedules' must be a list, got {type(raw_schedules).__name__}")

    schedules = []
    for position, entry in enumerate(raw_schedules):
        if not isinstance(entry, dict):
            raise TypeError(f"schedule must be an object, got {type(entry).__name__}")
        schedule = schedule_from_dict(entry)
        # next_id() relies on ids being 0..n-1 in stored order
        if schedule.id != position:
            raise ValueError(f"schedule at position {position} has id {schedule.id}, expected {position}")
        schedules.append(schedule)

    return Calendar(schedules=schedules)
