# File: daybook/models/schedule.py

from dataclasses import dataclass
from datetime import datetime

from .common import parse_datetime, format_datetime


@dataclass(frozen=True)
class Schedule:
    """A single appointment occupying the half-open interval [start, end)."""
    id: int
    subject: str
    start: datetime
    end: datetime

    def intersects(self, other: 'Schedule') -> bool:
        """Check if this schedule overlaps with another. Touching endpoints do not."""
        return self.start < other.end and other.start < self.end

    def to_dict(self) -> dict:
        """Convert to dictionary for the schedule store."""
        return {
            'id': self.id,
            'subject': self.subject,
            'start': format_datetime(self.start),
            'end': format_datetime(self.end),
        }


def schedule_from_dict(data: dict) -> Schedule:
    """
    Create Schedule from a stored dictionary.

    Raises:
        KeyError: if a field is missing
        TypeError: if a field has the wrong type
        MalformedInput: if a date-time cannot be parsed
    """
    schedule_id = data['id']
    # bool is an int subclass; reject it explicitly
    if not isinstance(schedule_id, int) or isinstance(schedule_id, bool) or schedule_id < 0:
        raise TypeError(f"id must be a non-negative integer, got {schedule_id!r}")

    subject = data['subject']
    if not isinstance(subject, str):
        raise TypeError(f"subject must be a string, got {type(subject).__name__}")

    return Schedule(
        id=schedule_id,
        subject=subject,
        start=parse_datetime(data['start']),
        end=parse_datetime(data['end']),
    )
