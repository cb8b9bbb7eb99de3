# File: daybook/models/results.py
"""
Result types returned by calendar operations.
"""

from dataclasses import dataclass
from typing import Optional
from .schedule import Schedule

SUCCESS = "success"
CONFLICT = "conflict"


@dataclass(frozen=True)
class InsertResult:
    """Outcome of a conflict-checked insertion."""
    status: str  # "success" or "conflict"
    schedule: Schedule
    conflict_with: Optional[Schedule] = None

    @classmethod
    def added(cls, schedule: Schedule) -> 'InsertResult':
        return cls(status=SUCCESS, schedule=schedule)

    @classmethod
    def conflict(cls, candidate: Schedule, existing: Schedule) -> 'InsertResult':
        return cls(status=CONFLICT, schedule=candidate, conflict_with=existing)

    def is_success(self) -> bool:
        """Check if the schedule was appended."""
        return self.status == SUCCESS

    def __bool__(self) -> bool:
        return self.is_success()
