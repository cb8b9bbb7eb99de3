from .common import parse_datetime, format_datetime, display_datetime
from .schedule import Schedule, schedule_from_dict
from .results import InsertResult
from .calendar import Calendar, calendar_from_dict, insert

__all__ = [
    "parse_datetime",
    "format_datetime",
    "display_datetime",
    "Schedule",
    "schedule_from_dict",
    "InsertResult",
    "Calendar",
    "calendar_from_dict",
    "insert",
]
