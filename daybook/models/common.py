# File: daybook/models/common.py

from datetime import datetime

from daybook.core.exceptions import MalformedInput

DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_datetime(value: str) -> datetime:
    """
    Parse a naive local date-time such as ``2024-01-01T09:00:00``.

    Accepts anything ``datetime.fromisoformat`` understands (a space
    instead of ``T``, missing seconds, fractional seconds). Offsets and
    a trailing ``Z`` are rejected since schedules carry no time zone.

    Raises:
        MalformedInput: if the value cannot be parsed or is time-zone aware
    """
    if not isinstance(value, str) or not value.strip():
        raise MalformedInput(f"Invalid date-time: {value!r}")

    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError as e:
        raise MalformedInput(
            f"Invalid date-time: {value!r} (expected YYYY-MM-DDTHH:MM:SS)"
        ) from e

    if parsed.tzinfo is not None:
        raise MalformedInput(f"Time zones are not supported: {value!r}")

    return parsed


def format_datetime(value: datetime) -> str:
    """Serialize a date-time for the schedule store."""
    return value.isoformat()


def display_datetime(value: datetime) -> str:
    """Format a date-time for the list table."""
    return value.strftime(DISPLAY_FORMAT)
