# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable schedules, calendars and store files for all tests.
"""

import json
import pytest
from datetime import datetime
from pathlib import Path
import sys

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from daybook.models.calendar import Calendar
from daybook.models.schedule import Schedule
from daybook.services.calendar_store import CalendarStore


def at(year, month, day, hour, minute=0, second=0):
    """Shorthand for a naive datetime."""
    return datetime(year, month, day, hour, minute, second)


# ==================== Schedule Fixtures ====================

@pytest.fixture
def standup():
    """Create a 09:00-10:00 schedule on 2024-01-01."""
    return Schedule(
        id=0,
        subject="Standup",
        start=at(2024, 1, 1, 9),
        end=at(2024, 1, 1, 10)
    )


@pytest.fixture
def lunch():
    """Create a 12:00-13:00 schedule on 2024-01-01."""
    return Schedule(
        id=1,
        subject="Lunch",
        start=at(2024, 1, 1, 12),
        end=at(2024, 1, 1, 13)
    )


# ==================== Calendar Fixtures ====================

@pytest.fixture
def empty_calendar():
    """Calendar with no schedules."""
    return Calendar()


@pytest.fixture
def calendar(standup, lunch):
    """Calendar holding standup and lunch."""
    return Calendar(schedules=[standup, lunch])


# ==================== Store Fixtures ====================

@pytest.fixture
def store_path(tmp_path):
    """Path of a schedule file that does not exist yet."""
    return tmp_path / "schedules.json"


@pytest.fixture
def store(store_path):
    """Initialized, empty store."""
    calendar_store = CalendarStore(store_path)
    calendar_store.initialize()
    return calendar_store


@pytest.fixture
def sample_document():
    """A stored document as written by CalendarStore.save."""
    return {
        'schedules': [
            {
                'id': 0,
                'subject': 'Standup',
                'start': '2024-01-01T09:00:00',
                'end': '2024-01-01T10:00:00'
            },
            {
                'id': 1,
                'subject': '歯医者',
                'start': '2024-12-08T15:30:00',
                'end': '2024-12-08T16:00:00'
            }
        ]
    }


@pytest.fixture
def sample_store_path(store_path, sample_document):
    """Schedule file holding sample_document in saved form."""
    store_path.write_text(
        json.dumps(sample_document, indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8"
    )
    return store_path
