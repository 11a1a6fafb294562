# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable calendar events and a mocked Google Calendar resource.
"""

import pytest
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import Mock
import sys

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from calsync.models import (
    Attendee, EventDateTime, ExternalEvent, Reminders, to_epoch_millis
)

LA = "America/Los_Angeles"
DAILY_RULE = "RRULE:FREQ=DAILY;UNTIL=20200724T065959Z"


# ==================== Identity / Timezone Fixtures ====================

@pytest.fixture
def user():
    """Acting user for conversions."""
    return "alice"


@pytest.fixture
def la_timezone():
    return LA


# ==================== Instant Fixtures ====================

@pytest.fixture
def start_millis():
    """2020-07-01 09:00 in Los Angeles (16:00 UTC)."""
    return to_epoch_millis(datetime(2020, 7, 1, 16, 0, tzinfo=timezone.utc))


@pytest.fixture
def end_millis(start_millis):
    """90 minutes after start_millis."""
    return start_millis + 90 * 60 * 1000


# ==================== Event Fixtures ====================

@pytest.fixture
def all_day_event():
    """An all-day event with nothing but its dates."""
    return ExternalEvent(
        id="allday_1",
        summary="Offsite",
        start=EventDateTime(date="2020-07-01"),
        end=EventDateTime(date="2020-07-02"),
    )


@pytest.fixture
def timed_event(start_millis, end_millis):
    """A recurring meeting given in Pacific daylight time."""
    return ExternalEvent(
        id="meeting_1",
        summary="Standup",
        description="<b>Agenda</b>\nUpdates",
        location="Room 4",
        start=EventDateTime(date_time=start_millis, tz_shift=-420),
        end=EventDateTime(date_time=end_millis, tz_shift=-420),
        recurrence=[DAILY_RULE],
        reminders=Reminders(use_default=True),
        attendees=[
            Attendee(display_name="Bob", email="bob@example.com"),
            Attendee(display_name="", email="ghost@example.com"),
            Attendee(display_name="Carol", email=""),
        ],
    )


@pytest.fixture
def raw_timed_event():
    """The same kind of event as returned by the Google Calendar API."""
    return {
        'id': 'raw_1',
        'status': 'confirmed',
        'summary': 'Design review',
        'description': 'Bring <i>mockups</i>',
        'location': 'Zoom',
        'start': {'dateTime': '2020-07-01T09:00:00-07:00', 'timeZone': LA},
        'end': {'dateTime': '2020-07-01T10:00:00-07:00', 'timeZone': LA},
        'recurrence': [DAILY_RULE, 'EXDATE;TZID=America/Los_Angeles:20200703T090000'],
        'reminders': {
            'useDefault': False,
            'overrides': [
                {'method': 'popup', 'minutes': 10},
                {'method': 'email', 'minutes': 60},
            ],
        },
        'attendees': [
            {'displayName': 'Dana', 'email': 'dana@example.com'},
            {'email': 'noname@example.com'},
        ],
    }


@pytest.fixture
def raw_all_day_event():
    return {
        'id': 'raw_2',
        'summary': 'Holiday',
        'start': {'date': '2020-07-03'},
        'end': {'date': '2020-07-04'},
    }


# ==================== Mock Service Fixtures ====================

@pytest.fixture
def mock_calendar_service():
    """Mock Google Calendar resource returning no events."""
    mock = Mock()
    mock.events.return_value.list.return_value.execute.return_value = {'items': []}
    return mock


# ==================== Pytest Markers ====================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
