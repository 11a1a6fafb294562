# File: calsync/models/calendar.py

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .common import format_rfc3339, parse_date_millis, parse_rfc3339


@dataclass(frozen=True)
class EventDateTime:
    """Start or end of a calendar event: an all-day date or a timestamp."""
    date: Optional[str] = None       # "YYYY-MM-DD" for all-day events
    date_time: Optional[int] = None  # epoch millis
    tz_shift: int = 0                # minutes east of UTC the timestamp was given in

    @property
    def is_date_only(self) -> bool:
        return self.date_time is None and self.date is not None

    def date_value(self) -> Optional[int]:
        """Epoch millis of the all-day date (midnight UTC)."""
        if self.date is None:
            return None
        return parse_date_millis(self.date)

    def to_rfc3339(self) -> Optional[str]:
        """Raw rendering of the field, the way the calendar provider prints it."""
        if self.date_time is not None:
            return format_rfc3339(self.date_time, self.tz_shift)
        return self.date


@dataclass(frozen=True)
class ReminderOverride:
    """A single reminder, fired `minutes` before the event starts."""
    minutes: int
    method: Optional[str] = None


@dataclass(frozen=True)
class Reminders:
    """Reminder policy of an event."""
    use_default: bool = False
    overrides: List[ReminderOverride] = field(default_factory=list)


@dataclass(frozen=True)
class Attendee:
    display_name: Optional[str] = None
    email: Optional[str] = None

    def has_display_name(self) -> bool:
        """True if the display name is neither empty nor whitespace."""
        return bool(self.display_name and self.display_name.strip())


@dataclass(frozen=True)
class ExternalEvent:
    """A calendar entry as delivered by a third-party calendar provider."""
    id: str
    summary: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    start: Optional[EventDateTime] = None
    end: Optional[EventDateTime] = None
    recurrence: List[str] = field(default_factory=list)
    reminders: Optional[Reminders] = None
    attendees: List[Attendee] = field(default_factory=list)


def _event_datetime_from_dict(data: Optional[Dict[str, Any]]) -> Optional[EventDateTime]:
    if not data:
        return None
    if not isinstance(data, dict):
        raise ValueError(f"Malformed start/end field: {data!r}")

    raw_date_time = data.get('dateTime')
    if isinstance(raw_date_time, dict):
        # Already resolved: {"value": millis, "tzShift": minutes}
        return EventDateTime(
            date_time=int(raw_date_time['value']),
            tz_shift=int(raw_date_time.get('tzShift', 0)),
        )
    if raw_date_time:
        value, tz_shift = parse_rfc3339(str(raw_date_time))
        return EventDateTime(date_time=value, tz_shift=tz_shift)

    raw_date = data.get('date')
    if raw_date:
        # Validate early so a broken date fails at the boundary
        parse_date_millis(str(raw_date))
        return EventDateTime(date=str(raw_date))

    return EventDateTime()


def _reminders_from_dict(data: Optional[Dict[str, Any]]) -> Optional[Reminders]:
    if data is None:
        return None
    if not isinstance(data, dict):
        raise ValueError(f"Malformed reminders field: {data!r}")
    overrides = [
        ReminderOverride(minutes=int(o.get('minutes', 0)), method=o.get('method'))
        for o in data.get('overrides') or []
    ]
    return Reminders(use_default=bool(data.get('useDefault', False)), overrides=overrides)


def event_from_dict(data: dict) -> ExternalEvent:
    """Create ExternalEvent from a Google Calendar API event resource."""
    if not isinstance(data, dict):
        raise ValueError(f"Event resource must be an object, got {type(data).__name__}")

    attendees = [
        Attendee(display_name=a.get('displayName'), email=a.get('email'))
        for a in data.get('attendees') or []
    ]

    return ExternalEvent(
        id=str(data.get('id', '')),
        summary=data.get('summary'),
        description=data.get('description'),
        location=data.get('location'),
        start=_event_datetime_from_dict(data.get('start')),
        end=_event_datetime_from_dict(data.get('end')),
        recurrence=list(data.get('recurrence') or []),
        reminders=_reminders_from_dict(data.get('reminders')),
        attendees=attendees,
    )
