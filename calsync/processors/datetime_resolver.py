# File: calsync/processors/datetime_resolver.py
"""
Resolves event start/end fields to absolute instants and renders instants
as wall-clock strings in a caller-chosen timezone.
"""

from datetime import datetime
from typing import Optional, Tuple

import pytz

from calsync.models.calendar import EventDateTime
from calsync.models.common import from_epoch_millis


def get_timezone(timezone: str) -> pytz.BaseTzInfo:
    """Look up a tz database zone; raises pytz.UnknownTimeZoneError."""
    return pytz.timezone(timezone)


def resolve_instant(event_date_time: Optional[EventDateTime]) -> Optional[int]:
    """
    Reduce a date-or-date-time field to epoch millis.

    A timestamp wins over an all-day date; an all-day date resolves to
    midnight UTC. Returns None when the field carries neither.
    """
    if event_date_time is None:
        return None

    if event_date_time.date_time is not None:
        return event_date_time.date_time

    return event_date_time.date_value()


def to_local(instant: int, timezone: str) -> datetime:
    """The instant as an aware datetime in `timezone`."""
    return from_epoch_millis(instant).astimezone(get_timezone(timezone))


def format_local(instant: int, timezone: str) -> Tuple[str, str]:
    """Render an instant as ("YYYY-MM-DD", "HH:MM") wall-clock strings."""
    local = to_local(instant, timezone)
    return local.strftime("%Y-%m-%d"), local.strftime("%H:%M")


def format_rrule_anchor(instant: int, timezone: str) -> str:
    """
    Render an instant as an RFC 5545 date-time in `timezone`.

    UTC anchors carry the "Z" suffix (20200701T160000Z); any other zone
    gives a floating local time (20200701T090000).
    """
    local = to_local(instant, timezone)
    anchor = local.strftime("%Y%m%dT%H%M%S")
    if local.tzinfo is pytz.utc:
        anchor += "Z"
    return anchor
