from .common import (
    parse_iso_datetime,
    parse_rfc3339,
    format_rfc3339,
    to_epoch_millis,
    from_epoch_millis,
)
from .calendar import (
    EventDateTime,
    ReminderOverride,
    Reminders,
    Attendee,
    ExternalEvent,
    event_from_dict,
)
from .tasks import User, ReminderSetting, Task, Content, CreateTaskParams
from .api import ConvertedEvent, UnauthenticatedError

__all__ = [
    "parse_iso_datetime",
    "parse_rfc3339",
    "format_rfc3339",
    "to_epoch_millis",
    "from_epoch_millis",
    "EventDateTime",
    "ReminderOverride",
    "Reminders",
    "Attendee",
    "ExternalEvent",
    "event_from_dict",
    "User",
    "ReminderSetting",
    "Task",
    "Content",
    "CreateTaskParams",
    "ConvertedEvent",
    "UnauthenticatedError"
]
