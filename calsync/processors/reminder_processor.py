# File: calsync/processors/reminder_processor.py

from typing import Optional

from calsync.core.config_manager import Config
from calsync.models.calendar import Reminders
from calsync.models.tasks import ReminderSetting
from calsync.processors.datetime_resolver import format_local

MILLIS_PER_MINUTE = 60 * 1000


def _lead_minutes(reminders: Reminders) -> Optional[int]:
    """Minutes before start the task reminder should fire, if any."""
    if reminders.use_default:
        return Config.DEFAULT_REMINDER_MINUTES

    if reminders.overrides:
        # Earliest-firing reminder wins
        return max([0] + [o.minutes for o in reminders.overrides])

    return None


def resolve_reminder(reminders: Optional[Reminders], start_instant: int, timezone: str) -> Optional[ReminderSetting]:
    """
    Derive the task reminder from an event's reminder policy.

    Returns None without a policy, and an empty ReminderSetting when the
    policy neither uses the default nor lists overrides.
    """
    if reminders is None:
        return None

    setting = ReminderSetting()
    minutes = _lead_minutes(reminders)
    if minutes is not None:
        setting.date, setting.time = format_local(start_instant - minutes * MILLIS_PER_MINUTE, timezone)
    return setting
