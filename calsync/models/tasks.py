# File: calsync/models/tasks.py

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class User:
    """Identity of the acting user."""
    name: str


@dataclass
class ReminderSetting:
    """When to remind about a task, in the task's timezone."""
    date: Optional[str] = None  # "YYYY-MM-DD"
    time: Optional[str] = None  # "HH:MM"

    def to_dict(self) -> dict:
        return {'date': self.date, 'time': self.time}


@dataclass
class Task:
    """Internal task record produced from a calendar event."""
    owner: User
    assignees: List[User]
    name: Optional[str]
    timezone: str
    due_date: Optional[str] = None
    due_time: Optional[str] = None
    duration: Optional[int] = None  # minutes
    recurrence_rule: Optional[str] = None
    reminder_setting: Optional[ReminderSetting] = None
    location: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'owner': self.owner.name,
            'assignees': [a.name for a in self.assignees],
            'name': self.name,
            'timezone': self.timezone,
            'due_date': self.due_date,
            'due_time': self.due_time,
            'duration': self.duration,
            'recurrence_rule': self.recurrence_rule,
            'reminder_setting': self.reminder_setting.to_dict() if self.reminder_setting else None,
            'location': self.location,
        }


@dataclass
class Content:
    """Rich-text body attached to a task."""
    owner: User
    text: str = ""       # HTML-ish presentation text
    base_text: str = ""  # delta document, rendered JSON

    def to_dict(self) -> dict:
        return {
            'owner': self.owner.name,
            'text': self.text,
            'baseText': self.base_text,
        }


@dataclass
class CreateTaskParams:
    """Parameters accepted by the task creation API."""
    name: Optional[str]
    due_date: Optional[str]
    due_time: Optional[str]
    duration: Optional[int]
    reminder_setting: Optional[ReminderSetting]
    assignees: List[str]
    timezone: str
    recurrence_rule: Optional[str]
    labels: List[int] = field(default_factory=list)
    location: Optional[str] = None

    def to_dict(self) -> dict:
        """Request body for the creation API (camelCase keys)."""
        return {
            'name': self.name,
            'dueDate': self.due_date,
            'dueTime': self.due_time,
            'duration': self.duration,
            'reminderSetting': self.reminder_setting.to_dict() if self.reminder_setting else None,
            'assignees': list(self.assignees),
            'timezone': self.timezone,
            'recurrenceRule': self.recurrence_rule,
            'labels': list(self.labels),
            'location': self.location,
        }
