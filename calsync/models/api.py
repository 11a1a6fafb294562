# File: calsync/models/api.py
"""
Result and error types returned by the calendar conversion API.
"""

from dataclasses import dataclass
from typing import Optional
from .tasks import Task, Content


class UnauthenticatedError(PermissionError):
    """Raised when a conversion is attempted without a caller identity."""


@dataclass
class ConvertedEvent:
    """Outcome of converting one external calendar event."""
    task: Task
    content: Content
    event_id: str
    description: Optional[str] = None  # description with tags stripped

    def to_dict(self) -> dict:
        return {
            'eventId': self.event_id,
            'task': self.task.to_dict(),
            'content': self.content.to_dict(),
            'description': self.description,
        }
