# File: calsync/core/converter.py
"""
Conversion between external calendar events and internal tasks.

normalize_event() maps a provider event to a Task plus its Content;
to_create_task_params() projects a Task onto the creation API's
parameters. Both are pure: the acting user is always passed in.
"""

from dataclasses import replace
from typing import Optional

from calsync.models.api import ConvertedEvent, UnauthenticatedError
from calsync.models.calendar import ExternalEvent
from calsync.models.tasks import Content, CreateTaskParams, Task, User
from calsync.processors.datetime_resolver import get_timezone, resolve_instant
from calsync.processors.recurrence_processor import translate_recurrence
from calsync.processors.reminder_processor import MILLIS_PER_MINUTE, resolve_reminder
from calsync.processors.rich_text_processor import compose_text, strip_html_tags
from calsync.utils.logger import setup_logger

logger = setup_logger(__name__)


def require_user(username: Optional[str]) -> User:
    """The acting user; raises UnauthenticatedError if there is none."""
    if username is None or not str(username).strip():
        raise UnauthenticatedError("Cannot convert calendar event: no authenticated user")
    return User(username)


def _schedule_task(task: Task, event: ExternalEvent, start_instant: int) -> None:
    """Fill the time-dependent task fields from a resolved start."""
    task.recurrence_rule = translate_recurrence(event.recurrence, start_instant, task.timezone)

    end_instant = resolve_instant(event.end)
    if end_instant is not None:
        task.duration = (end_instant - start_instant) // MILLIS_PER_MINUTE

    # Due fields come from the raw start rendering, not from the task timezone
    raw_start = event.start.to_rfc3339()
    if event.start.is_date_only:
        task.due_date = raw_start
    else:
        task.due_date = raw_start[0:10]
        task.due_time = raw_start[11:16]

    task.reminder_setting = resolve_reminder(event.reminders, start_instant, task.timezone)


def normalize_event(event: ExternalEvent, username: str, timezone: str) -> ConvertedEvent:
    """
    Convert an external calendar event into a task owned by `username`.

    Args:
        event: Event as delivered by the calendar provider
        username: Acting user; becomes owner and sole assignee
        timezone: tz database name the task is scheduled in

    Returns:
        ConvertedEvent with the task, its content, the event id and the
        tag-stripped description

    Raises:
        UnauthenticatedError: if no user is given
        pytz.UnknownTimeZoneError: if the timezone is not recognised
    """
    user = require_user(username)
    get_timezone(timezone)
    logger.info(f"Converting calendar event {event.id} for {user.name}")

    task = Task(
        owner=user,
        assignees=[User(user.name)],
        name=event.summary,
        timezone=timezone,
    )

    start_instant = resolve_instant(event.start)
    if start_instant is not None:
        _schedule_task(task, event, start_instant)
    else:
        logger.debug(f"Event {event.id} has no start; leaving task unscheduled")

    text, base_text = compose_text(event.description, event.location, event.attendees)
    if event.location is not None:
        task.location = event.location
    content = Content(owner=User(user.name), text=text, base_text=base_text)

    logger.debug(
        f"Event {event.id} -> due={task.due_date} {task.due_time or ''} "
        f"duration={task.duration} rrule={task.recurrence_rule}"
    )
    return ConvertedEvent(
        task=task,
        content=content,
        event_id=event.id,
        description=strip_html_tags(event.description),
    )


def to_create_task_params(task: Task) -> CreateTaskParams:
    """Project a converted task onto task creation parameters."""
    return CreateTaskParams(
        name=task.name,
        due_date=task.due_date,
        due_time=task.due_time,
        duration=task.duration,
        # Own copy; later edits to the task must not leak into the request
        reminder_setting=replace(task.reminder_setting) if task.reminder_setting else None,
        assignees=[a.name for a in task.assignees],
        timezone=task.timezone,
        recurrence_rule=task.recurrence_rule,
        labels=[],
        location=task.location,
    )
