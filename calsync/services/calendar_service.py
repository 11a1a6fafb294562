# File: calsync/services/calendar_service.py

from typing import Any, Dict, List, Optional
from googleapiclient.discovery import Resource
from googleapiclient.errors import HttpError

from calsync.core.config_manager import Config
from calsync.core.converter import normalize_event, to_create_task_params, require_user
from calsync.models.api import ConvertedEvent
from calsync.models.calendar import event_from_dict
from calsync.models.tasks import CreateTaskParams
from calsync.processors.datetime_resolver import get_timezone
from calsync.utils.logger import setup_logger

logger = setup_logger(__name__)


class GoogleCalendarService:
    """Imports Google Calendar events as tasks."""

    def __init__(self, calendar_service: Resource):
        """
        Initialize calendar service.

        Args:
            calendar_service: Authenticated Google Calendar API resource
        """
        self.service = calendar_service

    def list_events(
        self,
        calendar_id: str = Config.CALENDAR_ID,
        time_min: Optional[str] = None,
        time_max: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """
        Fetch raw event resources, following page tokens.

        Recurring events are returned as their master event so their
        recurrence lines are preserved.

        Returns:
            List of raw event dictionaries (empty on API error)
        """
        logger.info(f"Fetching events from calendar '{calendar_id}'")

        events: List[Dict[str, Any]] = []
        page_token = None

        try:
            while True:
                kwargs = {
                    "calendarId": calendar_id,
                    "singleEvents": False,
                    "maxResults": Config.PAGE_SIZE,
                }
                if time_min:
                    kwargs["timeMin"] = time_min
                if time_max:
                    kwargs["timeMax"] = time_max
                if page_token:
                    kwargs["pageToken"] = page_token

                response = self.service.events().list(**kwargs).execute()

                for event in response.get("items", []):
                    if event.get("status") == "cancelled":
                        continue
                    events.append(event)

                page_token = response.get("nextPageToken")
                if not page_token:
                    break

        except HttpError as e:
            logger.error(f"Error fetching calendar events: {e}", exc_info=True)
            return []

        logger.info(f"Fetched {len(events)} events")
        return events

    def convert_events(
        self,
        raw_events: List[Dict[str, Any]],
        username: str,
        timezone: str
    ) -> List[ConvertedEvent]:
        """
        Convert raw event resources; malformed events are logged and skipped.

        Raises:
            UnauthenticatedError: if no user is given
            pytz.UnknownTimeZoneError: if the timezone is not recognised
        """
        require_user(username)
        get_timezone(timezone)

        converted: List[ConvertedEvent] = []
        for raw_event in raw_events:
            if not isinstance(raw_event, dict):
                logger.warning(f"Skipping event that is not an object: {raw_event!r}")
                continue
            try:
                event = event_from_dict(raw_event)
            except (ValueError, KeyError, TypeError, AttributeError) as e:
                logger.warning(f"Could not parse event {raw_event.get('id', 'Unknown')}: {e}")
                continue
            converted.append(normalize_event(event, username, timezone))

        logger.info(f"Converted {len(converted)} of {len(raw_events)} events")
        return converted

    def import_events(
        self,
        username: str,
        timezone: str = Config.TARGET_TIMEZONE,
        calendar_id: str = Config.CALENDAR_ID,
        time_min: Optional[str] = None,
        time_max: Optional[str] = None
    ) -> List[ConvertedEvent]:
        """Fetch events from Google Calendar and convert them to tasks."""
        require_user(username)
        raw_events = self.list_events(calendar_id, time_min, time_max)
        return self.convert_events(raw_events, username, timezone)

    @staticmethod
    def build_create_requests(converted: List[ConvertedEvent]) -> List[CreateTaskParams]:
        """Task creation parameters for each converted event."""
        return [to_create_task_params(c.task) for c in converted]
