# File: import_events.py
#
# Convert calendar events into task creation requests.
#
#   python import_events.py --input events.json --user alice --timezone America/Los_Angeles
#   python import_events.py --auth          # one-time Google sign-in
#   python import_events.py --user alice    # read from Google Calendar

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytz

from calsync.core.config_manager import Config
from calsync.core.converter import to_create_task_params
from calsync.models.api import ConvertedEvent, UnauthenticatedError
from calsync.services.calendar_service import GoogleCalendarService
from calsync.utils.logger import setup_logger

logger = setup_logger("calsync.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert Google Calendar events into task creation requests."
    )
    parser.add_argument("--input", type=Path,
                        help="JSON file with a list of events (or an object with 'items')")
    parser.add_argument("--user", default=Config.DEFAULT_USER,
                        help="Acting user (default: $CALSYNC_USER)")
    parser.add_argument("--timezone", default=Config.TARGET_TIMEZONE,
                        help="Timezone for the created tasks (default: $TIMEZONE)")
    parser.add_argument("--calendar-id", default=Config.CALENDAR_ID,
                        help="Google calendar to read when --input is not given")
    parser.add_argument("--time-min", help="RFC 3339 lower bound for fetched events")
    parser.add_argument("--time-max", help="RFC 3339 upper bound for fetched events")
    parser.add_argument("--auth", action="store_true",
                        help="Run the Google sign-in flow and exit")
    return parser


def load_events(path: Path) -> List[Dict[str, Any]]:
    """Read raw events from a JSON export."""
    with open(path, 'r', encoding='utf-8') as f:
        payload = json.load(f)

    if isinstance(payload, dict):
        payload = payload.get('items', [])
    if not isinstance(payload, list):
        raise ValueError("Event file must hold a list of events or an object with 'items'")
    return payload


def to_output(converted: List[ConvertedEvent]) -> List[Dict[str, Any]]:
    return [
        {
            'eventId': c.event_id,
            'params': to_create_task_params(c.task).to_dict(),
            'content': {'text': c.content.text, 'baseText': c.content.base_text},
            'description': c.description,
        }
        for c in converted
    ]


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.auth:
        from calsync.auth.google_auth import create_initial_token
        return 0 if create_initial_token() else 1

    try:
        if args.input:
            converted = GoogleCalendarService(None).convert_events(
                load_events(args.input), args.user, args.timezone
            )
        else:
            from calsync.auth.google_auth import get_calendar_service
            if not Config.validate():
                return 1
            resource = get_calendar_service()
            if resource is None:
                return 1
            converted = GoogleCalendarService(resource).import_events(
                args.user, args.timezone, args.calendar_id, args.time_min, args.time_max
            )
    except UnauthenticatedError as e:
        logger.error(f"{e}. Pass --user or set CALSYNC_USER.")
        return 1
    except pytz.UnknownTimeZoneError:
        logger.error(f"Unknown timezone: {args.timezone}")
        return 1
    except (OSError, ValueError) as e:
        logger.error(f"Could not read events from {args.input}: {e}")
        return 1

    print(json.dumps(to_output(converted), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
