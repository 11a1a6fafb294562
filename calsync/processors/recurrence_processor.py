# File: calsync/processors/recurrence_processor.py

from typing import List, Optional

from calsync.core.config_manager import Config
from calsync.processors.datetime_resolver import format_rrule_anchor
from calsync.utils.logger import setup_logger

logger = setup_logger(__name__)


def translate_recurrence(rule_lines: Optional[List[str]], start_instant: int, timezone: str) -> Optional[str]:
    """
    Build the task recurrence rule from an event's RFC 5545 rule lines.

    Only the first line is used; EXDATE/RDATE lines that follow it are
    dropped. Example result:
        DTSTART:20200701T090000 RRULE:FREQ=DAILY;UNTIL=20200724T065959Z
    """
    if not rule_lines:
        return None

    if len(rule_lines) > 1:
        logger.debug(f"Ignoring {len(rule_lines) - 1} extra recurrence line(s)")

    anchor = format_rrule_anchor(start_instant, timezone)
    return f"{Config.RRULE_PREFIX}{anchor} {rule_lines[0]}"
