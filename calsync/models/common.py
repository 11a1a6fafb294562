# File: calsync/models/common.py

from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_iso_datetime(date_str: Optional[str]) -> Optional[datetime]:
    """Robustly parse ISO date strings with 'Z' or offsets."""
    if not date_str:
        return None
    # fromisoformat before 3.11 rejects a trailing 'Z'
    clean_str = date_str.replace('Z', '+00:00')
    try:
        return datetime.fromisoformat(clean_str)
    except ValueError:
        raise ValueError(f"Malformed date-time: {date_str!r}")


def to_epoch_millis(dt: datetime) -> int:
    """Milliseconds since the epoch. Naive datetimes are read as UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return (dt - EPOCH) // timedelta(milliseconds=1)


def from_epoch_millis(value: int) -> datetime:
    """UTC datetime for an epoch-millisecond value."""
    return EPOCH + timedelta(milliseconds=value)


def parse_rfc3339(date_str: str) -> Tuple[int, int]:
    """Parse an RFC 3339 date-time into (epoch millis, offset minutes)."""
    dt = parse_iso_datetime(date_str)
    offset = dt.utcoffset()
    tz_shift = int(offset.total_seconds() // 60) if offset is not None else 0
    return to_epoch_millis(dt), tz_shift


def format_rfc3339(value: int, tz_shift: int = 0) -> str:
    """
    Render epoch millis as RFC 3339 in a fixed offset, with milliseconds.

    A zero offset renders as 'Z'. Example: 2020-07-01T09:00:00.000-07:00
    """
    local = from_epoch_millis(value) + timedelta(minutes=tz_shift)
    text = local.strftime("%Y-%m-%dT%H:%M:%S") + f".{local.microsecond // 1000:03d}"
    if tz_shift == 0:
        return text + "Z"
    sign = '+' if tz_shift > 0 else '-'
    hours, minutes = divmod(abs(tz_shift), 60)
    return f"{text}{sign}{hours:02d}:{minutes:02d}"


def parse_date_millis(date_str: str) -> int:
    """Epoch millis of midnight UTC on a 'YYYY-MM-DD' date."""
    try:
        day = datetime.strptime(date_str, "%Y-%m-%d")
    except ValueError:
        raise ValueError(f"Malformed date: {date_str!r}")
    return to_epoch_millis(day.replace(tzinfo=timezone.utc))
