"""
Time helpers shared by the meeting handlers and the session context store.

Meeting times arrive as spoken text ("5pm", "6:30 pm") or already in 24-hour
form ("17:00"). Everything downstream compares times as HH:MM strings in the
configured timezone.
"""

import re
from datetime import date, datetime, time, timedelta
from typing import Optional
from zoneinfo import ZoneInfo

from omniagent.core.config import settings


_TWENTY_FOUR_HOUR = re.compile(r"^\d{1,2}:\d{2}$")
_TWELVE_HOUR = re.compile(r"^(\d{1,2})(?::(\d{2}))?\s*(am|pm)$")


class TimeFormatError(ValueError):
    """Raised when a time string is neither 24-hour nor h[:mm]am/pm."""
    pass


def normalize_time(value: str) -> str:
    """
    Convert a spoken time to 24-hour ``HH:MM``.

    Examples:
        "5pm"     → "17:00"
        "6:30 pm" → "18:30"
        "12am"    → "00:00"
        "12pm"    → "12:00"
        "9:30"    → "9:30" (already 24-hour, returned unchanged)

    Raises:
        TimeFormatError: for any other shape
    """
    text = value.strip().lower()

    if _TWENTY_FOUR_HOUR.match(text):
        return text

    match = _TWELVE_HOUR.match(text)
    if not match:
        raise TimeFormatError(f"Invalid time format: {value}")

    hour = int(match.group(1))
    minute = int(match.group(2)) if match.group(2) else 0
    period = match.group(3)

    if not 1 <= hour <= 12 or minute > 59:
        raise TimeFormatError(f"Invalid time format: {value}")

    if period == "pm" and hour != 12:
        hour += 12
    if period == "am" and hour == 12:
        hour = 0

    return f"{hour:02d}:{minute:02d}"


def pad_hour(hhmm: str) -> str:
    """'9:30' → '09:30' so 24-hour strings compare reliably."""
    hour, minute = hhmm.split(":")
    return f"{int(hour):02d}:{minute}"


def local_timezone() -> ZoneInfo:
    return ZoneInfo(settings.DEFAULT_TIMEZONE)


def to_hour_minute(moment: datetime) -> str:
    """Hour and minute of ``moment`` in the configured timezone."""
    if moment.tzinfo is not None:
        moment = moment.astimezone(local_timezone())
    return moment.strftime("%H:%M")


def display_time(moment: datetime) -> str:
    """Friendly 12-hour rendering, e.g. '5:00 pm'."""
    if moment.tzinfo is not None:
        moment = moment.astimezone(local_timezone())
    hour = moment.hour % 12 or 12
    suffix = "am" if moment.hour < 12 else "pm"
    return f"{hour}:{moment.minute:02d} {suffix}"


def build_time_window(
    day: Optional[str],
    hhmm: str,
    duration_minutes: Optional[int] = None,
) -> tuple:
    """
    Build a (start, end) pair of timezone-aware datetimes.

    Args:
        day: ISO date (YYYY-MM-DD); today in the configured timezone if None
        hhmm: 24-hour time, already normalized
        duration_minutes: defaults to settings.MEETING_DURATION_MINUTES

    Raises:
        ValueError: if ``day`` or ``hhmm`` cannot be parsed
    """
    tz = local_timezone()
    base = date.fromisoformat(day) if day else datetime.now(tz).date()
    hour, minute = (int(part) for part in hhmm.split(":"))
    start = datetime.combine(base, time(hour, minute), tzinfo=tz)
    minutes = duration_minutes or settings.MEETING_DURATION_MINUTES
    return start, start + timedelta(minutes=minutes)


def parse_iso(value: str) -> datetime:
    """Parse an RFC 3339 timestamp as returned by Google/Graph APIs."""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))
