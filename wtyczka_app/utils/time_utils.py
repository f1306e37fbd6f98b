"""
Centralized Utilities for Time Handling in Wtyczka.
Goal: every comparison happens between timezone-aware datetimes.
"""
import re
from datetime import date, datetime, timezone
from typing import Optional, Tuple

import pytz

_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")
# Trailing UTC offset written as +HH, +HHMM or +HH:MM
_OFFSET = re.compile(r"([+-])(\d{2}):?(\d{2})?$")


def _colon_offset(match) -> str:
    sign, hours, minutes = match.groups()
    return f"{sign}{hours}:{minutes or '00'}"


def utcnow() -> datetime:
    """
    Get the current timezone-aware UTC datetime.
    Always use this instead of datetime.utcnow() or datetime.now().
    """
    return datetime.now(timezone.utc)


def parse_iso_datetime(raw: str, naive_tz: Optional[str] = None) -> Tuple[datetime, bool]:
    """
    Parse an ISO-8601 string into an aware datetime.

    A trailing ``Z`` is accepted as UTC, and a bare ``YYYY-MM-DD`` is midnight
    UTC. Values that carry an offset (``+HH:MM``, ``+HHMM`` or ``+HH``) keep it.
    Values without one are localised to ``naive_tz`` (a tz database name) or,
    when that is None, to the server's local timezone.

    Returns:
        (aware datetime, was_naive)

    Raises:
        ValueError: the value is not an ISO-8601 date or datetime, or the
            timezone name is unknown.
    """
    if not isinstance(raw, str):
        raise ValueError(f"Expected an ISO-8601 string, got {type(raw).__name__}")

    text = raw.strip()

    # A bare calendar date means midnight UTC, not local midnight.
    if _DATE_ONLY.match(text):
        return datetime.fromisoformat(text).replace(tzinfo=timezone.utc), False

    if text.endswith(('Z', 'z')):
        text = text[:-1] + '+00:00'
    text = text[:10] + _OFFSET.sub(_colon_offset, text[10:])

    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is not None:
        return parsed, False

    if naive_tz:
        try:
            zone = pytz.timezone(naive_tz)
        except pytz.UnknownTimeZoneError as exc:
            raise ValueError(f"Unknown timezone {naive_tz!r}") from exc
        return zone.localize(parsed), True

    # Naive datetime.astimezone() assumes the system local timezone.
    return parsed.astimezone(), True


def age_on(birth_date: date, on_day: date) -> int:
    """Full years between ``birth_date`` and ``on_day``."""
    years = on_day.year - birth_date.year
    if (on_day.month, on_day.day) < (birth_date.month, birth_date.day):
        years -= 1
    return years
