# src/todo_companion/tasks/dates.py

"""
Date helpers for tasks.

parse_date() accepts, in order:
- ISO-like "YYYY-MM-DD" with an optional " HH:MM" / "THH:MM" suffix (local time),
- "DD/MM/YYYY" with an optional " HH:MM" suffix (local time, day first),
- anything pendulum can make sense of in non-strict mode.

All returned datetimes are timezone-aware, expressed in the local zone and
convertible to UTC; dates within a day of the calendar edges are rejected.
"""

from __future__ import annotations

import logging
import re
from datetime import UTC, date, datetime, timedelta
from typing import Any

import pendulum

logger = logging.getLogger(__name__)

ISO_LIKE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})(?:[ T](\d{2}):(\d{2}))?$")
DAY_FIRST_RE = re.compile(r"^(\d{2})/(\d{2})/(\d{4})(?:\s+(\d{2}):(\d{2}))?$")

NO_DATA = "Sin datos"


# Keep a day of margin so every zone offset still lands inside the calendar in UTC.
_FIRST_DAY = date.min + timedelta(days=1)
_LAST_DAY = date.max - timedelta(days=1)


def _storable(value: datetime) -> datetime | None:
    if not _FIRST_DAY < value.date() < _LAST_DAY:
        return None
    try:
        value.astimezone(UTC)
    except (ValueError, OverflowError):
        return None
    return value


def _local(year: int, month: int, day: int, hour: str | None, minute: str | None) -> datetime | None:
    try:
        naive = datetime(year, month, day, int(hour or 0), int(minute or 0))
        local = naive.astimezone()
    except (ValueError, OverflowError):
        return None
    return _storable(local)


def _fallback(text: str) -> datetime | None:
    try:
        parsed = pendulum.parse(text, strict=False, tz=pendulum.local_timezone())
    except (ValueError, OverflowError):
        return None

    if isinstance(parsed, datetime):
        try:
            instant = ensure_aware(datetime.fromtimestamp(parsed.timestamp(), tz=UTC))
        except (ValueError, OverflowError, OSError):
            return None
        return _storable(instant)
    if isinstance(parsed, date):
        return _local(parsed.year, parsed.month, parsed.day, None, None)
    # Time / Duration / Interval results are not points in time.
    return None


def parse_date(text: Any) -> datetime | None:
    """Best-effort parse of a user- or file-supplied date string (None if unparsable)."""
    if not text or not isinstance(text, str):
        return None
    s = text.strip()
    if not s:
        return None

    m = ISO_LIKE_RE.match(s)
    if m:
        year, month, day, hour, minute = m.groups()
        parsed = _local(int(year), int(month), int(day), hour, minute)
        if parsed is not None:
            return parsed

    m = DAY_FIRST_RE.match(s)
    if m:
        day, month, year, hour, minute = m.groups()
        parsed = _local(int(year), int(month), int(day), hour, minute)
        if parsed is not None:
            return parsed

    parsed = _fallback(s)
    if parsed is None:
        logger.debug("Unparsable date %r", s)
    return parsed


def ensure_aware(value: datetime) -> datetime:
    """Attach/convert to the local zone (naive values are taken as local time)."""
    return value.astimezone()


def now_local() -> datetime:
    return datetime.now().astimezone()


def to_instant_string(value: datetime | None) -> str | None:
    """ISO-8601 UTC instant with millisecond precision, e.g. 2025-12-01T21:00:00.000Z."""
    if value is None:
        return None
    utc = value.astimezone(UTC)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_date(value: datetime | None) -> str:
    """Human-readable local date for the console ("YYYY-MM-DD HH:MM")."""
    if value is None:
        return NO_DATA
    return value.astimezone().strftime("%Y-%m-%d %H:%M")
