"""Calendar helpers.

Every "day" in this system is a calendar date in the configured local zone.
Instants are stored in UTC; `local_date` is the single truncation rule used
to map an instant back onto its day.
"""
from __future__ import annotations

import logging
import os
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.constants import ATTENDANCE_ANCHOR_HOUR
from ..core.exceptions import NotConfiguredError, ValidationError

logger = logging.getLogger(__name__)

LOCALTIME_PATH = "/etc/localtime"


def resolve_timezone(name: Optional[str]) -> tzinfo:
    """Return the zone named by settings, or the server's local zone when blank."""
    if not name:
        return server_timezone()
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise NotConfiguredError(f"Unknown TIMEZONE setting: {name!r}") from exc


def server_timezone() -> tzinfo:
    """The host's zone with its DST rules: $TZ, then /etc/localtime, else UTC."""
    name = os.environ.get("TZ", "").lstrip(":")
    if name:
        try:
            return ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning("TZ=%r is not a known zone; trying %s", name, LOCALTIME_PATH)
    try:
        with open(LOCALTIME_PATH, "rb") as fh:
            return ZoneInfo.from_file(fh, key="localtime")
    except (OSError, ValueError):
        logger.warning("Could not read the server time zone; using UTC")
    return timezone.utc


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Date parameter is required (YYYY-MM-DD)")
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError as exc:
        raise ValidationError(f"Invalid date: {value!r} (expected YYYY-MM-DD)") from exc


def parse_month(value: str) -> date:
    """Parse YYYY-MM string into the first day of that month."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Month parameter is required (YYYY-MM)")
    try:
        return datetime.strptime(value.strip(), "%Y-%m").date()
    except ValueError as exc:
        raise ValidationError(f"Invalid month: {value!r} (expected YYYY-MM)") from exc


def local_date(instant: datetime, tz: tzinfo) -> date:
    """Calendar date of `instant` as seen in `tz`.

    Naive datetimes are treated as UTC, which is how they are stored.
    """
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(tz).date()


def local_time(instant: datetime, tz: tzinfo) -> str:
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(tz).strftime("%H:%M:%S")


def start_of_day(day: date, tz: tzinfo) -> datetime:
    return datetime.combine(day, time.min, tzinfo=tz)


def day_bounds(day: date, tz: tzinfo) -> tuple[datetime, datetime]:
    """Half-open `[start, end)` instant range covering `day` in `tz`."""
    return start_of_day(day, tz), start_of_day(day + timedelta(days=1), tz)


def month_bounds(first_day: date, tz: tzinfo) -> tuple[datetime, datetime]:
    first_day = first_day.replace(day=1)
    next_month = (first_day + timedelta(days=32)).replace(day=1)
    return start_of_day(first_day, tz), start_of_day(next_month, tz)


def anchor_instant(day: date, tz: tzinfo) -> datetime:
    """Noon on `day` in `tz`, the timestamp given to reconciled rows."""
    return datetime.combine(day, time(hour=ATTENDANCE_ANCHOR_HOUR), tzinfo=tz)


def short_label(day: date) -> str:
    """Chart label such as 'Oct 8'."""
    return f"{day.strftime('%b')} {day.day}"


def now_local(tz: tzinfo) -> datetime:
    """Current time in `tz`; services take an injectable clock defaulting to this."""
    return datetime.now(tz)
