"""Calendar date helpers pinned to the configured regional timezone.

Dates cross every boundary as canonical ``YYYY-MM-DD`` strings and are handled
internally as ``datetime.date`` values. Nothing here reads the runtime's local
timezone.
"""

from __future__ import annotations

import calendar
import re
from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from preorder.core.config import settings
from preorder.core.errors import InvalidDate

CALENDAR_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
YEAR_MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")

DateLike = date | str


def parse_calendar_date(value: DateLike) -> date:
    """Parse a canonical YYYY-MM-DD string into a date."""
    if isinstance(value, datetime):
        raise InvalidDate(f"Expected a calendar date without time, got {value!r}")
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not CALENDAR_DATE_PATTERN.match(value):
        raise InvalidDate(f"Invalid calendar date: {value!r}", {"value": str(value)})
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise InvalidDate(f"Invalid calendar date: {value!r}", {"value": value}) from exc


def format_calendar_date(value: DateLike) -> str:
    """Return the canonical YYYY-MM-DD form of a date."""
    return parse_calendar_date(value).isoformat()


def regional_timezone() -> ZoneInfo:
    return ZoneInfo(settings.timezone_name)


def today(now: datetime | None = None) -> date:
    """Return today's date in the regional timezone.

    ``now`` must be timezone-aware when supplied; naive values are rejected so a
    caller cannot silently fall back to the host's local time.
    """
    current: datetime = now or datetime.now(timezone.utc)
    if current.tzinfo is None:
        raise InvalidDate("now() must be timezone-aware")
    return current.astimezone(regional_timezone()).date()


def add_days(value: DateLike, days: int) -> date:
    return parse_calendar_date(value) + timedelta(days=days)


def weekday_index(value: DateLike) -> int:
    """Return 0-6 with Sunday as 0, computed from the calendar components."""
    parsed: date = parse_calendar_date(value)
    # calendar.weekday is Monday=0 and uses only year/month/day.
    return (calendar.weekday(parsed.year, parsed.month, parsed.day) + 1) % 7


def is_weekend(value: DateLike) -> bool:
    return weekday_index(value) in (0, 6)


def week_of(value: DateLike) -> list[date]:
    """Return the Monday-anchored week containing the given date."""
    parsed: date = parse_calendar_date(value)
    monday: date = parsed - timedelta(days=parsed.weekday())
    return [monday + timedelta(days=offset) for offset in range(7)]


def date_range(start: DateLike, end: DateLike) -> list[date]:
    """Return every date from start to end, both inclusive."""
    start_date: date = parse_calendar_date(start)
    end_date: date = parse_calendar_date(end)
    if end_date < start_date:
        raise InvalidDate(f"Range end {end_date.isoformat()} is before start {start_date.isoformat()}")
    return [start_date + timedelta(days=offset) for offset in range((end_date - start_date).days + 1)]


def parse_year_month(value: str | tuple[int, int]) -> tuple[int, int]:
    """Parse YYYY-MM (or a (year, month) pair) into integers."""
    if isinstance(value, tuple):
        year, month = value
    else:
        match = YEAR_MONTH_PATTERN.match(value) if isinstance(value, str) else None
        if match is None:
            raise InvalidDate(f"Invalid year-month: {value!r}", {"value": str(value)})
        year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise InvalidDate(f"Invalid month: {month}", {"value": str(value)})
    return year, month


def month_dates(year_month: str | tuple[int, int]) -> tuple[list[date], int]:
    """Return every date of a month and the Sunday-based weekday of the 1st.

    The weekday index is only meant for laying out a calendar grid.
    """
    year, month = parse_year_month(year_month)
    days_in_month: int = calendar.monthrange(year, month)[1]
    dates: list[date] = [date(year, month, day) for day in range(1, days_in_month + 1)]
    return dates, weekday_index(dates[0])
