"""Holiday calendar and weekend override policy.

Weekends and holidays are closed by default. Administrators can open a weekend
by recording an override with a justification. Holidays cannot be reopened.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from preorder.core.errors import ValidationError
from preorder.utils.time import DateLike, format_calendar_date, is_weekend, parse_calendar_date, weekday_index

TAIWAN_HOLIDAYS_2026: dict[str, str] = {
    "2026-01-01": "元旦",
    "2026-02-16": "農曆除夕",
    "2026-02-17": "春節",
    "2026-02-18": "春節",
    "2026-02-19": "春節",
    "2026-02-20": "春節",
    "2026-02-28": "和平紀念日",
    "2026-04-03": "清明節",
    "2026-04-04": "清明節",
    "2026-04-05": "清明節",
    "2026-06-25": "端午節",
    "2026-06-26": "端午節",
    "2026-06-27": "端午節",
    "2026-10-01": "中秋節",
    "2026-10-02": "中秋節",
    "2026-10-09": "國慶日",
    "2026-10-10": "國慶日",
}


class HolidayCalendar(Protocol):
    def holiday_name(self, value: date) -> str | None:
        """Return the holiday display name for a date, or None."""


class StaticHolidayCalendar:
    """Holiday calendar backed by a fixed date -> name mapping."""

    def __init__(self, holidays: Mapping[str, str]) -> None:
        self._holidays: dict[str, str] = {format_calendar_date(key): name for key, name in holidays.items()}

    def holiday_name(self, value: date) -> str | None:
        return self._holidays.get(value.isoformat())


class CompositeHolidayCalendar:
    """Combine several calendars (years or regions); the first match wins."""

    def __init__(self, calendars: Iterable[HolidayCalendar]) -> None:
        self._calendars: list[HolidayCalendar] = list(calendars)

    def holiday_name(self, value: date) -> str | None:
        for holiday_calendar in self._calendars:
            name = holiday_calendar.holiday_name(value)
            if name:
                return name
        return None


DEFAULT_HOLIDAY_CALENDAR: HolidayCalendar = StaticHolidayCalendar(TAIWAN_HOLIDAYS_2026)


@dataclass(frozen=True)
class WeekendOverride:
    enabled: bool
    reason: str


Overrides = Mapping[str, WeekendOverride]


@dataclass(frozen=True)
class DayStatus:
    """Scheduling status of one date as shown by calendar and week views."""

    date: str
    weekday_index: int
    is_weekend: bool
    holiday_name: str | None
    override_reason: str | None
    ordering_open: bool


def is_holiday(value: DateLike, holiday_calendar: HolidayCalendar = DEFAULT_HOLIDAY_CALENDAR) -> str | None:
    """Return the holiday name for the date, or None when it is not a holiday."""
    return holiday_calendar.holiday_name(parse_calendar_date(value))


def is_ordering_default_open(value: DateLike, holiday_calendar: HolidayCalendar = DEFAULT_HOLIDAY_CALENDAR) -> bool:
    """Default rule before overrides: closed on weekends and holidays."""
    parsed: date = parse_calendar_date(value)
    return not is_weekend(parsed) and is_holiday(parsed, holiday_calendar) is None


def is_override_active(value: DateLike, overrides: Overrides) -> bool:
    override = overrides.get(format_calendar_date(value))
    return override is not None and override.enabled and bool(override.reason.strip())


def is_ordering_open(
    value: DateLike,
    overrides: Overrides,
    holiday_calendar: HolidayCalendar = DEFAULT_HOLIDAY_CALENDAR,
) -> bool:
    """Return whether administrators may publish ordering for the date.

    An override only reopens weekends; a holiday stays closed regardless.
    """
    parsed: date = parse_calendar_date(value)
    if is_ordering_default_open(parsed, holiday_calendar):
        return True
    if is_holiday(parsed, holiday_calendar) is not None:
        return False
    return is_override_active(parsed, overrides)


def enable_override(value: DateLike, reason: str, overrides: Overrides) -> dict[str, WeekendOverride]:
    """Return overrides with the date opened for ordering."""
    key: str = format_calendar_date(value)
    cleaned: str = (reason or "").strip()
    if not cleaned:
        raise ValidationError("A justification is required to open a weekend date", {"date": key})
    updated: dict[str, WeekendOverride] = dict(overrides)
    updated[key] = WeekendOverride(enabled=True, reason=cleaned)
    return updated


def disable_override(value: DateLike, overrides: Overrides) -> dict[str, WeekendOverride]:
    """Return overrides without the date; a weekend reverts to closed."""
    key: str = format_calendar_date(value)
    updated: dict[str, WeekendOverride] = dict(overrides)
    updated.pop(key, None)
    return updated


def day_status(
    value: DateLike,
    overrides: Overrides,
    holiday_calendar: HolidayCalendar = DEFAULT_HOLIDAY_CALENDAR,
) -> DayStatus:
    parsed: date = parse_calendar_date(value)
    override = overrides.get(parsed.isoformat())
    return DayStatus(
        date=parsed.isoformat(),
        weekday_index=weekday_index(parsed),
        is_weekend=is_weekend(parsed),
        holiday_name=is_holiday(parsed, holiday_calendar),
        override_reason=override.reason if override is not None and override.enabled else None,
        ordering_open=is_ordering_open(parsed, overrides, holiday_calendar),
    )
