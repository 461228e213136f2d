"""Calendar date helper tests."""

from datetime import date, datetime, timezone

import pytest

from preorder.core.errors import InvalidDate
from preorder.utils.time import (
    date_range,
    format_calendar_date,
    is_weekend,
    month_dates,
    parse_calendar_date,
    today,
    week_of,
    weekday_index,
)


def test_today_converts_utc_instant_into_taipei_date() -> None:
    late_utc_evening = datetime(2026, 10, 14, 17, 30, tzinfo=timezone.utc)

    assert today(late_utc_evening) == date(2026, 10, 15)


def test_today_rejects_naive_now() -> None:
    with pytest.raises(InvalidDate):
        today(datetime(2026, 10, 14, 17, 30))


def test_weekday_index_is_sunday_based() -> None:
    assert weekday_index("2026-03-15") == 0
    assert weekday_index("2026-03-09") == 1
    assert weekday_index("2026-03-14") == 6
    assert weekday_index(date(2026, 10, 15)) == 4


def test_is_weekend_matches_weekday_index_for_a_whole_year() -> None:
    for value in date_range("2026-01-01", "2026-12-31"):
        assert is_weekend(value) == (weekday_index(value) in {0, 6})


def test_week_of_is_monday_anchored() -> None:
    week = week_of("2026-03-15")

    assert [value.isoformat() for value in week] == [
        "2026-03-09",
        "2026-03-10",
        "2026-03-11",
        "2026-03-12",
        "2026-03-13",
        "2026-03-14",
        "2026-03-15",
    ]
    assert week_of("2026-03-09") == week


def test_month_dates_returns_every_day_and_first_weekday() -> None:
    dates, first_weekday = month_dates("2026-10")

    assert len(dates) == 31
    assert dates[0] == date(2026, 10, 1)
    assert dates[-1] == date(2026, 10, 31)
    assert first_weekday == 4

    february, _ = month_dates((2028, 2))
    assert len(february) == 29


@pytest.mark.parametrize("value", ["2026-3-1", "2026-02-30", "not-a-date", "2026-03-10T00:00", "", None])
def test_malformed_dates_raise_invalid_date(value) -> None:
    with pytest.raises(InvalidDate):
        parse_calendar_date(value)


@pytest.mark.parametrize("value", ["2026-13", "26-01", "2026/01"])
def test_malformed_year_month_raises_invalid_date(value: str) -> None:
    with pytest.raises(InvalidDate):
        month_dates(value)


def test_format_calendar_date_is_canonical() -> None:
    assert format_calendar_date(date(2026, 1, 5)) == "2026-01-05"
    assert format_calendar_date("2026-01-05") == "2026-01-05"


def test_date_range_rejects_reversed_bounds() -> None:
    with pytest.raises(InvalidDate):
        date_range("2026-03-11", "2026-03-09")
