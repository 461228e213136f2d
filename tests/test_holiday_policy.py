"""Holiday and weekend override policy tests."""

import pytest

from preorder.core.errors import ValidationError
from preorder.services.holiday_service import (
    CompositeHolidayCalendar,
    StaticHolidayCalendar,
    WeekendOverride,
    day_status,
    disable_override,
    enable_override,
    is_holiday,
    is_ordering_default_open,
    is_ordering_open,
    is_override_active,
)


def test_is_holiday_returns_display_name() -> None:
    assert is_holiday("2026-02-17") == "春節"
    assert is_holiday("2026-02-23") is None


def test_default_rule_closes_weekends_and_holidays() -> None:
    assert is_ordering_default_open("2026-03-10") is True
    assert is_ordering_default_open("2026-03-14") is False
    assert is_ordering_default_open("2026-02-17") is False


@pytest.mark.parametrize("reason", ["", "   ", "\n"])
def test_enable_override_requires_justification(reason: str) -> None:
    with pytest.raises(ValidationError):
        enable_override("2026-03-14", reason, {})


def test_enabled_override_opens_weekend() -> None:
    overrides = enable_override("2026-03-14", "  staff event ", {})

    assert overrides["2026-03-14"] == WeekendOverride(enabled=True, reason="staff event")
    assert is_override_active("2026-03-14", overrides) is True
    assert is_ordering_open("2026-03-14", overrides) is True
    assert is_ordering_open("2026-03-15", overrides) is False


def test_enable_override_does_not_mutate_input() -> None:
    original: dict[str, WeekendOverride] = {}
    enable_override("2026-03-14", "staff event", original)

    assert original == {}


def test_disable_override_reverts_weekend_to_closed() -> None:
    overrides = enable_override("2026-03-14", "staff event", {})
    overrides = disable_override("2026-03-14", overrides)

    assert "2026-03-14" not in overrides
    assert is_ordering_open("2026-03-14", overrides) is False


def test_inactive_or_blank_overrides_do_not_count() -> None:
    overrides = {
        "2026-03-14": WeekendOverride(enabled=False, reason="staff event"),
        "2026-03-15": WeekendOverride(enabled=True, reason=" "),
    }

    assert is_ordering_open("2026-03-14", overrides) is False
    assert is_ordering_open("2026-03-15", overrides) is False


def test_holiday_is_not_overridable() -> None:
    weekday_holiday = {"2026-02-17": WeekendOverride(enabled=True, reason="staff event")}
    weekend_holiday = enable_override("2026-04-04", "staff event", {})

    assert is_ordering_open("2026-02-17", weekday_holiday) is False
    assert is_ordering_open("2026-04-04", weekend_holiday) is False


def test_custom_and_composite_calendars() -> None:
    company_days = StaticHolidayCalendar({"2027-01-04": "Company retreat"})
    combined = CompositeHolidayCalendar([StaticHolidayCalendar({"2027-01-01": "New Year"}), company_days])

    assert is_holiday("2027-01-04", combined) == "Company retreat"
    assert is_holiday("2027-01-01", combined) == "New Year"
    assert is_ordering_default_open("2027-01-04", combined) is False
    assert is_ordering_default_open("2027-01-05", combined) is True


def test_day_status_summarizes_date() -> None:
    status = day_status("2026-03-14", enable_override("2026-03-14", "inventory day", {}))

    assert status.weekday_index == 6
    assert status.is_weekend is True
    assert status.holiday_name is None
    assert status.override_reason == "inventory day"
    assert status.ordering_open is True
