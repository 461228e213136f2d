"""Customer-facing order eligibility: which dates accept orders and what is published."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta

from preorder.core.config import settings
from preorder.services.catalog_service import CatalogItem
from preorder.services.menu_store import DailyMenuRecord, MenuAvailabilityStore
from preorder.utils.time import DateLike, parse_calendar_date, today as regional_today


@dataclass(frozen=True)
class CustomerDate:
    date: str
    selectable: bool
    is_today: bool
    is_tomorrow: bool


def is_date_selectable(value: DateLike, today: date | None = None) -> bool:
    """Return True when the date is at least the lead time after today.

    Today and past dates can still be shown for preview but not ordered.
    """
    current: date = today or regional_today()
    return parse_calendar_date(value) >= current + timedelta(days=settings.order_lead_days)


def can_order_for_date(value: DateLike, today: date | None = None) -> bool:
    # Weekend/holiday closure only governs curation, not purchasability.
    return is_date_selectable(value, today)


def filter_published_items(
    value: DateLike,
    catalog: Iterable[CatalogItem],
    store: MenuAvailabilityStore,
) -> list[CatalogItem]:
    """Return catalog items selected for the date, in catalog order.

    An empty or missing selection publishes nothing; there is no fallback menu.
    """
    record: DailyMenuRecord | None = store.get(value)
    if record is None or not record.menu_item_ids:
        return []
    return [item for item in catalog if item.id in record.menu_item_ids]


def customer_dates(today: date | None = None, days: int | None = None) -> list[CustomerDate]:
    """Return the date picker strip: today and the following days."""
    current: date = today or regional_today()
    count: int = days if days is not None else settings.customer_days_ahead
    result: list[CustomerDate] = []
    for offset in range(count):
        value: date = current + timedelta(days=offset)
        result.append(
            CustomerDate(
                date=value.isoformat(),
                selectable=is_date_selectable(value, current),
                is_today=offset == 0,
                is_tomorrow=offset == 1,
            )
        )
    return result


def default_customer_date(today: date | None = None) -> date:
    """Return the date preselected in the customer app (tomorrow)."""
    current: date = today or regional_today()
    return current + timedelta(days=settings.order_lead_days)
