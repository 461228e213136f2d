"""Menu selection engine shared by the daily, weekly and monthly editors.

Editors work on a ``MenuDraft``: an immutable snapshot of per-date selections
and weekend overrides. Every editing action returns a new draft, so a caller
owns its draft explicitly and nothing reaches the store until ``save_date`` or
``save_batch`` is called. Discarding a draft discards the edits.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field, replace
from enum import Enum

from preorder.core.errors import BatchSaveError, InvalidOperation, StorageError
from preorder.services.catalog_service import CatalogItem, RestaurantView
from preorder.services.holiday_service import WeekendOverride, disable_override, enable_override, is_override_active
from preorder.services.menu_store import DailyMenuRecord, MenuAvailabilityStore, dates_to_keys
from preorder.utils.time import DateLike, format_calendar_date, is_weekend

logger = logging.getLogger(__name__)


class SelectionState(str, Enum):
    NONE = "none"
    PARTIAL = "partial"
    ALL = "all"


@dataclass(frozen=True)
class RestaurantGroup:
    restaurant_id: str
    restaurant_name: str
    items: tuple[CatalogItem, ...]

    @property
    def item_ids(self) -> frozenset[str]:
        return frozenset(item.id for item in self.items)


@dataclass(frozen=True)
class MenuDraft:
    """Unsaved selections keyed by YYYY-MM-DD, plus weekend overrides."""

    selections: Mapping[str, frozenset[str]] = field(default_factory=dict)
    overrides: Mapping[str, WeekendOverride] = field(default_factory=dict)

    def selection(self, menu_date: DateLike) -> frozenset[str]:
        return self.selections.get(format_calendar_date(menu_date), frozenset())

    def with_selection(self, menu_date: DateLike, menu_item_ids: Iterable[str]) -> MenuDraft:
        selections: dict[str, frozenset[str]] = dict(self.selections)
        selections[format_calendar_date(menu_date)] = frozenset(menu_item_ids)
        return replace(self, selections=selections)

    @property
    def dates(self) -> list[str]:
        return sorted(self.selections)


@dataclass(frozen=True)
class BatchSaveResult:
    saved_count: int
    saved_dates: tuple[str, ...]


def new_draft(dates: Iterable[DateLike]) -> MenuDraft:
    """Return a draft with an empty selection for every date."""
    return MenuDraft(selections={key: frozenset() for key in dates_to_keys(dates)})


def load_draft(store: MenuAvailabilityStore, dates: Sequence[DateLike]) -> MenuDraft:
    """Read persisted selections and overrides for the dates into a fresh draft.

    A date without a stored record is read as an empty selection.
    """
    keys: list[str] = dates_to_keys(dates)
    if not keys:
        return MenuDraft()
    start, end = min(keys), max(keys)
    selections: dict[str, frozenset[str]] = {key: frozenset() for key in keys}
    for record in store.get_range(start, end):
        if record.date in selections:
            selections[record.date] = record.menu_item_ids
    overrides: dict[str, WeekendOverride] = {
        key: override for key, override in store.get_overrides(start, end).items() if key in selections
    }
    return MenuDraft(selections=selections, overrides=overrides)


def group_by_restaurant(
    items: Iterable[CatalogItem],
    restaurants: Iterable[RestaurantView] | None = None,
    search: str = "",
) -> list[RestaurantGroup]:
    """Partition catalog items by restaurant in first-seen order.

    A search term keeps only restaurants whose name contains it,
    case-insensitively.
    """
    names: dict[str, str] = {restaurant.id: restaurant.name for restaurant in restaurants or []}
    needle: str = search.strip().lower()
    grouped: dict[str, list[CatalogItem]] = {}
    for item in items:
        grouped.setdefault(item.restaurant_id, []).append(item)

    groups: list[RestaurantGroup] = []
    for restaurant_id, restaurant_items in grouped.items():
        name: str = names.get(restaurant_id, "")
        if needle and needle not in name.lower():
            continue
        groups.append(RestaurantGroup(restaurant_id=restaurant_id, restaurant_name=name, items=tuple(restaurant_items)))
    return groups


def restaurant_selection_state(
    draft: MenuDraft,
    menu_date: DateLike,
    restaurant_item_ids: Iterable[str],
) -> SelectionState:
    item_ids: set[str] = set(restaurant_item_ids)
    if not item_ids:
        return SelectionState.NONE
    selected_count: int = len(item_ids & draft.selection(menu_date))
    if selected_count == 0:
        return SelectionState.NONE
    if selected_count == len(item_ids):
        return SelectionState.ALL
    return SelectionState.PARTIAL


def selected_count(draft: MenuDraft, menu_date: DateLike) -> int:
    return len(draft.selection(menu_date))


def toggle_item(draft: MenuDraft, menu_date: DateLike, menu_item_id: str) -> MenuDraft:
    current: frozenset[str] = draft.selection(menu_date)
    if menu_item_id in current:
        return draft.with_selection(menu_date, current - {menu_item_id})
    return draft.with_selection(menu_date, current | {menu_item_id})


def toggle_restaurant(draft: MenuDraft, menu_date: DateLike, restaurant_item_ids: Iterable[str]) -> MenuDraft:
    """Clear a fully selected restaurant; otherwise select all of its items."""
    item_ids: frozenset[str] = frozenset(restaurant_item_ids)
    current: frozenset[str] = draft.selection(menu_date)
    if restaurant_selection_state(draft, menu_date, item_ids) is SelectionState.ALL:
        return draft.with_selection(menu_date, current - item_ids)
    return draft.with_selection(menu_date, current | item_ids)


def copy_forward(draft: MenuDraft, week_dates: Sequence[DateLike], index: int) -> MenuDraft:
    """Replace day ``index`` of the week with a copy of the previous day."""
    if index == 0:
        raise InvalidOperation("The first day of the week has no previous day to copy from", {"index": index})
    if not 0 < index < len(week_dates):
        raise InvalidOperation(f"Day index {index} is outside the week", {"index": index})
    source: frozenset[str] = draft.selection(week_dates[index - 1])
    return draft.with_selection(week_dates[index], set(source))


def enable_weekend(draft: MenuDraft, menu_date: DateLike, reason: str) -> MenuDraft:
    return replace(draft, overrides=enable_override(menu_date, reason, draft.overrides))


def disable_weekend(draft: MenuDraft, menu_date: DateLike) -> MenuDraft:
    return replace(draft, overrides=disable_override(menu_date, draft.overrides))


def _persist_date(store: MenuAvailabilityStore, draft: MenuDraft, key: str) -> DailyMenuRecord:
    if not is_weekend(key):
        return store.set(key, draft.selection(key))
    override: WeekendOverride | None = draft.overrides[key] if is_override_active(key, draft.overrides) else None
    return store.set_with_override(key, draft.selection(key), override)


def save_date(store: MenuAvailabilityStore, draft: MenuDraft, menu_date: DateLike) -> DailyMenuRecord:
    """Persist the draft selection of one date as a single upsert.

    For a weekend date the draft's override is written in the same commit and
    its justification is recorded on the daily menu; a failure leaves neither.
    """
    return _persist_date(store, draft, format_calendar_date(menu_date))


def save_batch(
    store: MenuAvailabilityStore,
    draft: MenuDraft,
    dates: Iterable[DateLike] | None = None,
) -> BatchSaveResult:
    """Persist several dates as a sequence of independent upserts.

    This is not a transaction: when a write fails, the dates saved before it
    stay committed and ``BatchSaveError`` reports how many landed.
    """
    keys: list[str] = dates_to_keys(dates) if dates is not None else draft.dates
    saved: list[str] = []
    for key in keys:
        try:
            _persist_date(store, draft, key)
        except StorageError as exc:
            logger.error("Batch save stopped at %s after %d dates", key, len(saved))
            raise BatchSaveError(
                f"Saving {key} failed after {len(saved)} of {len(keys)} dates were saved",
                saved_count=len(saved),
                failed_date=key,
            ) from exc
        saved.append(key)
    logger.info("Batch saved %d daily menus", len(saved))
    return BatchSaveResult(saved_count=len(saved), saved_dates=tuple(saved))


def _active_overrides(draft: MenuDraft) -> dict[str, WeekendOverride]:
    return {key: draft.overrides[key] for key in draft.dates if is_override_active(key, draft.overrides)}


def is_dirty(draft: MenuDraft, store: MenuAvailabilityStore) -> bool:
    """Return whether any draft date differs from what is stored.

    Both the selections and the weekend overrides are compared.
    """
    persisted: MenuDraft = load_draft(store, draft.dates)
    if any(draft.selection(key) != persisted.selection(key) for key in draft.dates):
        return True
    return _active_overrides(draft) != _active_overrides(persisted)

