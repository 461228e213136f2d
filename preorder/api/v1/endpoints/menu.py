"""Daily menu curation endpoints: single-date and batch saves, history, overrides."""

from fastapi import APIRouter, Depends, Query

from preorder.api.v1.common import get_menu_store, serialize_daily_menu
from preorder.core.config import settings
from preorder.core.errors import InvalidOperation
from preorder.schemas.menu import (
    DailyMenuResponse,
    DailyMenuSaveRequest,
    MenuHistoryResponse,
    WeekendOverrideRequest,
    WeekendOverrideResponse,
    WeeklyMenuSaveRequest,
    WeeklyMenuSaveResponse,
    WeeklyMenusResponse,
)
from preorder.services.holiday_service import enable_override, is_ordering_open
from preorder.services.menu_store import SqlMenuStore
from preorder.services.selection_engine import enable_weekend, load_draft, save_batch, save_date
from preorder.utils.time import format_calendar_date, is_weekend, today

router: APIRouter = APIRouter()


@router.get("/daily-menu/{menu_date}", response_model=DailyMenuResponse)
def get_daily_menu(menu_date: str, store: SqlMenuStore = Depends(get_menu_store)) -> DailyMenuResponse:
    """Return the selection for one date; a missing record reads as empty."""
    key: str = format_calendar_date(menu_date)
    return serialize_daily_menu(key, store.get(key))


@router.post("/daily-menu/{menu_date}", response_model=DailyMenuResponse)
def post_daily_menu(
    menu_date: str,
    payload: DailyMenuSaveRequest,
    store: SqlMenuStore = Depends(get_menu_store),
) -> DailyMenuResponse:
    """Overwrite the selection for one date."""
    key: str = format_calendar_date(menu_date)
    draft = load_draft(store, [key]).with_selection(key, payload.menu_item_ids)
    if payload.weekend_reason is not None and is_weekend(key):
        draft = enable_weekend(draft, key, payload.weekend_reason)
    return serialize_daily_menu(key, save_date(store, draft, key))


@router.get("/weekly-menu", response_model=WeeklyMenusResponse)
def get_weekly_menu(
    start_date: str = Query(alias="startDate"),
    end_date: str = Query(alias="endDate"),
    store: SqlMenuStore = Depends(get_menu_store),
) -> WeeklyMenusResponse:
    """Return stored menus within the inclusive date range."""
    records = sorted(store.get_range(start_date, end_date), key=lambda record: record.date)
    return WeeklyMenusResponse(weekly_menus=[serialize_daily_menu(record.date, record) for record in records])


@router.post("/weekly-menu", response_model=WeeklyMenuSaveResponse)
def post_weekly_menu(
    payload: WeeklyMenuSaveRequest,
    store: SqlMenuStore = Depends(get_menu_store),
) -> WeeklyMenuSaveResponse:
    """Save several dates as independent upserts."""
    keys: list[str] = [format_calendar_date(entry.date) for entry in payload.menus]
    draft = load_draft(store, keys)
    for key, entry in zip(keys, payload.menus):
        draft = draft.with_selection(key, entry.menu_item_ids)
        if entry.weekend_reason is not None and is_weekend(key):
            draft = enable_weekend(draft, key, entry.weekend_reason)
    result = save_batch(store, draft, keys)
    return WeeklyMenuSaveResponse(success=True, count=result.saved_count)


@router.get("/menu-history", response_model=MenuHistoryResponse)
def get_menu_history(store: SqlMenuStore = Depends(get_menu_store)) -> MenuHistoryResponse:
    """Return past dates with a non-empty selection, newest first."""
    records = store.get_all_before(today())
    if settings.history_limit > 0:
        records = records[: settings.history_limit]
    return MenuHistoryResponse(history_menus=[serialize_daily_menu(record.date, record) for record in records])


@router.put("/weekend-overrides/{override_date}", response_model=WeekendOverrideResponse)
def put_weekend_override(
    override_date: str,
    payload: WeekendOverrideRequest,
    store: SqlMenuStore = Depends(get_menu_store),
) -> WeekendOverrideResponse:
    """Open a weekend date for ordering; a justification is mandatory."""
    key: str = format_calendar_date(override_date)
    if not is_weekend(key):
        raise InvalidOperation(f"{key} is not a weekend date", {"date": key})
    overrides = enable_override(key, payload.reason, {})
    store.put_override(key, overrides[key])
    return WeekendOverrideResponse(
        date=key,
        enabled=True,
        reason=overrides[key].reason,
        ordering_open=is_ordering_open(key, overrides),
    )


@router.delete("/weekend-overrides/{override_date}", response_model=WeekendOverrideResponse)
def delete_weekend_override(
    override_date: str,
    store: SqlMenuStore = Depends(get_menu_store),
) -> WeekendOverrideResponse:
    key: str = format_calendar_date(override_date)
    store.remove_override(key)
    return WeekendOverrideResponse(date=key, enabled=False, reason=None, ordering_open=is_ordering_open(key, {}))
