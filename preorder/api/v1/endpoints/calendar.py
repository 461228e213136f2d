"""Week and month calendar views plus the per-date restaurant selection view."""

from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from preorder.api.v1.common import get_menu_store
from preorder.db.session import get_db
from preorder.schemas.menu import (
    DayStatusResponse,
    ItemSelectionResponse,
    MonthViewResponse,
    RestaurantSelectionResponse,
    SelectionViewResponse,
    WeekViewResponse,
)
from preorder.services.catalog_service import list_catalog, list_restaurants
from preorder.services.holiday_service import day_status, is_ordering_open
from preorder.services.menu_store import SqlMenuStore
from preorder.services.selection_engine import (
    MenuDraft,
    group_by_restaurant,
    load_draft,
    restaurant_selection_state,
    selected_count,
)
from preorder.utils.time import format_calendar_date, month_dates, parse_year_month, week_of

router: APIRouter = APIRouter()


def _day_statuses(draft: MenuDraft, dates: list[date]) -> list[DayStatusResponse]:
    days: list[DayStatusResponse] = []
    for value in dates:
        status = day_status(value, draft.overrides)
        days.append(
            DayStatusResponse(
                date=status.date,
                weekday_index=status.weekday_index,
                is_weekend=status.is_weekend,
                holiday_name=status.holiday_name,
                override_reason=status.override_reason,
                ordering_open=status.ordering_open,
                selected_count=selected_count(draft, value),
            )
        )
    return days


@router.get("/week/{menu_date}", response_model=WeekViewResponse)
def get_week_view(menu_date: str, store: SqlMenuStore = Depends(get_menu_store)) -> WeekViewResponse:
    """Return status of each day of the Monday-anchored week containing the date."""
    week: list[date] = week_of(menu_date)
    draft = load_draft(store, week)
    return WeekViewResponse(
        start_date=week[0].isoformat(),
        end_date=week[-1].isoformat(),
        days=_day_statuses(draft, week),
    )


@router.get("/month/{year_month}", response_model=MonthViewResponse)
def get_month_view(year_month: str, store: SqlMenuStore = Depends(get_menu_store)) -> MonthViewResponse:
    """Return the month grid with holidays, overrides and selection counts."""
    dates, first_weekday = month_dates(year_month)
    year, month = parse_year_month(year_month)
    draft = load_draft(store, dates)
    return MonthViewResponse(
        year_month=f"{year:04d}-{month:02d}",
        first_weekday_index=first_weekday,
        days=_day_statuses(draft, dates),
    )


@router.get("/selection/{menu_date}", response_model=SelectionViewResponse)
def get_selection_view(
    menu_date: str,
    search: str = Query(default=""),
    db: Session = Depends(get_db),
    store: SqlMenuStore = Depends(get_menu_store),
) -> SelectionViewResponse:
    """Return restaurant groups with their selection state for one date."""
    key: str = format_calendar_date(menu_date)
    draft = load_draft(store, [key])
    selection = draft.selection(key)
    groups = group_by_restaurant(list_catalog(db), list_restaurants(db), search)
    return SelectionViewResponse(
        date=key,
        ordering_open=is_ordering_open(key, draft.overrides),
        selected_count=selected_count(draft, key),
        restaurants=[
            RestaurantSelectionResponse(
                restaurant_id=group.restaurant_id,
                restaurant_name=group.restaurant_name,
                state=restaurant_selection_state(draft, key, group.item_ids).value,
                items=[
                    ItemSelectionResponse(id=item.id, name=item.name, price=item.price, selected=item.id in selection)
                    for item in group.items
                ],
            )
            for group in groups
        ],
    )
