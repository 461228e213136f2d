"""Customer-facing date picker and published menu endpoints."""

from datetime import date

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from preorder.api.v1.common import get_menu_store, serialize_menu_item
from preorder.db.session import get_db
from preorder.schemas.menu import CustomerDateResponse, CustomerDatesResponse, CustomerMenuResponse
from preorder.services.catalog_service import list_catalog
from preorder.services.eligibility_service import (
    can_order_for_date,
    customer_dates,
    default_customer_date,
    filter_published_items,
)
from preorder.services.menu_store import SqlMenuStore
from preorder.utils.time import format_calendar_date, today

router: APIRouter = APIRouter()


@router.get("/dates", response_model=CustomerDatesResponse)
def get_customer_dates() -> CustomerDatesResponse:
    """Return the date strip shown to customers, flagging orderable dates."""
    current: date = today()
    return CustomerDatesResponse(
        today=current.isoformat(),
        default_date=default_customer_date(current).isoformat(),
        dates=[
            CustomerDateResponse(
                date=entry.date,
                selectable=entry.selectable,
                is_today=entry.is_today,
                is_tomorrow=entry.is_tomorrow,
            )
            for entry in customer_dates(current)
        ],
    )


@router.get("/menu/{menu_date}", response_model=CustomerMenuResponse)
def get_customer_menu(
    menu_date: str,
    db: Session = Depends(get_db),
    store: SqlMenuStore = Depends(get_menu_store),
) -> CustomerMenuResponse:
    """Return the published items for a date; past dates are preview-only."""
    key: str = format_calendar_date(menu_date)
    items = filter_published_items(key, list_catalog(db), store)
    return CustomerMenuResponse(
        date=key,
        can_order=can_order_for_date(key),
        items=[serialize_menu_item(item) for item in items],
    )
