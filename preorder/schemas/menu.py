"""Daily menu, calendar and weekend override API schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from preorder.schemas.catalog import MenuItemResponse


class DailyMenuResponse(BaseModel):
    """Serialized daily menu; a missing record is returned with no items."""

    date: str
    menu_item_ids: list[str]
    updated_at: datetime | None = None
    weekend_reason: str | None = None


class DailyMenuSaveRequest(BaseModel):
    """Full selection for one date, optionally opening the weekend."""

    menu_item_ids: list[str] = Field(default_factory=list)
    weekend_reason: str | None = None


class WeeklyMenuEntry(BaseModel):
    date: str
    menu_item_ids: list[str] = Field(default_factory=list)
    weekend_reason: str | None = None


class WeeklyMenuSaveRequest(BaseModel):
    menus: list[WeeklyMenuEntry]


class WeeklyMenuSaveResponse(BaseModel):
    success: bool
    count: int


class WeeklyMenusResponse(BaseModel):
    weekly_menus: list[DailyMenuResponse]


class MenuHistoryResponse(BaseModel):
    history_menus: list[DailyMenuResponse]


class WeekendOverrideRequest(BaseModel):
    reason: str


class WeekendOverrideResponse(BaseModel):
    date: str
    enabled: bool
    reason: str | None
    ordering_open: bool


class DayStatusResponse(BaseModel):
    date: str
    weekday_index: int
    is_weekend: bool
    holiday_name: str | None
    override_reason: str | None
    ordering_open: bool
    selected_count: int


class WeekViewResponse(BaseModel):
    start_date: str
    end_date: str
    days: list[DayStatusResponse]


class MonthViewResponse(BaseModel):
    year_month: str
    first_weekday_index: int
    days: list[DayStatusResponse]


class CustomerDateResponse(BaseModel):
    date: str
    selectable: bool
    is_today: bool
    is_tomorrow: bool


class CustomerDatesResponse(BaseModel):
    today: str
    default_date: str
    dates: list[CustomerDateResponse]


class CustomerMenuResponse(BaseModel):
    date: str
    can_order: bool
    items: list[MenuItemResponse]


class ItemSelectionResponse(BaseModel):
    id: str
    name: str
    price: Decimal
    selected: bool


class RestaurantSelectionResponse(BaseModel):
    """One restaurant group of the editor with its selection state for a date."""

    restaurant_id: str
    restaurant_name: str
    state: str
    items: list[ItemSelectionResponse]


class SelectionViewResponse(BaseModel):
    date: str
    ordering_open: bool
    selected_count: int
    restaurants: list[RestaurantSelectionResponse]
