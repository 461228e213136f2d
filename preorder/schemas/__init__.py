"""Schema exports."""

from preorder.schemas.catalog import MenuItemCreate, MenuItemResponse, RestaurantCreate, RestaurantResponse
from preorder.schemas.menu import (
    DailyMenuResponse,
    DailyMenuSaveRequest,
    WeekendOverrideRequest,
    WeeklyMenuSaveRequest,
)
from preorder.schemas.order import OrderCreate, OrderItemPayload, OrderResponse, PickupUpdate, ScanRequest

__all__ = [
    "RestaurantCreate",
    "RestaurantResponse",
    "MenuItemCreate",
    "MenuItemResponse",
    "DailyMenuResponse",
    "DailyMenuSaveRequest",
    "WeeklyMenuSaveRequest",
    "WeekendOverrideRequest",
    "OrderCreate",
    "OrderItemPayload",
    "OrderResponse",
    "PickupUpdate",
    "ScanRequest",
]
