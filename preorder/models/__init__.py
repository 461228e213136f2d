"""Application models package."""

from preorder.models.menu import DailyMenu, WeekendOverrideRow
from preorder.models.order import Order, OrderItem
from preorder.models.restaurant import MenuItem, Restaurant

__all__ = ["Restaurant", "MenuItem", "DailyMenu", "WeekendOverrideRow", "Order", "OrderItem"]
