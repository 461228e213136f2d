"""Shared dependencies and serializers for v1 endpoints."""

from fastapi import Depends
from sqlalchemy.orm import Session

from preorder.db.session import get_db
from preorder.services.catalog_service import CatalogItem, RestaurantView
from preorder.services.menu_store import DailyMenuRecord, SqlMenuStore
from preorder.schemas.catalog import MenuItemResponse, RestaurantResponse
from preorder.schemas.menu import DailyMenuResponse


def get_menu_store(db: Session = Depends(get_db)) -> SqlMenuStore:
    """Bind the menu availability store to the request session."""
    return SqlMenuStore(db)


def serialize_restaurant(restaurant: RestaurantView) -> RestaurantResponse:
    return RestaurantResponse(
        id=restaurant.id,
        name=restaurant.name,
        description=restaurant.description,
        address=restaurant.address,
        phone=restaurant.phone,
        contact_name=restaurant.contact_name,
        google_maps_url=restaurant.google_maps_url,
    )


def serialize_menu_item(item: CatalogItem) -> MenuItemResponse:
    return MenuItemResponse(
        id=item.id,
        restaurant_id=item.restaurant_id,
        name=item.name,
        description=item.description,
        price=item.price,
        image_url=item.image_url,
    )


def serialize_daily_menu(menu_date: str, record: DailyMenuRecord | None) -> DailyMenuResponse:
    if record is None:
        return DailyMenuResponse(date=menu_date, menu_item_ids=[])
    return DailyMenuResponse(
        date=record.date,
        menu_item_ids=sorted(record.menu_item_ids),
        updated_at=record.updated_at,
        weekend_reason=record.weekend_reason,
    )
