"""Restaurant and menu item catalog helpers shared by API routes and the scheduler."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session

from preorder.core.errors import NotFound, ValidationError
from preorder.models.restaurant import MenuItem, Restaurant


@dataclass(frozen=True)
class RestaurantView:
    id: str
    name: str
    description: str = ""
    address: str = ""
    phone: str = ""
    contact_name: str = ""
    google_maps_url: str = ""


@dataclass(frozen=True)
class CatalogItem:
    """Read-only menu item as seen by the scheduler; ids are strings."""

    id: str
    restaurant_id: str
    name: str
    description: str
    price: Decimal
    image_url: str | None = None


def _restaurant_view(row: Restaurant) -> RestaurantView:
    return RestaurantView(
        id=str(row.id),
        name=row.name,
        description=row.description,
        address=row.address,
        phone=row.phone,
        contact_name=row.contact_name,
        google_maps_url=row.google_maps_url,
    )


def _catalog_item(row: MenuItem) -> CatalogItem:
    return CatalogItem(
        id=str(row.id),
        restaurant_id=str(row.restaurant_id),
        name=row.name,
        description=row.description,
        price=Decimal(row.price),
        image_url=row.image_url,
    )


def _parse_restaurant_id(restaurant_id: str | int) -> int:
    try:
        return int(restaurant_id)
    except (TypeError, ValueError) as exc:
        raise NotFound(f"Restaurant {restaurant_id} not found") from exc


def list_restaurants(db: Session) -> list[RestaurantView]:
    """Return restaurants in creation order."""
    rows = db.scalars(select(Restaurant).order_by(Restaurant.id.asc())).all()
    return [_restaurant_view(row) for row in rows]


def get_restaurant(db: Session, restaurant_id: str | int) -> RestaurantView:
    row: Restaurant | None = db.get(Restaurant, _parse_restaurant_id(restaurant_id))
    if row is None:
        raise NotFound(f"Restaurant {restaurant_id} not found")
    return _restaurant_view(row)


def list_menu_items(db: Session, restaurant_id: str | int) -> list[CatalogItem]:
    """Return every menu item of one restaurant."""
    parsed_id: int = _parse_restaurant_id(restaurant_id)
    rows = db.scalars(select(MenuItem).where(MenuItem.restaurant_id == parsed_id).order_by(MenuItem.id.asc())).all()
    return [_catalog_item(row) for row in rows]


def list_catalog(db: Session) -> list[CatalogItem]:
    """Return the full catalog, grouped by restaurant in creation order."""
    rows = db.scalars(select(MenuItem).order_by(MenuItem.restaurant_id.asc(), MenuItem.id.asc())).all()
    return [_catalog_item(row) for row in rows]


def create_restaurant(
    db: Session,
    *,
    name: str,
    description: str = "",
    address: str = "",
    phone: str = "",
    contact_name: str = "",
    google_maps_url: str = "",
) -> RestaurantView:
    if not name.strip():
        raise ValidationError("Restaurant name is required")
    row = Restaurant(
        name=name.strip(),
        description=description,
        address=address,
        phone=phone,
        contact_name=contact_name,
        google_maps_url=google_maps_url,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return _restaurant_view(row)


def create_menu_item(
    db: Session,
    *,
    restaurant_id: str | int,
    name: str,
    price: Decimal,
    description: str = "",
    image_url: str | None = None,
) -> CatalogItem:
    """Create and persist a menu item for an existing restaurant."""
    get_restaurant(db, restaurant_id)
    if not name.strip():
        raise ValidationError("Menu item name is required")
    if Decimal(price) < 0:
        raise ValidationError("Menu item price must not be negative")
    row = MenuItem(
        restaurant_id=_parse_restaurant_id(restaurant_id),
        name=name.strip(),
        description=description,
        price=Decimal(price),
        image_url=image_url,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return _catalog_item(row)
