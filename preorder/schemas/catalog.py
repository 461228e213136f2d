"""Restaurant and menu item API schemas."""

from decimal import Decimal

from pydantic import BaseModel, Field


class RestaurantCreate(BaseModel):
    """Payload for creating a restaurant."""

    name: str = Field(min_length=1)
    description: str = ""
    address: str = ""
    phone: str = ""
    contact_name: str = ""
    google_maps_url: str = ""


class RestaurantResponse(BaseModel):
    id: str
    name: str
    description: str
    address: str
    phone: str
    contact_name: str
    google_maps_url: str


class MenuItemCreate(BaseModel):
    """Payload for creating a menu item."""

    restaurant_id: str
    name: str = Field(min_length=1)
    description: str = ""
    price: Decimal = Field(ge=0)
    image_url: str | None = None


class MenuItemResponse(BaseModel):
    id: str
    restaurant_id: str
    name: str
    description: str
    price: Decimal
    image_url: str | None
