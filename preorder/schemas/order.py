"""Order API schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class OrderItemPayload(BaseModel):
    """Line snapshot captured at checkout."""

    menu_item_id: str
    quantity: int = 1
    name: str
    price: Decimal = Field(ge=0)


class OrderCreate(BaseModel):
    """Create a pickup order; a supplied total must match the lines."""

    customer_name: str = Field(min_length=1)
    customer_phone: str = ""
    customer_office: str = ""
    items: list[OrderItemPayload]
    total_price: Decimal | None = None
    order_date: str


class PickupUpdate(BaseModel):
    picked_up: bool


class ScanRequest(BaseModel):
    code: str


class OrderItemResponse(BaseModel):
    menu_item_id: str
    quantity: int
    name: str
    price: Decimal

    model_config = ConfigDict(from_attributes=True)


class OrderResponse(BaseModel):
    """Serialized order."""

    id: str
    customer_name: str
    customer_phone: str
    customer_office: str
    items: list[OrderItemResponse]
    total_price: Decimal
    order_date: str
    created_at: datetime
    picked_up: bool

    model_config = ConfigDict(from_attributes=True)
