"""Order endpoints: checkout, listing, pickup status and QR scan lookup."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from preorder.db.session import get_db
from preorder.models.order import Order
from preorder.schemas.order import OrderCreate, OrderResponse, PickupUpdate, ScanRequest
from preorder.services.order_service import (
    CustomerInfo,
    OrderLine,
    create_order,
    find_by_id,
    find_by_scan,
    list_orders,
    set_picked_up,
)

router: APIRouter = APIRouter()


@router.get("", response_model=list[OrderResponse])
def get_orders(
    date_value: str | None = Query(default=None, alias="date"),
    db: Session = Depends(get_db),
) -> list[Order]:
    """Return orders newest first, optionally for one pickup date."""
    return list_orders(db, date_value)


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
def post_order(payload: OrderCreate, db: Session = Depends(get_db)) -> Order:
    """Create a pickup order from the checkout snapshot."""
    return create_order(
        db,
        customer=CustomerInfo(
            name=payload.customer_name,
            phone=payload.customer_phone,
            office=payload.customer_office,
        ),
        lines=[
            OrderLine(menu_item_id=item.menu_item_id, quantity=item.quantity, name=item.name, price=item.price)
            for item in payload.items
        ],
        order_date=payload.order_date,
        total_price=payload.total_price,
    )


@router.post("/scan", response_model=OrderResponse)
def scan_order(payload: ScanRequest, db: Session = Depends(get_db)) -> Order:
    """Resolve a scanned pickup QR code to its order."""
    return find_by_scan(db, payload.code)


@router.get("/{order_id}", response_model=OrderResponse)
def get_order(order_id: str, db: Session = Depends(get_db)) -> Order:
    return find_by_id(db, order_id)


@router.put("/{order_id}", response_model=OrderResponse)
def put_order_pickup(order_id: str, payload: PickupUpdate, db: Session = Depends(get_db)) -> Order:
    """Overwrite the picked-up flag of an order."""
    return set_picked_up(db, order_id, payload.picked_up)
