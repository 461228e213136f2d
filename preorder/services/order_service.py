"""Order lifecycle: creation with total validation, pickup toggling and lookup."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal
from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from preorder.core.errors import NotFound, StorageError, ValidationError
from preorder.models.order import Order, OrderItem
from preorder.utils.time import DateLike, format_calendar_date

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


@dataclass(frozen=True)
class CustomerInfo:
    name: str
    phone: str = ""
    office: str = ""


@dataclass(frozen=True)
class OrderLine:
    """Line snapshot supplied at checkout."""

    menu_item_id: str
    quantity: int
    name: str
    price: Decimal


def compute_total(lines: Sequence[OrderLine]) -> Decimal:
    return sum((Decimal(line.price) * line.quantity for line in lines), Decimal("0")).quantize(CENT)


def _validate_lines(lines: Sequence[OrderLine]) -> None:
    if not lines:
        raise ValidationError("An order needs at least one line")
    for position, line in enumerate(lines):
        if line.quantity < 1:
            raise ValidationError("Quantity must be >= 1", {"line": position, "menu_item_id": line.menu_item_id})
        if Decimal(line.price) < 0:
            raise ValidationError("Price must not be negative", {"line": position, "menu_item_id": line.menu_item_id})


def create_order(
    db: Session,
    *,
    customer: CustomerInfo,
    lines: Sequence[OrderLine],
    order_date: DateLike,
    total_price: Decimal | None = None,
) -> Order:
    """Validate and persist a new pickup order.

    The total is recomputed from the line snapshots; a supplied total that does
    not match is rejected instead of being stored.
    """
    pickup_date: str = format_calendar_date(order_date)
    if not customer.name.strip():
        raise ValidationError("Customer name is required")
    _validate_lines(lines)
    total: Decimal = compute_total(lines)
    if total_price is not None and Decimal(total_price).quantize(CENT) != total:
        raise ValidationError(
            "Order total does not match its lines",
            {"expected": str(total), "supplied": str(total_price)},
        )

    order = Order(
        id=uuid4().hex,
        customer_name=customer.name.strip(),
        customer_phone=customer.phone.strip(),
        customer_office=customer.office.strip(),
        total_price=total,
        order_date=pickup_date,
        picked_up=False,
    )
    for position, line in enumerate(lines):
        order.items.append(
            OrderItem(
                position=position,
                menu_item_id=str(line.menu_item_id),
                name=line.name,
                price=Decimal(line.price),
                quantity=line.quantity,
            )
        )
    try:
        db.add(order)
        db.commit()
        db.refresh(order)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Creating order failed")
        raise StorageError("Creating order failed") from exc
    logger.info("Created order %s for %s total %s", order.id, pickup_date, total)
    return order


def find_by_id(db: Session, order_id: str) -> Order:
    order: Order | None = db.get(Order, order_id)
    if order is None:
        raise NotFound(f"Order {order_id} not found", {"order_id": order_id})
    return order


def find_by_scan(db: Session, code: str) -> Order:
    """Resolve a scanned QR payload (the order id) to its order."""
    order_id: str = (code or "").strip()
    if not order_id:
        raise NotFound("Scanned code is empty")
    return find_by_id(db, order_id)


def set_picked_up(db: Session, order_id: str, picked_up: bool) -> Order:
    """Overwrite the pickup flag, leaving every other field untouched."""
    order: Order = find_by_id(db, order_id)
    order.picked_up = picked_up
    try:
        db.commit()
        db.refresh(order)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Updating pickup status for %s failed", order_id)
        raise StorageError(f"Updating order {order_id} failed") from exc
    logger.info("Order %s picked_up=%s", order_id, picked_up)
    return order


def list_orders(db: Session, order_date: DateLike | None = None) -> list[Order]:
    """Return orders newest first, optionally for one pickup date."""
    query = select(Order).options(selectinload(Order.items)).order_by(Order.created_at.desc())
    if order_date is not None:
        query = query.where(Order.order_date == format_calendar_date(order_date))
    return list(db.scalars(query).all())
