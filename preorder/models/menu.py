"""Daily menu selection and weekend override ORM models."""

from datetime import datetime, timezone

from sqlalchemy import JSON, Boolean, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from preorder.db.base import Base


class DailyMenu(Base):
    """Selected menu item ids for one calendar date.

    Rows are upserted on save and never deleted; a missing row reads as an
    empty selection.
    """

    __tablename__ = "daily_menus"

    menu_date: Mapped[str] = mapped_column(String(10), primary_key=True)
    menu_item_ids: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    weekend_reason: Mapped[str | None] = mapped_column(Text, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )


class WeekendOverrideRow(Base):
    """Persisted administrative opening of a weekend date."""

    __tablename__ = "weekend_overrides"

    override_date: Mapped[str] = mapped_column(String(10), primary_key=True)
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    reason: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
