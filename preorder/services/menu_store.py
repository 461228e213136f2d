"""Menu availability store: per-date selections and weekend overrides.

The store is a plain key-value contract keyed by calendar date. Writes are
full-overwrite upserts with last-write-wins semantics; there is no locking,
versioning or conflict detection, and no delete.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from preorder.core.errors import StorageError
from preorder.models.menu import DailyMenu, WeekendOverrideRow
from preorder.services.holiday_service import WeekendOverride
from preorder.utils.time import DateLike, format_calendar_date

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DailyMenuRecord:
    date: str
    menu_item_ids: frozenset[str]
    updated_at: datetime | None = None
    weekend_reason: str | None = None


class MenuAvailabilityStore(Protocol):
    def get(self, menu_date: DateLike) -> DailyMenuRecord | None: ...

    def set(
        self,
        menu_date: DateLike,
        menu_item_ids: Iterable[str],
        weekend_reason: str | None = None,
    ) -> DailyMenuRecord: ...

    def set_with_override(
        self,
        menu_date: DateLike,
        menu_item_ids: Iterable[str],
        override: WeekendOverride | None,
    ) -> DailyMenuRecord: ...

    def get_range(self, start: DateLike, end: DateLike) -> list[DailyMenuRecord]: ...

    def get_all_before(self, menu_date: DateLike) -> list[DailyMenuRecord]: ...

    def get_overrides(self, start: DateLike, end: DateLike) -> dict[str, WeekendOverride]: ...

    def put_override(self, override_date: DateLike, override: WeekendOverride) -> None: ...

    def remove_override(self, override_date: DateLike) -> None: ...


def _to_record(row: DailyMenu) -> DailyMenuRecord:
    return DailyMenuRecord(
        date=row.menu_date,
        menu_item_ids=frozenset(str(item_id) for item_id in row.menu_item_ids or []),
        updated_at=row.updated_at,
        weekend_reason=row.weekend_reason,
    )


class SqlMenuStore:
    """SQLAlchemy-backed store; every write is committed on its own."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def _fail(self, action: str) -> StorageError:
        self.db.rollback()
        logger.exception("Menu store %s failed", action)
        return StorageError(f"Menu store {action} failed", {"action": action})

    def get(self, menu_date: DateLike) -> DailyMenuRecord | None:
        key: str = format_calendar_date(menu_date)
        try:
            row: DailyMenu | None = self.db.get(DailyMenu, key)
        except SQLAlchemyError as exc:
            raise self._fail("get") from exc
        return _to_record(row) if row is not None else None

    def _stage_menu(self, key: str, ids: list[str], weekend_reason: str | None) -> DailyMenu:
        row: DailyMenu | None = self.db.get(DailyMenu, key)
        if row is None:
            row = DailyMenu(menu_date=key)
            self.db.add(row)
        row.menu_item_ids = ids
        row.weekend_reason = weekend_reason
        row.updated_at = datetime.now(timezone.utc)
        return row

    def _stage_override(self, key: str, override: WeekendOverride | None) -> str | None:
        """Stage the override row change; return the reason the daily menu should carry."""
        row: WeekendOverrideRow | None = self.db.get(WeekendOverrideRow, key)
        if override is None:
            if row is not None:
                self.db.delete(row)
            return None
        if row is None:
            row = WeekendOverrideRow(override_date=key, reason=override.reason)
            self.db.add(row)
        row.enabled = override.enabled
        row.reason = override.reason
        row.updated_at = datetime.now(timezone.utc)
        return override.reason if override.enabled else None

    def set(
        self,
        menu_date: DateLike,
        menu_item_ids: Iterable[str],
        weekend_reason: str | None = None,
    ) -> DailyMenuRecord:
        """Upsert the full selection for a date and stamp updated_at."""
        key: str = format_calendar_date(menu_date)
        ids: list[str] = sorted({str(item_id) for item_id in menu_item_ids})
        try:
            row: DailyMenu = self._stage_menu(key, ids, weekend_reason)
            self.db.commit()
            self.db.refresh(row)
        except SQLAlchemyError as exc:
            raise self._fail("set") from exc
        logger.info("Saved daily menu %s with %d items", key, len(ids))
        return _to_record(row)

    def set_with_override(
        self,
        menu_date: DateLike,
        menu_item_ids: Iterable[str],
        override: WeekendOverride | None,
    ) -> DailyMenuRecord:
        """Upsert a weekend date's selection and its override in one commit.

        ``None`` removes any stored override. The daily menu's weekend_reason
        follows the override, so both rows land or neither does.
        """
        key: str = format_calendar_date(menu_date)
        ids: list[str] = sorted({str(item_id) for item_id in menu_item_ids})
        try:
            weekend_reason: str | None = self._stage_override(key, override)
            row: DailyMenu = self._stage_menu(key, ids, weekend_reason)
            self.db.commit()
            self.db.refresh(row)
        except SQLAlchemyError as exc:
            raise self._fail("set_with_override") from exc
        logger.info("Saved daily menu %s with %d items (weekend reason: %s)", key, len(ids), weekend_reason)
        return _to_record(row)

    def get_range(self, start: DateLike, end: DateLike) -> list[DailyMenuRecord]:
        start_key: str = format_calendar_date(start)
        end_key: str = format_calendar_date(end)
        try:
            rows = self.db.scalars(
                select(DailyMenu).where(DailyMenu.menu_date >= start_key, DailyMenu.menu_date <= end_key)
            ).all()
        except SQLAlchemyError as exc:
            raise self._fail("get_range") from exc
        return [_to_record(row) for row in rows]

    def get_all_before(self, menu_date: DateLike) -> list[DailyMenuRecord]:
        """Return non-empty menus strictly before the date, newest first."""
        key: str = format_calendar_date(menu_date)
        try:
            rows = self.db.scalars(
                select(DailyMenu).where(DailyMenu.menu_date < key).order_by(DailyMenu.menu_date.desc())
            ).all()
        except SQLAlchemyError as exc:
            raise self._fail("get_all_before") from exc
        return [_to_record(row) for row in rows if row.menu_item_ids]

    def get_overrides(self, start: DateLike, end: DateLike) -> dict[str, WeekendOverride]:
        start_key: str = format_calendar_date(start)
        end_key: str = format_calendar_date(end)
        try:
            rows = self.db.scalars(
                select(WeekendOverrideRow).where(
                    WeekendOverrideRow.override_date >= start_key,
                    WeekendOverrideRow.override_date <= end_key,
                )
            ).all()
        except SQLAlchemyError as exc:
            raise self._fail("get_overrides") from exc
        return {row.override_date: WeekendOverride(enabled=row.enabled, reason=row.reason) for row in rows}

    def _write_override(self, key: str, override: WeekendOverride | None, action: str) -> None:
        # An existing daily menu keeps its weekend_reason in step with the override.
        try:
            weekend_reason: str | None = self._stage_override(key, override)
            menu: DailyMenu | None = self.db.get(DailyMenu, key)
            if menu is not None:
                menu.weekend_reason = weekend_reason
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._fail(action) from exc

    def put_override(self, override_date: DateLike, override: WeekendOverride) -> None:
        key: str = format_calendar_date(override_date)
        self._write_override(key, override, "put_override")
        logger.info("Saved weekend override for %s", key)

    def remove_override(self, override_date: DateLike) -> None:
        key: str = format_calendar_date(override_date)
        self._write_override(key, None, "remove_override")
        logger.info("Removed weekend override for %s", key)


def dates_to_keys(dates: Iterable[date | str]) -> list[str]:
    return [format_calendar_date(value) for value in dates]
