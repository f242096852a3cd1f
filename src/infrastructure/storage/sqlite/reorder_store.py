"""SQLite implementation of reorder settings and alert storage."""

from datetime import datetime

import aiosqlite

from src.config import get_logger
from src.core.entities.reorder import AlertStatus, ReorderAlert, ReorderSettings
from src.core.exceptions import AlertClosedError, AlertNotFoundError, DatabaseError
from src.core.interfaces.reorder_store import IReorderAlertStore, IReorderSettingsStore
from src.infrastructure.storage.sqlite.connection import get_connection, get_transaction
from src.infrastructure.storage.sqlite.rows import new_id, parse_datetime, placeholders

logger = get_logger(__name__)

OPEN_STATUSES = tuple(s.value for s in AlertStatus.open_statuses())

# Item-wide row first, then per-warehouse rows in creation order
_SETTINGS_ORDER = "ORDER BY item_id, warehouse_id IS NOT NULL, created_at, rowid"


class SQLiteReorderSettingsStore(IReorderSettingsStore):
    """SQLite implementation of reorder settings storage."""

    async def list_for_item(
        self, organization_id: str, item_id: str, active_only: bool = False
    ) -> list[ReorderSettings]:
        query = "SELECT * FROM item_reorder_settings WHERE organization_id = ? AND item_id = ?"
        if active_only:
            query += " AND is_active = 1"
        async with get_connection() as conn:
            cursor = await conn.execute(
                f"{query} {_SETTINGS_ORDER}", (organization_id, item_id)
            )
            rows = await cursor.fetchall()
            return [self._row_to_settings(row) for row in rows]

    async def list_active(
        self, organization_id: str, item_ids: list[str] | None = None
    ) -> list[ReorderSettings]:
        if item_ids is not None and not item_ids:
            return []

        query = "SELECT * FROM item_reorder_settings WHERE organization_id = ? AND is_active = 1"
        params: list = [organization_id]
        if item_ids:
            query += f" AND item_id IN ({placeholders(item_ids)})"
            params.extend(item_ids)

        async with get_connection() as conn:
            cursor = await conn.execute(f"{query} {_SETTINGS_ORDER}", params)
            rows = await cursor.fetchall()
            return [self._row_to_settings(row) for row in rows]

    async def find(
        self, organization_id: str, item_id: str, warehouse_id: str | None
    ) -> ReorderSettings | None:
        async with get_connection() as conn:
            # IS matches NULL to NULL, so one query covers the item-wide row
            cursor = await conn.execute(
                """
                SELECT * FROM item_reorder_settings
                WHERE organization_id = ? AND item_id = ? AND warehouse_id IS ?
                """,
                (organization_id, item_id, warehouse_id),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_settings(row)

    async def create(self, settings: ReorderSettings) -> ReorderSettings:
        """Insert a settings row.

        If a concurrent writer created the same (item, warehouse) row first,
        this write is applied to that row instead.
        """
        settings.id = settings.id or new_id()
        try:
            async with get_transaction() as conn:
                await conn.execute(
                    """
                    INSERT INTO item_reorder_settings (
                        id, organization_id, item_id, warehouse_id,
                        reorder_level, reorder_quantity, safety_stock, lead_time_days,
                        preferred_vendor_id, auto_reorder, is_active,
                        created_at, updated_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        settings.id,
                        settings.organization_id,
                        settings.item_id,
                        settings.warehouse_id,
                        settings.reorder_level,
                        settings.reorder_quantity,
                        settings.safety_stock,
                        settings.lead_time_days,
                        settings.preferred_vendor_id,
                        int(settings.auto_reorder),
                        int(settings.is_active),
                        settings.created_at.isoformat(),
                        settings.updated_at.isoformat(),
                    ),
                )
        except aiosqlite.IntegrityError as e:
            existing = await self.find(
                settings.organization_id, settings.item_id, settings.warehouse_id
            )
            if existing is None:
                raise DatabaseError("create_reorder_settings", str(e)) from e
            logger.info(
                "reorder_settings_create_conflict",
                item_id=settings.item_id,
                warehouse_id=settings.warehouse_id,
            )
            settings.id = existing.id
            settings.created_at = existing.created_at
            return await self.update(settings)

        logger.info(
            "reorder_settings_row_created",
            settings_id=settings.id,
            item_id=settings.item_id,
            warehouse_id=settings.warehouse_id,
        )
        return settings

    async def update(self, settings: ReorderSettings) -> ReorderSettings:
        async with get_transaction() as conn:
            await conn.execute(
                """
                UPDATE item_reorder_settings SET
                    reorder_level = ?,
                    reorder_quantity = ?,
                    safety_stock = ?,
                    lead_time_days = ?,
                    preferred_vendor_id = ?,
                    auto_reorder = ?,
                    is_active = ?,
                    updated_at = ?
                WHERE id = ? AND organization_id = ?
                """,
                (
                    settings.reorder_level,
                    settings.reorder_quantity,
                    settings.safety_stock,
                    settings.lead_time_days,
                    settings.preferred_vendor_id,
                    int(settings.auto_reorder),
                    int(settings.is_active),
                    settings.updated_at.isoformat(),
                    settings.id,
                    settings.organization_id,
                ),
            )
            logger.info("reorder_settings_row_updated", settings_id=settings.id)
            return settings

    async def count_auto_reorder(self, organization_id: str) -> int:
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT COUNT(*) FROM item_reorder_settings
                WHERE organization_id = ? AND auto_reorder = 1 AND is_active = 1
                """,
                (organization_id,),
            )
            row = await cursor.fetchone()
            return row[0] if row else 0

    @staticmethod
    def _row_to_settings(row: aiosqlite.Row) -> ReorderSettings:
        """Convert a database row to a ReorderSettings entity."""
        now = datetime.utcnow()
        return ReorderSettings(
            id=row["id"],
            organization_id=row["organization_id"],
            item_id=row["item_id"],
            warehouse_id=row["warehouse_id"],
            reorder_level=float(row["reorder_level"]),
            reorder_quantity=float(row["reorder_quantity"]),
            safety_stock=float(row["safety_stock"]),
            lead_time_days=int(row["lead_time_days"]),
            preferred_vendor_id=row["preferred_vendor_id"],
            auto_reorder=bool(row["auto_reorder"]),
            is_active=bool(row["is_active"]),
            created_at=parse_datetime(row["created_at"], now),
            updated_at=parse_datetime(row["updated_at"], now),
        )


class SQLiteReorderAlertStore(IReorderAlertStore):
    """SQLite implementation of reorder alert storage."""

    async def get(self, organization_id: str, alert_id: str) -> ReorderAlert | None:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM reorder_alerts WHERE id = ? AND organization_id = ?",
                (alert_id, organization_id),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_alert(row)

    async def find_open(self, organization_id: str, item_id: str) -> ReorderAlert | None:
        async with get_connection() as conn:
            cursor = await conn.execute(
                f"""
                SELECT * FROM reorder_alerts
                WHERE organization_id = ? AND item_id = ?
                  AND status IN ({placeholders(list(OPEN_STATUSES))})
                LIMIT 1
                """,
                (organization_id, item_id, *OPEN_STATUSES),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_alert(row)

    async def create_if_absent(self, alert: ReorderAlert) -> ReorderAlert | None:
        alert.id = alert.id or new_id()
        try:
            async with get_transaction() as conn:
                await conn.execute(
                    """
                    INSERT INTO reorder_alerts (
                        id, organization_id, item_id, warehouse_id,
                        current_stock, reorder_level, suggested_qty, status,
                        notified_at, resolved_at, purchase_order_id,
                        created_at, updated_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        alert.id,
                        alert.organization_id,
                        alert.item_id,
                        alert.warehouse_id,
                        alert.current_stock,
                        alert.reorder_level,
                        alert.suggested_qty,
                        alert.status.value,
                        alert.notified_at.isoformat(),
                        alert.resolved_at.isoformat() if alert.resolved_at else None,
                        alert.purchase_order_id,
                        alert.created_at.isoformat(),
                        alert.updated_at.isoformat(),
                    ),
                )
        except aiosqlite.IntegrityError as e:
            # The partial unique index rejects a second open alert per item
            if "UNIQUE" not in str(e):
                raise DatabaseError("create_reorder_alert", str(e)) from e
            return None

        logger.info(
            "reorder_alert_created",
            alert_id=alert.id,
            item_id=alert.item_id,
            warehouse_id=alert.warehouse_id,
        )
        return alert

    async def update_status(self, alert: ReorderAlert) -> ReorderAlert:
        """Persist a transition out of an open state.

        Raises AlertClosedError if the row was closed since it was read.
        """
        async with get_transaction() as conn:
            cursor = await conn.execute(
                f"""
                UPDATE reorder_alerts SET
                    status = ?,
                    resolved_at = ?,
                    purchase_order_id = ?,
                    updated_at = ?
                WHERE id = ? AND organization_id = ?
                  AND status IN ({placeholders(list(OPEN_STATUSES))})
                """,
                (
                    alert.status.value,
                    alert.resolved_at.isoformat() if alert.resolved_at else None,
                    alert.purchase_order_id,
                    alert.updated_at.isoformat(),
                    alert.id,
                    alert.organization_id,
                    *OPEN_STATUSES,
                ),
            )
            if cursor.rowcount == 0:
                status_cursor = await conn.execute(
                    "SELECT status FROM reorder_alerts WHERE id = ? AND organization_id = ?",
                    (alert.id, alert.organization_id),
                )
                row = await status_cursor.fetchone()
                if row is None:
                    raise AlertNotFoundError(alert.id or "")
                raise AlertClosedError(alert.id or "", row["status"])

            logger.info(
                "reorder_alert_status_saved",
                alert_id=alert.id,
                status=alert.status.value,
            )
            return alert

    async def list_alerts(
        self,
        organization_id: str,
        status: AlertStatus | None = None,
        item_id: str | None = None,
        limit: int = 25,
        offset: int = 0,
    ) -> list[ReorderAlert]:
        where, params = self._filters(organization_id, status, item_id)
        async with get_connection() as conn:
            cursor = await conn.execute(
                f"""
                SELECT * FROM reorder_alerts
                WHERE {where}
                ORDER BY created_at DESC, rowid DESC
                LIMIT ? OFFSET ?
                """,
                (*params, limit, offset),
            )
            rows = await cursor.fetchall()
            return [self._row_to_alert(row) for row in rows]

    async def count_alerts(
        self,
        organization_id: str,
        status: AlertStatus | None = None,
        item_id: str | None = None,
    ) -> int:
        where, params = self._filters(organization_id, status, item_id)
        async with get_connection() as conn:
            cursor = await conn.execute(
                f"SELECT COUNT(*) FROM reorder_alerts WHERE {where}", params
            )
            row = await cursor.fetchone()
            return row[0] if row else 0

    @staticmethod
    def _filters(
        organization_id: str,
        status: AlertStatus | None,
        item_id: str | None,
    ) -> tuple[str, list]:
        clauses = ["organization_id = ?"]
        params: list = [organization_id]
        if status is not None:
            clauses.append("status = ?")
            params.append(status.value)
        if item_id is not None:
            clauses.append("item_id = ?")
            params.append(item_id)
        return " AND ".join(clauses), params

    @staticmethod
    def _row_to_alert(row: aiosqlite.Row) -> ReorderAlert:
        """Convert a database row to a ReorderAlert entity."""
        now = datetime.utcnow()
        return ReorderAlert(
            id=row["id"],
            organization_id=row["organization_id"],
            item_id=row["item_id"],
            warehouse_id=row["warehouse_id"] or "",
            current_stock=float(row["current_stock"]),
            reorder_level=float(row["reorder_level"]),
            suggested_qty=float(row["suggested_qty"]),
            status=AlertStatus(row["status"]),
            notified_at=parse_datetime(row["notified_at"], now),
            resolved_at=parse_datetime(row["resolved_at"]),
            purchase_order_id=row["purchase_order_id"],
            created_at=parse_datetime(row["created_at"], now),
            updated_at=parse_datetime(row["updated_at"], now),
        )
