"""SQLite implementation of purchase order storage."""

from datetime import date, datetime

import aiosqlite

from src.config import get_logger, get_settings
from src.core.entities.purchase_order import (
    PurchaseOrder,
    PurchaseOrderItem,
    PurchaseOrderStatus,
)
from src.core.entities.reorder import AlertStatus
from src.core.exceptions import AlertClosedError, AlertNotFoundError
from src.core.interfaces.purchase_order_store import IPurchaseOrderStore
from src.infrastructure.storage.sqlite.connection import get_connection, get_transaction
from src.infrastructure.storage.sqlite.rows import (
    new_id,
    parse_date,
    parse_datetime,
    placeholders,
)

logger = get_logger(__name__)

PO_SEQUENCE = "purchase_order"
OPEN_STATUSES = tuple(s.value for s in AlertStatus.open_statuses())


def parse_order_sequence(order_number: str | None) -> int:
    """Numeric suffix of ``PO-000042`` style numbers, 0 if there is none."""
    if not order_number:
        return 0
    suffix = order_number.rsplit("-", 1)[-1]
    return int(suffix) if suffix.isdigit() else 0


class SQLitePurchaseOrderStore(IPurchaseOrderStore):
    """SQLite implementation of purchase order storage."""

    def __init__(self, prefix: str | None = None, width: int | None = None):
        config = get_settings().reorder
        self.prefix = prefix or config.po_prefix
        self.width = width or config.po_number_width

    def format_order_number(self, value: int) -> str:
        return f"{self.prefix}-{value:0{self.width}d}"

    async def get_order(
        self, organization_id: str, order_id: str
    ) -> PurchaseOrder | None:
        """Get purchase order with its lines."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM purchase_orders WHERE id = ? AND organization_id = ?",
                (order_id, organization_id),
            )
            row = await cursor.fetchone()
            if row is None:
                return None

            items_cursor = await conn.execute(
                """
                SELECT * FROM purchase_order_items
                WHERE purchase_order_id = ?
                ORDER BY rowid
                """,
                (order_id,),
            )
            item_rows = await items_cursor.fetchall()
            items = [self._row_to_order_item(r) for r in item_rows]

            return self._row_to_order(row, items)

    async def _next_order_number(self, conn: aiosqlite.Connection, organization_id: str) -> str:
        """Bump the organization's counter. Must run inside the write transaction."""
        cursor = await conn.execute(
            """
            SELECT last_value FROM order_sequences
            WHERE organization_id = ? AND sequence_name = ?
            """,
            (organization_id, PO_SEQUENCE),
        )
        row = await cursor.fetchone()

        if row is None:
            # Seed from the newest existing order so numbering continues
            cursor = await conn.execute(
                """
                SELECT order_number FROM purchase_orders
                WHERE organization_id = ?
                ORDER BY created_at DESC, rowid DESC
                LIMIT 1
                """,
                (organization_id,),
            )
            latest = await cursor.fetchone()
            last_value = parse_order_sequence(latest["order_number"] if latest else None)
            next_value = last_value + 1
            await conn.execute(
                """
                INSERT INTO order_sequences (organization_id, sequence_name, last_value)
                VALUES (?, ?, ?)
                """,
                (organization_id, PO_SEQUENCE, next_value),
            )
        else:
            next_value = row["last_value"] + 1
            await conn.execute(
                """
                UPDATE order_sequences SET last_value = ?
                WHERE organization_id = ? AND sequence_name = ?
                """,
                (next_value, organization_id, PO_SEQUENCE),
            )

        return self.format_order_number(next_value)

    async def _insert_order(self, conn: aiosqlite.Connection, order: PurchaseOrder) -> None:
        await conn.execute(
            """
            INSERT INTO purchase_orders (
                id, organization_id, order_number, vendor_id, warehouse_id,
                order_date, status, subtotal, total, notes,
                created_by_id, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                order.id,
                order.organization_id,
                order.order_number,
                order.vendor_id,
                order.warehouse_id,
                order.order_date.isoformat(),
                order.status.value,
                order.subtotal,
                order.total,
                order.notes,
                order.created_by_id,
                order.created_at.isoformat(),
            ),
        )

        for line in order.items:
            line.id = line.id or new_id()
            line.purchase_order_id = order.id
            await conn.execute(
                """
                INSERT INTO purchase_order_items (
                    id, purchase_order_id, item_id, description,
                    quantity, unit, unit_price, total
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    line.id,
                    line.purchase_order_id,
                    line.item_id,
                    line.description,
                    line.quantity,
                    line.unit,
                    line.unit_price,
                    line.total,
                ),
            )

    async def create_for_alert(
        self, order: PurchaseOrder, alert_id: str
    ) -> PurchaseOrder:
        """Allocate a number, insert the order and link the alert in one transaction."""
        order.id = order.id or new_id()
        order.created_at = datetime.utcnow()

        async with get_transaction(immediate=True) as conn:
            cursor = await conn.execute(
                "SELECT status FROM reorder_alerts WHERE id = ? AND organization_id = ?",
                (alert_id, order.organization_id),
            )
            alert_row = await cursor.fetchone()
            if alert_row is None:
                raise AlertNotFoundError(alert_id)
            if alert_row["status"] not in OPEN_STATUSES:
                raise AlertClosedError(alert_id, alert_row["status"])

            order.order_number = await self._next_order_number(conn, order.organization_id)
            await self._insert_order(conn, order)

            cursor = await conn.execute(
                f"""
                UPDATE reorder_alerts SET
                    status = ?,
                    purchase_order_id = ?,
                    updated_at = ?
                WHERE id = ? AND organization_id = ?
                  AND status IN ({placeholders(list(OPEN_STATUSES))})
                """,
                (
                    AlertStatus.PO_CREATED.value,
                    order.id,
                    datetime.utcnow().isoformat(),
                    alert_id,
                    order.organization_id,
                    *OPEN_STATUSES,
                ),
            )
            if cursor.rowcount == 0:
                raise AlertClosedError(alert_id, alert_row["status"])

        logger.info(
            "purchase_order_created",
            purchase_order_id=order.id,
            order_number=order.order_number,
            alert_id=alert_id,
            items=len(order.items),
            total=order.total,
        )
        return order

    @staticmethod
    def _row_to_order(row: aiosqlite.Row, items: list[PurchaseOrderItem]) -> PurchaseOrder:
        """Convert a database row to a PurchaseOrder entity."""
        order = PurchaseOrder(
            id=row["id"],
            organization_id=row["organization_id"],
            order_number=row["order_number"],
            vendor_id=row["vendor_id"],
            warehouse_id=row["warehouse_id"],
            order_date=parse_date(row["order_date"], date.today()),
            status=PurchaseOrderStatus(row["status"]),
            subtotal=float(row["subtotal"]),
            total=float(row["total"]),
            notes=row["notes"],
            created_by_id=row["created_by_id"],
            items=items,
            created_at=parse_datetime(row["created_at"], datetime.utcnow()),
        )
        return order

    @staticmethod
    def _row_to_order_item(row: aiosqlite.Row) -> PurchaseOrderItem:
        return PurchaseOrderItem(
            id=row["id"],
            purchase_order_id=row["purchase_order_id"],
            item_id=row["item_id"],
            description=row["description"],
            quantity=float(row["quantity"]),
            unit=row["unit"],
            unit_price=float(row["unit_price"]),
        )
