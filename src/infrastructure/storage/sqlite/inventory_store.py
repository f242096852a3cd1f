"""SQLite implementation of inventory storage."""

from datetime import datetime

import aiosqlite

from src.config import get_logger
from src.core.entities.item import Item, ItemStatus, StockLevel, Warehouse
from src.core.interfaces.inventory_store import IInventoryStore
from src.infrastructure.storage.sqlite.connection import get_connection
from src.infrastructure.storage.sqlite.rows import parse_datetime, placeholders

logger = get_logger(__name__)


class SQLiteInventoryStore(IInventoryStore):
    """SQLite implementation of item, warehouse and stock level reads."""

    async def get_item(self, organization_id: str, item_id: str) -> Item | None:
        """Get item by ID within the organization."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM items WHERE id = ? AND organization_id = ?",
                (item_id, organization_id),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_item(row)

    async def list_tracked_items(
        self, organization_id: str, item_ids: list[str] | None = None
    ) -> list[Item]:
        """List active, stock-tracked items ordered by SKU."""
        if item_ids is not None and not item_ids:
            return []

        query = """
            SELECT * FROM items
            WHERE organization_id = ?
              AND track_inventory = 1
              AND status = 'ACTIVE'
        """
        params: list = [organization_id]
        if item_ids:
            query += f" AND id IN ({placeholders(item_ids)})"
            params.extend(item_ids)
        query += " ORDER BY sku"

        async with get_connection() as conn:
            cursor = await conn.execute(query, params)
            rows = await cursor.fetchall()
            return [self._row_to_item(row) for row in rows]

    async def list_stock_levels(
        self, organization_id: str, item_ids: list[str] | None = None
    ) -> list[StockLevel]:
        """List stock levels with warehouse details, ordered by item then insertion."""
        if item_ids is not None and not item_ids:
            return []

        query = """
            SELECT sl.item_id, sl.warehouse_id, sl.stock_on_hand, sl.committed_stock,
                   w.name AS warehouse_name, w.code AS warehouse_code
            FROM stock_levels sl
            JOIN items i ON i.id = sl.item_id
            LEFT JOIN warehouses w ON w.id = sl.warehouse_id
            WHERE i.organization_id = ?
        """
        params: list = [organization_id]
        if item_ids:
            query += f" AND sl.item_id IN ({placeholders(item_ids)})"
            params.extend(item_ids)
        query += " ORDER BY sl.item_id, sl.id"

        async with get_connection() as conn:
            cursor = await conn.execute(query, params)
            rows = await cursor.fetchall()
            return [self._row_to_stock_level(row) for row in rows]

    async def get_warehouse(
        self, organization_id: str, warehouse_id: str
    ) -> Warehouse | None:
        """Get warehouse by ID within the organization."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM warehouses WHERE id = ? AND organization_id = ?",
                (warehouse_id, organization_id),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return Warehouse(
                id=row["id"],
                organization_id=row["organization_id"],
                name=row["name"],
                code=row["code"],
            )

    @staticmethod
    def _row_to_item(row: aiosqlite.Row) -> Item:
        """Convert a database row to an Item entity."""
        return Item(
            id=row["id"],
            organization_id=row["organization_id"],
            sku=row["sku"],
            name=row["name"],
            unit=row["unit"] or "pcs",
            cost_price=float(row["cost_price"] or 0),
            reorder_level=float(row["reorder_level"] or 0),
            reorder_qty=float(row["reorder_qty"] or 0),
            track_inventory=bool(row["track_inventory"]),
            status=ItemStatus(row["status"]),
            created_at=parse_datetime(row["created_at"], datetime.utcnow()),
        )

    @staticmethod
    def _row_to_stock_level(row: aiosqlite.Row) -> StockLevel:
        """Convert a joined stock row to a StockLevel entity."""
        return StockLevel(
            item_id=row["item_id"],
            warehouse_id=row["warehouse_id"],
            stock_on_hand=float(row["stock_on_hand"] or 0),
            committed_stock=float(row["committed_stock"] or 0),
            warehouse_name=row["warehouse_name"],
            warehouse_code=row["warehouse_code"],
        )
