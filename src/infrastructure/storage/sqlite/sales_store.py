"""SQLite implementation of sales history reads."""

from datetime import date

from src.config import get_logger
from src.core.entities.forecast import SalesLine
from src.core.interfaces.sales_store import ISalesHistoryStore
from src.infrastructure.storage.sqlite.connection import get_connection
from src.infrastructure.storage.sqlite.rows import parse_date

logger = get_logger(__name__)

# Invoices in these states never count as demand
EXCLUDED_INVOICE_STATUSES = ("VOID", "DRAFT")


class SQLiteSalesHistoryStore(ISalesHistoryStore):
    """Reads posted sales invoice lines for demand calculations."""

    async def list_sales_lines(
        self, organization_id: str, item_id: str, since: date
    ) -> list[SalesLine]:
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT sii.item_id, si.invoice_date, sii.quantity
                FROM sales_invoice_items sii
                JOIN sales_invoices si ON si.id = sii.invoice_id
                WHERE si.organization_id = ?
                  AND sii.item_id = ?
                  AND si.invoice_date >= ?
                  AND si.status NOT IN (?, ?)
                ORDER BY si.invoice_date, sii.id
                """,
                (organization_id, item_id, since.isoformat(), *EXCLUDED_INVOICE_STATUSES),
            )
            rows = await cursor.fetchall()

        lines = []
        for row in rows:
            sale_date = parse_date(row["invoice_date"])
            if sale_date is None:
                logger.warning(
                    "sales_line_bad_date",
                    item_id=item_id,
                    invoice_date=row["invoice_date"],
                )
                continue
            lines.append(
                SalesLine(
                    item_id=row["item_id"],
                    sale_date=sale_date,
                    quantity=float(row["quantity"]),
                )
            )
        return lines

    async def total_quantity_sold(
        self, organization_id: str, item_id: str, since: date
    ) -> float:
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT COALESCE(SUM(sii.quantity), 0) AS total
                FROM sales_invoice_items sii
                JOIN sales_invoices si ON si.id = sii.invoice_id
                WHERE si.organization_id = ?
                  AND sii.item_id = ?
                  AND si.invoice_date >= ?
                  AND si.status NOT IN (?, ?)
                """,
                (organization_id, item_id, since.isoformat(), *EXCLUDED_INVOICE_STATUSES),
            )
            row = await cursor.fetchone()
            return float(row["total"]) if row else 0.0
