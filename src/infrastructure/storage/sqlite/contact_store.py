"""SQLite implementation of contact reads."""

import aiosqlite

from src.core.entities.contact import Contact, ContactType
from src.core.interfaces.contact_store import IContactStore
from src.infrastructure.storage.sqlite.connection import get_connection
from src.infrastructure.storage.sqlite.rows import placeholders


class SQLiteContactStore(IContactStore):
    """SQLite implementation of customer and vendor lookups."""

    async def get_contact(self, organization_id: str, contact_id: str) -> Contact | None:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM contacts WHERE id = ? AND organization_id = ?",
                (contact_id, organization_id),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_contact(row)

    async def get_vendor(self, organization_id: str, contact_id: str) -> Contact | None:
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM contacts
                WHERE id = ? AND organization_id = ?
                  AND contact_type IN ('VENDOR', 'BOTH')
                """,
                (contact_id, organization_id),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_contact(row)

    async def get_contacts(
        self, organization_id: str, contact_ids: list[str]
    ) -> dict[str, Contact]:
        ids = list(dict.fromkeys(contact_ids))
        if not ids:
            return {}

        async with get_connection() as conn:
            cursor = await conn.execute(
                f"""
                SELECT * FROM contacts
                WHERE organization_id = ? AND id IN ({placeholders(ids)})
                """,
                (organization_id, *ids),
            )
            rows = await cursor.fetchall()
            return {row["id"]: self._row_to_contact(row) for row in rows}

    @staticmethod
    def _row_to_contact(row: aiosqlite.Row) -> Contact:
        return Contact(
            id=row["id"],
            organization_id=row["organization_id"],
            display_name=row["display_name"],
            company_name=row["company_name"],
            contact_type=ContactType(row["contact_type"]),
            is_active=bool(row["is_active"]),
        )
