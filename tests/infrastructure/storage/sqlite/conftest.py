"""Pytest fixtures for SQLite storage tests."""

from collections.abc import AsyncGenerator, Awaitable, Callable
from pathlib import Path
from unittest.mock import MagicMock, patch

import aiosqlite
import pytest

import src.infrastructure.storage.sqlite.connection as conn_module
from src.infrastructure.storage.sqlite.connection import close_pool
from src.infrastructure.storage.sqlite.migrations import MIGRATIONS_DIR

ORG = "org-1"
OTHER_ORG = "org-2"

Seeder = Callable[[str, tuple], Awaitable[None]]


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Create a temporary database path."""
    return tmp_path / "test.db"


@pytest.fixture
def mock_settings(temp_db_path: Path):
    """Mock settings with temp database path."""
    mock = MagicMock()
    mock.storage.db_path = temp_db_path
    mock.storage.pool_size = 2
    mock.storage.busy_timeout = 5000
    return mock


@pytest.fixture
async def initialized_db(temp_db_path: Path, mock_settings) -> AsyncGenerator[Path, None]:
    """Create the schema from the migration script and point the pool at it."""
    schema = (MIGRATIONS_DIR / "v001_reorder_schema.sql").read_text(encoding="utf-8")
    async with aiosqlite.connect(temp_db_path) as conn:
        await conn.execute("PRAGMA journal_mode=WAL")
        await conn.executescript(schema)
        await conn.commit()

    conn_module._pool = None
    with patch.object(conn_module, "get_settings", return_value=mock_settings):
        try:
            yield temp_db_path
        finally:
            await close_pool()


@pytest.fixture
def seed(initialized_db: Path) -> Seeder:
    """Run a write statement on a separate connection and commit it."""

    async def _seed(sql: str, params: tuple = ()) -> None:
        async with aiosqlite.connect(initialized_db) as conn:
            await conn.execute(sql, params)
            await conn.commit()

    return _seed


@pytest.fixture
def fetch_one(initialized_db: Path):
    """Read a single row on a separate connection."""

    async def _fetch(sql: str, params: tuple = ()):
        async with aiosqlite.connect(initialized_db) as conn:
            conn.row_factory = aiosqlite.Row
            cursor = await conn.execute(sql, params)
            return await cursor.fetchone()

    return _fetch


@pytest.fixture
async def catalog(seed: Seeder) -> None:
    """Two warehouses, three items, a vendor and a customer in ORG plus one foreign item."""
    await seed(
        "INSERT INTO warehouses (id, organization_id, name, code) VALUES (?, ?, ?, ?)",
        ("wh-1", ORG, "Main", "MAIN"),
    )
    await seed(
        "INSERT INTO warehouses (id, organization_id, name, code) VALUES (?, ?, ?, ?)",
        ("wh-2", ORG, "Overflow", "OVF"),
    )
    items = [
        ("item-b", ORG, "SKU-B", "Bolt", 0.5, 10, 0, 1, "ACTIVE"),
        ("item-a", ORG, "SKU-A", "Anchor", 2.0, 5, 20, 1, "ACTIVE"),
        ("item-c", ORG, "SKU-C", "Cable", 1.0, 5, 0, 0, "ACTIVE"),
        ("item-d", ORG, "SKU-D", "Drill", 50.0, 1, 0, 1, "INACTIVE"),
        ("item-x", OTHER_ORG, "SKU-X", "Foreign", 1.0, 5, 0, 1, "ACTIVE"),
    ]
    for row in items:
        await seed(
            """
            INSERT INTO items (
                id, organization_id, sku, name, cost_price,
                reorder_level, reorder_qty, track_inventory, status
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            row,
        )
    await seed(
        """
        INSERT INTO contacts (id, organization_id, display_name, company_name, contact_type)
        VALUES (?, ?, ?, ?, ?)
        """,
        ("vendor-1", ORG, "Acme Supply", "Acme Supply LLC", "VENDOR"),
    )
    await seed(
        """
        INSERT INTO contacts (id, organization_id, display_name, company_name, contact_type)
        VALUES (?, ?, ?, ?, ?)
        """,
        ("cust-1", ORG, "Buyer", None, "CUSTOMER"),
    )
