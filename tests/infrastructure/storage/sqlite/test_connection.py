"""Tests for the SQLite connection pool and transaction helpers."""

import asyncio
from pathlib import Path
from unittest.mock import patch

import aiosqlite
import pytest

import src.infrastructure.storage.sqlite.connection as conn_module
from src.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)

INSERT_WAREHOUSE = "INSERT INTO warehouses (id, organization_id, name) VALUES (?, ?, ?)"


class TestConnectionPool:
    async def test_initialize_creates_connections(self, temp_db_path: Path):
        pool = ConnectionPool(temp_db_path, pool_size=2)
        await pool.initialize()

        assert pool._initialized is True
        assert len(pool._connections) == 2
        assert pool._pool.qsize() == 2

        await pool.close()

    async def test_connection_pragmas(self, temp_db_path: Path):
        pool = ConnectionPool(temp_db_path, pool_size=1, busy_timeout=1234)

        async with pool.acquire() as conn:
            cursor = await conn.execute("PRAGMA foreign_keys")
            assert (await cursor.fetchone())[0] == 1
            cursor = await conn.execute("PRAGMA busy_timeout")
            assert (await cursor.fetchone())[0] == 1234
            assert conn.row_factory is aiosqlite.Row

        await pool.close()

    async def test_acquire_returns_connection_on_error(self, temp_db_path: Path):
        pool = ConnectionPool(temp_db_path, pool_size=1)

        with pytest.raises(ValueError):
            async with pool.acquire():
                raise ValueError("boom")

        assert pool._pool.qsize() == 1
        await pool.close()

    async def test_acquire_waits_when_exhausted(self, temp_db_path: Path):
        pool = ConnectionPool(temp_db_path, pool_size=1)

        async with pool.acquire():
            with pytest.raises(asyncio.TimeoutError):
                async with asyncio.timeout(0.1):
                    async with pool.acquire():
                        pass

        await pool.close()

    async def test_close_resets(self, temp_db_path: Path):
        pool = ConnectionPool(temp_db_path, pool_size=2)
        await pool.initialize()

        await pool.close()

        assert pool._initialized is False
        assert pool._connections == []


class TestTransactions:
    async def test_commit(self, initialized_db: Path, fetch_one):
        async with get_transaction() as conn:
            await conn.execute(INSERT_WAREHOUSE, ("wh-9", "org-1", "Dock"))

        row = await fetch_one("SELECT name FROM warehouses WHERE id = ?", ("wh-9",))
        assert row["name"] == "Dock"

    async def test_rollback(self, initialized_db: Path, fetch_one):
        with pytest.raises(RuntimeError):
            async with get_transaction() as conn:
                await conn.execute(INSERT_WAREHOUSE, ("wh-9", "org-1", "Dock"))
                raise RuntimeError("abort")

        row = await fetch_one("SELECT COUNT(*) AS n FROM warehouses")
        assert row["n"] == 0

    async def test_immediate_rollback(self, initialized_db: Path, fetch_one):
        with pytest.raises(RuntimeError):
            async with get_transaction(immediate=True) as conn:
                assert conn.in_transaction
                await conn.execute(INSERT_WAREHOUSE, ("wh-9", "org-1", "Dock"))
                raise RuntimeError("abort")

        row = await fetch_one("SELECT COUNT(*) AS n FROM warehouses")
        assert row["n"] == 0

    async def test_immediate_holds_write_lock(self, initialized_db: Path):
        async with get_transaction(immediate=True) as conn:
            await conn.execute(INSERT_WAREHOUSE, ("wh-9", "org-1", "Dock"))

            async with aiosqlite.connect(initialized_db, timeout=0.1) as other:
                with pytest.raises(aiosqlite.OperationalError):
                    await other.execute("BEGIN IMMEDIATE")

    async def test_foreign_keys_enforced(self, initialized_db: Path):
        with pytest.raises(aiosqlite.IntegrityError):
            async with get_transaction() as conn:
                await conn.execute(
                    "INSERT INTO stock_levels (item_id, warehouse_id) VALUES (?, ?)",
                    ("no-item", "no-warehouse"),
                )


class TestGlobalPool:
    async def test_get_pool_singleton(self, mock_settings):
        conn_module._pool = None

        with patch.object(conn_module, "get_settings", return_value=mock_settings):
            pool1 = await get_pool()
            pool2 = await get_pool()

            assert pool1 is pool2
            assert pool1.db_path == mock_settings.storage.db_path
            assert pool1.pool_size == 2

            await close_pool()
            assert conn_module._pool is None

    async def test_get_connection(self, mock_settings):
        conn_module._pool = None

        with patch.object(conn_module, "get_settings", return_value=mock_settings):
            async with get_connection() as conn:
                assert isinstance(conn, aiosqlite.Connection)

            await close_pool()

    async def test_close_pool_when_none(self):
        conn_module._pool = None
        await close_pool()
