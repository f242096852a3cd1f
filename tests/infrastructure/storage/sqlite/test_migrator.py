"""Tests for the versioned schema migrator."""

from pathlib import Path
from unittest.mock import patch

import aiosqlite
import pytest

import src.infrastructure.storage.sqlite.migrations.migrator as migrator
from src.infrastructure.storage.sqlite.migrations.migrator import (
    REQUIRED_TABLES,
    MigrationInfo,
    create_backup,
    discover_migrations,
    get_current_version,
    get_migration_status,
    initialize_database,
    restore_backup,
    verify_schema_integrity,
)


@pytest.fixture(autouse=True)
def patched_settings(mock_settings):
    with patch.object(migrator, "get_settings", return_value=mock_settings):
        yield mock_settings


class TestMigrationInfo:
    def test_from_file(self, tmp_path: Path):
        path = tmp_path / "v007_add_lead_times.sql"
        path.write_text("SELECT 1;", encoding="utf-8")

        info = MigrationInfo.from_file(path)

        assert info.version == "007"
        assert info.name == "add_lead_times"
        assert len(info.checksum) == 16

    def test_checksum_follows_content(self, tmp_path: Path):
        a = tmp_path / "v001_a.sql"
        b = tmp_path / "v002_b.sql"
        a.write_text("SELECT 1;", encoding="utf-8")
        b.write_text("SELECT 2;", encoding="utf-8")

        assert MigrationInfo.from_file(a).checksum != MigrationInfo.from_file(b).checksum

    def test_invalid_name(self, tmp_path: Path):
        path = tmp_path / "reorder.sql"
        path.write_text("", encoding="utf-8")

        with pytest.raises(ValueError):
            MigrationInfo.from_file(path)


class TestDiscoverMigrations:
    def test_ships_reorder_schema(self):
        migrations = discover_migrations()

        assert migrations[0].version == "001"
        assert migrations[0].name == "reorder_schema"
        assert [m.version for m in migrations] == sorted(m.version for m in migrations)


class TestInitializeDatabase:
    async def test_fresh_database(self, temp_db_path: Path):
        results = await initialize_database(temp_db_path)

        assert results
        assert all(r.success for r in results)
        async with aiosqlite.connect(temp_db_path) as conn:
            assert await get_current_version(conn) == discover_migrations()[-1].version

    async def test_second_run_is_noop(self, temp_db_path: Path):
        await initialize_database(temp_db_path)

        results = await initialize_database(temp_db_path)

        assert results == []
        # backup removed after a clean run
        assert list(temp_db_path.parent.glob("*.backup_*")) == []

    async def test_defaults_to_settings_path(self, temp_db_path: Path):
        await initialize_database()

        assert temp_db_path.exists()

    async def test_changed_checksum_stops(self, temp_db_path: Path):
        await initialize_database(temp_db_path)
        async with aiosqlite.connect(temp_db_path) as conn:
            await conn.execute("UPDATE schema_migrations SET checksum = 'tampered'")
            await conn.commit()

        results = await initialize_database(temp_db_path, create_backup_before=False)

        assert results == []


class TestStatusAndIntegrity:
    async def test_status_missing_database(self, tmp_path: Path):
        status = await get_migration_status(tmp_path / "absent.db")

        assert status["exists"] is False
        assert status["current_version"] is None

    async def test_status_after_init(self, temp_db_path: Path):
        await initialize_database(temp_db_path)

        status = await get_migration_status(temp_db_path)

        assert status["exists"] is True
        assert status["pending_migrations"] == []
        assert "001" in status["applied_migrations"]

    async def test_verify_schema(self, temp_db_path: Path):
        await initialize_database(temp_db_path)

        checks = {c["check"]: c for c in await verify_schema_integrity(temp_db_path)}

        assert checks["foreign_keys"]["status"] == "PASS"
        assert checks["integrity"]["status"] == "PASS"
        assert checks["required_tables"]["status"] == "PASS"

    async def test_verify_reports_missing_tables(self, temp_db_path: Path):
        async with aiosqlite.connect(temp_db_path) as conn:
            await conn.execute("CREATE TABLE items (id TEXT PRIMARY KEY)")
            await conn.commit()

        checks = {c["check"]: c for c in await verify_schema_integrity(temp_db_path)}

        assert checks["required_tables"]["status"] == "FAIL"
        assert "reorder_alerts" in checks["required_tables"]["missing"]
        assert "items" not in checks["required_tables"]["missing"]
        assert len(checks["required_tables"]["missing"]) == len(REQUIRED_TABLES) - 1


class TestBackup:
    def test_backup_and_restore(self, temp_db_path: Path):
        temp_db_path.write_bytes(b"original")

        backup = create_backup(temp_db_path)
        temp_db_path.write_bytes(b"changed")
        restore_backup(temp_db_path, backup)

        assert ".backup_" in backup.name
        assert temp_db_path.read_bytes() == b"original"
