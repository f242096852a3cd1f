"""Schema migrations for the reorder database."""

from src.infrastructure.storage.sqlite.migrations.migrator import (
    MIGRATIONS_DIR,
    REQUIRED_TABLES,
    MigrationInfo,
    MigrationResult,
    get_migration_status,
    initialize_database,
    run_migrations,
    verify_schema_integrity,
)

__all__ = [
    "MIGRATIONS_DIR",
    "REQUIRED_TABLES",
    "MigrationInfo",
    "MigrationResult",
    "initialize_database",
    "run_migrations",
    "get_migration_status",
    "verify_schema_integrity",
]
