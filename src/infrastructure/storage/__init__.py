"""Storage infrastructure implementations."""

from src.infrastructure.storage.sqlite import (
    SQLiteContactStore,
    SQLiteInventoryStore,
    SQLitePurchaseOrderStore,
    SQLiteReorderAlertStore,
    SQLiteReorderSettingsStore,
    SQLiteSalesHistoryStore,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)

__all__ = [
    # SQLite stores
    "SQLiteInventoryStore",
    "SQLiteContactStore",
    "SQLiteSalesHistoryStore",
    "SQLiteReorderSettingsStore",
    "SQLiteReorderAlertStore",
    "SQLitePurchaseOrderStore",
    # Connection pool
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
]
