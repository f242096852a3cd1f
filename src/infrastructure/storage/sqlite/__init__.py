"""SQLite storage implementations."""

from src.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)
from src.infrastructure.storage.sqlite.contact_store import SQLiteContactStore
from src.infrastructure.storage.sqlite.inventory_store import SQLiteInventoryStore
from src.infrastructure.storage.sqlite.purchase_order_store import SQLitePurchaseOrderStore
from src.infrastructure.storage.sqlite.reorder_store import (
    SQLiteReorderAlertStore,
    SQLiteReorderSettingsStore,
)
from src.infrastructure.storage.sqlite.sales_store import SQLiteSalesHistoryStore

# Singleton instances
_inventory_store: SQLiteInventoryStore | None = None
_contact_store: SQLiteContactStore | None = None
_sales_store: SQLiteSalesHistoryStore | None = None
_settings_store: SQLiteReorderSettingsStore | None = None
_alert_store: SQLiteReorderAlertStore | None = None
_purchase_order_store: SQLitePurchaseOrderStore | None = None


async def get_inventory_store() -> SQLiteInventoryStore:
    """Get singleton inventory store instance."""
    global _inventory_store
    if _inventory_store is None:
        _inventory_store = SQLiteInventoryStore()
    return _inventory_store


async def get_contact_store() -> SQLiteContactStore:
    """Get singleton contact store instance."""
    global _contact_store
    if _contact_store is None:
        _contact_store = SQLiteContactStore()
    return _contact_store


async def get_sales_store() -> SQLiteSalesHistoryStore:
    """Get singleton sales history store instance."""
    global _sales_store
    if _sales_store is None:
        _sales_store = SQLiteSalesHistoryStore()
    return _sales_store


async def get_reorder_settings_store() -> SQLiteReorderSettingsStore:
    """Get singleton reorder settings store instance."""
    global _settings_store
    if _settings_store is None:
        _settings_store = SQLiteReorderSettingsStore()
    return _settings_store


async def get_reorder_alert_store() -> SQLiteReorderAlertStore:
    """Get singleton reorder alert store instance."""
    global _alert_store
    if _alert_store is None:
        _alert_store = SQLiteReorderAlertStore()
    return _alert_store


async def get_purchase_order_store() -> SQLitePurchaseOrderStore:
    """Get singleton purchase order store instance."""
    global _purchase_order_store
    if _purchase_order_store is None:
        _purchase_order_store = SQLitePurchaseOrderStore()
    return _purchase_order_store


__all__ = [
    # Connection
    "ConnectionPool",
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
    # Store classes
    "SQLiteInventoryStore",
    "SQLiteContactStore",
    "SQLiteSalesHistoryStore",
    "SQLiteReorderSettingsStore",
    "SQLiteReorderAlertStore",
    "SQLitePurchaseOrderStore",
    # Factory functions
    "get_inventory_store",
    "get_contact_store",
    "get_sales_store",
    "get_reorder_settings_store",
    "get_reorder_alert_store",
    "get_purchase_order_store",
]
