"""Core interfaces (ports) for dependency injection."""

from src.core.interfaces.contact_store import IContactStore
from src.core.interfaces.inventory_store import IInventoryStore
from src.core.interfaces.purchase_order_store import IPurchaseOrderStore
from src.core.interfaces.reorder_store import IReorderAlertStore, IReorderSettingsStore
from src.core.interfaces.sales_store import ISalesHistoryStore

__all__ = [
    "IInventoryStore",
    "IContactStore",
    "ISalesHistoryStore",
    "IReorderSettingsStore",
    "IReorderAlertStore",
    "IPurchaseOrderStore",
]
