"""Core domain entities."""

from src.core.entities.contact import Contact, ContactType, VendorSummary
from src.core.entities.forecast import (
    MOVING_AVERAGE,
    CoverageItem,
    DemandForecast,
    ForecastPoint,
    HistoricalPoint,
    ItemSummary,
    ReorderReport,
    ReorderSummary,
    SalesLine,
)
from src.core.entities.item import Item, ItemStatus, StockLevel, StockPosition, Warehouse
from src.core.entities.purchase_order import (
    PurchaseOrder,
    PurchaseOrderItem,
    PurchaseOrderStatus,
)
from src.core.entities.reorder import (
    AlertStatus,
    EffectiveSettings,
    ExplicitSettings,
    ItemDefaultSettings,
    ReorderAlert,
    ReorderSettings,
    ReorderSettingsUpdate,
    ReorderSuggestion,
)

__all__ = [
    # Inventory entities
    "Item",
    "ItemStatus",
    "Warehouse",
    "StockLevel",
    "StockPosition",
    # Contact entities
    "Contact",
    "ContactType",
    "VendorSummary",
    # Reorder entities
    "ReorderSettings",
    "ReorderSettingsUpdate",
    "EffectiveSettings",
    "ExplicitSettings",
    "ItemDefaultSettings",
    "ReorderSuggestion",
    "ReorderAlert",
    "AlertStatus",
    # Purchase order entities
    "PurchaseOrder",
    "PurchaseOrderItem",
    "PurchaseOrderStatus",
    # Forecast and report entities
    "SalesLine",
    "ItemSummary",
    "HistoricalPoint",
    "ForecastPoint",
    "DemandForecast",
    "CoverageItem",
    "ReorderSummary",
    "ReorderReport",
    "MOVING_AVERAGE",
]
