"""Item, warehouse and stock-level entities."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class ItemStatus(str, Enum):
    """Catalog status of an item."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class Item(BaseModel):
    """A catalog item with its item-level reorder defaults."""

    id: str
    organization_id: str
    sku: str
    name: str
    unit: str = "pcs"
    cost_price: float = 0.0
    reorder_level: float = 0.0  # item default, used when no settings row applies
    reorder_qty: float = 0.0
    track_inventory: bool = True
    status: ItemStatus = ItemStatus.ACTIVE
    created_at: datetime = Field(default_factory=datetime.utcnow)


class Warehouse(BaseModel):
    """Physical stock location."""

    id: str
    organization_id: str
    name: str
    code: str | None = None


class StockLevel(BaseModel):
    """Stock of one item in one warehouse."""

    item_id: str
    warehouse_id: str
    stock_on_hand: float = Field(default=0.0, ge=0)
    committed_stock: float = Field(default=0.0, ge=0)
    warehouse_name: str | None = None
    warehouse_code: str | None = None


class StockPosition(BaseModel):
    """Per-item stock totals across all warehouses, with the breakdown kept."""

    item_id: str
    stock_on_hand: float = 0.0
    committed_stock: float = 0.0
    levels: list[StockLevel] = Field(default_factory=list)

    @property
    def available_stock(self) -> float:
        """On-hand minus committed; can dip below zero while orders are in flight."""
        return self.stock_on_hand - self.committed_stock
