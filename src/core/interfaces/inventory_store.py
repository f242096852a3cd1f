"""Abstract interface for inventory storage."""

from abc import ABC, abstractmethod

from src.core.entities.item import Item, StockLevel, Warehouse


class IInventoryStore(ABC):
    """Read access to items, warehouses and per-warehouse stock levels."""

    @abstractmethod
    async def get_item(self, organization_id: str, item_id: str) -> Item | None:
        """Get item by ID within the organization."""
        pass

    @abstractmethod
    async def list_tracked_items(
        self, organization_id: str, item_ids: list[str] | None = None
    ) -> list[Item]:
        """List active, stock-tracked items, optionally restricted to ``item_ids``."""
        pass

    @abstractmethod
    async def list_stock_levels(
        self, organization_id: str, item_ids: list[str] | None = None
    ) -> list[StockLevel]:
        """List stock levels with warehouse name/code, ordered by item then warehouse."""
        pass

    @abstractmethod
    async def get_warehouse(
        self, organization_id: str, warehouse_id: str
    ) -> Warehouse | None:
        """Get warehouse by ID within the organization."""
        pass
