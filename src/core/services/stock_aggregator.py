"""Stock aggregation across warehouses."""

from collections.abc import Iterable

from src.core.entities.item import StockLevel, StockPosition
from src.core.interfaces.inventory_store import IInventoryStore


def summarize_stock(levels: Iterable[StockLevel]) -> dict[str, StockPosition]:
    """Fold per-warehouse stock rows into one position per item.

    Breakdown order follows the input order, so the first level of each
    position is the item's first known warehouse.
    """
    positions: dict[str, StockPosition] = {}
    for level in levels:
        position = positions.get(level.item_id)
        if position is None:
            position = StockPosition(item_id=level.item_id)
            positions[level.item_id] = position
        position.stock_on_hand += level.stock_on_hand
        position.committed_stock += level.committed_stock
        position.levels.append(level)
    return positions


class StockAggregator:
    """Reads stock levels and sums them per item."""

    def __init__(self, inventory_store: IInventoryStore) -> None:
        self._inventory_store = inventory_store

    async def aggregate(
        self, organization_id: str, item_ids: list[str] | None = None
    ) -> dict[str, StockPosition]:
        """Positions keyed by item ID. Items with no stock rows are absent."""
        levels = await self._inventory_store.list_stock_levels(
            organization_id, item_ids=item_ids
        )
        return summarize_stock(levels)

    async def position_for(self, organization_id: str, item_id: str) -> StockPosition:
        positions = await self.aggregate(organization_id, item_ids=[item_id])
        return positions.get(item_id) or StockPosition(item_id=item_id)
