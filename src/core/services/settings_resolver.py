"""
Reorder settings resolution and persistence.

An item's effective settings come from exactly one place: its first active
settings row, or the reorder fields on the item itself. There is no further
fallback chain between warehouses.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from src.config import get_logger
from src.core.entities.item import Item
from src.core.entities.reorder import (
    EffectiveSettings,
    ExplicitSettings,
    ItemDefaultSettings,
    ReorderSettings,
    ReorderSettingsUpdate,
)
from src.core.exceptions import ItemNotFoundError
from src.core.interfaces.inventory_store import IInventoryStore
from src.core.interfaces.reorder_store import IReorderSettingsStore

logger = get_logger(__name__)


def resolve_effective_settings(
    item: Item,
    rows: Sequence[ReorderSettings],
    warehouse_id: str | None = None,
) -> EffectiveSettings:
    """
    Pick the settings that govern ``item``.

    Args:
        item: The item whose defaults are the fallback.
        rows: Settings rows for the item in store order (item-wide row first).
        warehouse_id: Restrict the lookup to rows for this warehouse.

    Returns:
        ExplicitSettings for the first matching active row, else ItemDefaultSettings.
    """
    for row in rows:
        if not row.is_active or row.item_id != item.id:
            continue
        if warehouse_id is not None and row.warehouse_id != warehouse_id:
            continue
        return ExplicitSettings(settings=row)

    return ItemDefaultSettings(
        reorder_level=item.reorder_level,
        reorder_quantity=item.reorder_qty,
    )


@dataclass
class ItemReorderSettings:
    """An item, all of its settings rows and what currently applies."""

    item: Item
    settings: list[ReorderSettings]
    effective: EffectiveSettings


class SettingsResolver:
    """Reads and writes reorder settings for items."""

    def __init__(
        self,
        settings_store: IReorderSettingsStore,
        inventory_store: IInventoryStore,
    ) -> None:
        self._settings_store = settings_store
        self._inventory_store = inventory_store

    async def _require_item(self, organization_id: str, item_id: str) -> Item:
        item = await self._inventory_store.get_item(organization_id, item_id)
        if item is None:
            raise ItemNotFoundError(item_id)
        return item

    async def resolve(
        self,
        organization_id: str,
        item_id: str,
        warehouse_id: str | None = None,
    ) -> EffectiveSettings:
        item = await self._require_item(organization_id, item_id)
        rows = await self._settings_store.list_for_item(
            organization_id, item_id, active_only=True
        )
        return resolve_effective_settings(item, rows, warehouse_id)

    async def get_settings(self, organization_id: str, item_id: str) -> ItemReorderSettings:
        item = await self._require_item(organization_id, item_id)
        rows = await self._settings_store.list_for_item(organization_id, item_id)
        return ItemReorderSettings(
            item=item,
            settings=rows,
            effective=resolve_effective_settings(item, rows),
        )

    async def update_settings(
        self,
        organization_id: str,
        item_id: str,
        update: ReorderSettingsUpdate,
    ) -> ReorderSettings:
        """Create or update the row keyed by (item, warehouse)."""
        await self._require_item(organization_id, item_id)

        existing = await self._settings_store.find(
            organization_id, item_id, update.warehouse_id
        )
        if existing is not None:
            saved = await self._settings_store.update(update.apply_to(existing))
            logger.info(
                "reorder_settings_updated",
                item_id=item_id,
                warehouse_id=update.warehouse_id,
                fields=sorted(update.changes()),
            )
            return saved

        # First write: unspecified fields take the entity defaults
        settings = ReorderSettings(
            organization_id=organization_id,
            item_id=item_id,
            warehouse_id=update.warehouse_id,
            **update.changes(),
        )
        saved = await self._settings_store.create(settings)
        logger.info(
            "reorder_settings_created",
            item_id=item_id,
            warehouse_id=update.warehouse_id,
        )
        return saved

    async def bulk_update(
        self,
        organization_id: str,
        entries: Sequence[tuple[str, ReorderSettingsUpdate]],
    ) -> list[ReorderSettings]:
        """Apply updates in order. The first failure propagates."""
        results = []
        for item_id, update in entries:
            results.append(await self.update_settings(organization_id, item_id, update))
        return results
