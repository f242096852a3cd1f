"""
Reorder suggestion calculation.

Takes one read-only snapshot of the organization's tracked items, stock levels
and active settings, then evaluates every item independently against it.
Cost is linear in catalog size on every call.
"""

from collections import defaultdict
from dataclasses import dataclass, field

from src.config import get_logger
from src.core.entities.contact import Contact, VendorSummary
from src.core.entities.item import Item, StockPosition
from src.core.entities.reorder import (
    EffectiveSettings,
    ReorderSettings,
    ReorderSuggestion,
)
from src.core.interfaces.contact_store import IContactStore
from src.core.interfaces.inventory_store import IInventoryStore
from src.core.interfaces.reorder_store import IReorderSettingsStore
from src.core.services.settings_resolver import resolve_effective_settings
from src.core.services.stock_aggregator import summarize_stock

logger = get_logger(__name__)


def suggested_quantity(reorder_level: float, reorder_quantity: float) -> float:
    """Configured reorder quantity, or twice the reorder level when unset."""
    return reorder_quantity if reorder_quantity > 0 else reorder_level * 2


def needs_reorder(reorder_level: float, available_stock: float) -> bool:
    return reorder_level > 0 and available_stock <= reorder_level


def build_suggestion(
    item: Item,
    position: StockPosition,
    effective: EffectiveSettings,
    vendor: Contact | None = None,
) -> ReorderSuggestion | None:
    """Evaluate one item. Returns None when the item does not need reordering."""
    available = position.available_stock
    if not needs_reorder(effective.reorder_level, available):
        return None

    qty = suggested_quantity(effective.reorder_level, effective.reorder_quantity)
    return ReorderSuggestion(
        item_id=item.id,
        sku=item.sku,
        name=item.name,
        unit=item.unit,
        current_stock=position.stock_on_hand,
        available_stock=available,
        reorder_level=effective.reorder_level,
        suggested_qty=qty,
        cost_price=item.cost_price,
        estimated_cost=item.cost_price * qty,
        preferred_vendor=VendorSummary.from_contact(vendor) if vendor else None,
        stock_levels=list(position.levels),
    )


def _urgency(suggestion: ReorderSuggestion) -> tuple[float, str]:
    # Most depleted relative to its threshold first
    return (suggestion.available_stock / suggestion.reorder_level, suggestion.sku)


@dataclass
class CatalogSnapshot:
    """Everything the calculator reads, fetched once per run."""

    items: list[Item]
    positions: dict[str, StockPosition]
    settings_by_item: dict[str, list[ReorderSettings]] = field(default_factory=dict)

    def position(self, item_id: str) -> StockPosition:
        return self.positions.get(item_id) or StockPosition(item_id=item_id)

    def effective(self, item: Item) -> EffectiveSettings:
        return resolve_effective_settings(item, self.settings_by_item.get(item.id, []))


class SuggestionCalculator:
    """Ranks items that are at or below their reorder level."""

    def __init__(
        self,
        inventory_store: IInventoryStore,
        settings_store: IReorderSettingsStore,
        contact_store: IContactStore,
    ) -> None:
        self._inventory_store = inventory_store
        self._settings_store = settings_store
        self._contact_store = contact_store

    async def load_snapshot(self, organization_id: str) -> CatalogSnapshot:
        items = await self._inventory_store.list_tracked_items(organization_id)
        levels = await self._inventory_store.list_stock_levels(organization_id)
        rows = await self._settings_store.list_active(organization_id)

        settings_by_item: dict[str, list[ReorderSettings]] = defaultdict(list)
        for row in rows:
            settings_by_item[row.item_id].append(row)

        return CatalogSnapshot(
            items=items,
            positions=summarize_stock(levels),
            settings_by_item=dict(settings_by_item),
        )

    async def calculate(self, organization_id: str) -> list[ReorderSuggestion]:
        """Suggestions for every tracked item needing reorder, most urgent first."""
        snapshot = await self.load_snapshot(organization_id)

        candidates: list[tuple[Item, StockPosition, EffectiveSettings]] = []
        for item in snapshot.items:
            effective = snapshot.effective(item)
            position = snapshot.position(item.id)
            if needs_reorder(effective.reorder_level, position.available_stock):
                candidates.append((item, position, effective))

        vendor_ids = sorted(
            {eff.preferred_vendor_id for _, _, eff in candidates if eff.preferred_vendor_id}
        )
        vendors = (
            await self._contact_store.get_contacts(organization_id, vendor_ids)
            if vendor_ids
            else {}
        )

        suggestions = []
        for item, position, effective in candidates:
            vendor = vendors.get(effective.preferred_vendor_id or "")
            suggestion = build_suggestion(item, position, effective, vendor)
            if suggestion is not None:
                suggestions.append(suggestion)

        suggestions.sort(key=_urgency)

        logger.info(
            "reorder_suggestions_calculated",
            organization_id=organization_id,
            items_scanned=len(snapshot.items),
            suggestions=len(suggestions),
        )
        return suggestions
