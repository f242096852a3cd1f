"""Reorder settings, suggestion and alert entities."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

from src.core.entities.contact import VendorSummary
from src.core.entities.item import StockLevel


class ReorderSettings(BaseModel):
    """Explicit reorder settings for an item, globally or for one warehouse."""

    id: str | None = None
    organization_id: str
    item_id: str
    warehouse_id: str | None = None  # None is the item-wide row
    reorder_level: float = 0.0
    reorder_quantity: float = 0.0
    safety_stock: float = 0.0
    lead_time_days: int = Field(default=0, ge=0)
    preferred_vendor_id: str | None = None
    auto_reorder: bool = False
    is_active: bool = True
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)


class ReorderSettingsUpdate(BaseModel):
    """Partial settings payload. Fields left unset are not touched."""

    warehouse_id: str | None = None
    reorder_level: float | None = Field(default=None, ge=0)
    reorder_quantity: float | None = Field(default=None, ge=0)
    safety_stock: float | None = Field(default=None, ge=0)
    lead_time_days: int | None = Field(default=None, ge=0)
    preferred_vendor_id: str | None = None
    auto_reorder: bool | None = None
    is_active: bool | None = None

    def changes(self) -> dict:
        """Fields explicitly provided by the caller, excluding the row key.

        An explicit ``None`` only counts for the vendor, where it clears the value.
        """
        data = self.model_dump(exclude_unset=True, exclude={"warehouse_id"})
        return {
            key: value
            for key, value in data.items()
            if value is not None or key == "preferred_vendor_id"
        }

    def apply_to(self, settings: ReorderSettings) -> ReorderSettings:
        """Return a copy of ``settings`` with the provided fields overwritten."""
        return settings.model_copy(
            update={**self.changes(), "updated_at": datetime.utcnow()}
        )


@dataclass(frozen=True)
class ExplicitSettings:
    """An active settings row applies."""

    settings: ReorderSettings
    source: Literal["explicit"] = "explicit"

    @property
    def reorder_level(self) -> float:
        return self.settings.reorder_level

    @property
    def reorder_quantity(self) -> float:
        return self.settings.reorder_quantity

    @property
    def preferred_vendor_id(self) -> str | None:
        return self.settings.preferred_vendor_id


@dataclass(frozen=True)
class ItemDefaultSettings:
    """No active settings row; the item's own fields apply."""

    reorder_level: float
    reorder_quantity: float
    source: Literal["item_default"] = "item_default"

    @property
    def preferred_vendor_id(self) -> str | None:
        return None


EffectiveSettings = ExplicitSettings | ItemDefaultSettings


class ReorderSuggestion(BaseModel):
    """An item at or below its reorder level. Computed, never persisted."""

    item_id: str
    sku: str
    name: str
    unit: str
    current_stock: float
    available_stock: float
    reorder_level: float
    suggested_qty: float
    cost_price: float
    estimated_cost: float
    preferred_vendor: VendorSummary | None = None
    stock_levels: list[StockLevel] = Field(default_factory=list)

    @property
    def low_stock_warehouse_id(self) -> str:
        """Warehouse an alert for this suggestion is placed in."""
        for level in self.stock_levels:
            if level.stock_on_hand <= self.reorder_level:
                return level.warehouse_id
        if self.stock_levels:
            return self.stock_levels[0].warehouse_id
        return ""


class AlertStatus(str, Enum):
    """Reorder alert lifecycle states."""

    PENDING = "PENDING"
    ACKNOWLEDGED = "ACKNOWLEDGED"
    RESOLVED = "RESOLVED"
    PO_CREATED = "PO_CREATED"

    @classmethod
    def open_statuses(cls) -> tuple["AlertStatus", ...]:
        return (cls.PENDING, cls.ACKNOWLEDGED)

    @property
    def is_open(self) -> bool:
        return self in AlertStatus.open_statuses()

    @property
    def is_terminal(self) -> bool:
        return not self.is_open

    def can_transition_to(self, target: "AlertStatus") -> bool:
        return target in _ALERT_TRANSITIONS[self]


_ALERT_TRANSITIONS: dict[AlertStatus, frozenset[AlertStatus]] = {
    AlertStatus.PENDING: frozenset(
        {AlertStatus.ACKNOWLEDGED, AlertStatus.RESOLVED, AlertStatus.PO_CREATED}
    ),
    AlertStatus.ACKNOWLEDGED: frozenset({AlertStatus.RESOLVED, AlertStatus.PO_CREATED}),
    AlertStatus.RESOLVED: frozenset(),
    AlertStatus.PO_CREATED: frozenset(),
}


class ReorderAlert(BaseModel):
    """Persisted notice that an item needs replenishment."""

    id: str | None = None
    organization_id: str
    item_id: str
    warehouse_id: str = ""
    current_stock: float
    reorder_level: float
    suggested_qty: float
    status: AlertStatus = AlertStatus.PENDING
    notified_at: datetime = Field(default_factory=datetime.utcnow)
    resolved_at: datetime | None = None
    purchase_order_id: str | None = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
