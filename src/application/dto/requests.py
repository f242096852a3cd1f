"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation.
These are the ONLY contracts between API and use cases.
"""

from pydantic import BaseModel, Field

from src.core.entities.reorder import AlertStatus, ReorderSettingsUpdate


class ReorderSettingsRequest(BaseModel):
    """Create or partially update the settings row for an item.

    Fields left out of the payload are not changed. Sending
    ``preferred_vendor_id: null`` clears the vendor.
    """

    warehouse_id: str | None = Field(
        default=None,
        description="Warehouse the row applies to; omit for the item-wide row",
    )
    reorder_level: float | None = Field(default=None, ge=0, examples=[10])
    reorder_quantity: float | None = Field(default=None, ge=0, examples=[50])
    safety_stock: float | None = Field(default=None, ge=0)
    lead_time_days: int | None = Field(default=None, ge=0, examples=[7])
    preferred_vendor_id: str | None = Field(default=None, description="Vendor contact ID")
    auto_reorder: bool | None = None
    is_active: bool | None = None

    def to_update(self) -> ReorderSettingsUpdate:
        """Carry over only the fields the caller actually sent."""
        return ReorderSettingsUpdate(
            **self.model_dump(exclude_unset=True, exclude={"item_id"})
        )


class BulkReorderSettingsEntry(ReorderSettingsRequest):
    """One entry of a bulk settings update."""

    item_id: str = Field(..., description="Item the settings belong to")


class BulkReorderSettingsRequest(BaseModel):
    """Settings updates applied in order."""

    items: list[BulkReorderSettingsEntry] = Field(..., min_length=1)


class CreateReorderPORequest(BaseModel):
    """Optional overrides for a PO generated from an alert."""

    vendor_id: str | None = Field(
        default=None,
        description="Vendor to order from instead of the preferred vendor",
    )
    warehouse_id: str | None = Field(
        default=None,
        description="Receiving warehouse instead of the alert's warehouse",
    )


class BulkCreatePORequest(BaseModel):
    """Alerts to turn into draft purchase orders."""

    alert_ids: list[str] = Field(..., min_length=1)


class ListAlertsRequest(BaseModel):
    """Alert list filters and paging."""

    status: AlertStatus | None = None
    item_id: str | None = None
    page: int = Field(default=1, ge=1)
    limit: int | None = Field(default=None, ge=1, le=100)
