"""Purchase order entities."""

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, Field, model_validator


class PurchaseOrderStatus(str, Enum):
    """Purchase order lifecycle states owned by the purchasing module."""

    DRAFT = "DRAFT"
    ISSUED = "ISSUED"
    PARTIALLY_RECEIVED = "PARTIALLY_RECEIVED"
    RECEIVED = "RECEIVED"
    CLOSED = "CLOSED"
    CANCELLED = "CANCELLED"


class PurchaseOrderItem(BaseModel):
    """Single line of a purchase order."""

    id: str | None = None
    purchase_order_id: str | None = None
    item_id: str
    description: str | None = None
    quantity: float = Field(..., gt=0)
    unit: str | None = None
    unit_price: float = Field(default=0.0, ge=0)
    total: float = 0.0

    @model_validator(mode="after")
    def compute_line(self) -> "PurchaseOrderItem":
        """Line total is quantity times unit price, kept unrounded."""
        self.total = self.quantity * self.unit_price
        return self


class PurchaseOrder(BaseModel):
    """Purchase order header with its lines."""

    id: str | None = None
    organization_id: str
    order_number: str | None = None  # assigned by the store on insert
    vendor_id: str
    warehouse_id: str | None = None
    order_date: date = Field(default_factory=date.today)
    status: PurchaseOrderStatus = PurchaseOrderStatus.DRAFT
    subtotal: float = 0.0
    total: float = 0.0
    notes: str | None = None
    created_by_id: str | None = None
    items: list[PurchaseOrderItem] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.utcnow)

    @model_validator(mode="after")
    def compute_totals(self) -> "PurchaseOrder":
        """Auto-compute subtotal and total from lines (no tax on drafts)."""
        if self.items:
            self.subtotal = sum(line.total for line in self.items)
            self.total = self.subtotal
        return self
