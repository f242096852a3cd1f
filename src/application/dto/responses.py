"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization.
These are the ONLY contracts between use cases and API layer.
"""

from datetime import date, datetime

from pydantic import BaseModel, Field

# --- Shared ---


class ItemSummaryResponse(BaseModel):
    id: str
    sku: str
    name: str


class VendorResponse(BaseModel):
    """Vendor attached to a suggestion or order."""

    id: str
    display_name: str
    company_name: str | None = None


class StockLevelResponse(BaseModel):
    """Stock of an item in one warehouse."""

    warehouse_id: str
    warehouse_name: str | None = None
    warehouse_code: str | None = None
    stock_on_hand: float
    committed_stock: float


class PageMeta(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int


# --- Settings ---


class ReorderSettingsResponse(BaseModel):
    """A persisted reorder settings row."""

    id: str
    item_id: str
    warehouse_id: str | None = None
    reorder_level: float
    reorder_quantity: float
    safety_stock: float
    lead_time_days: int
    preferred_vendor_id: str | None = None
    auto_reorder: bool
    is_active: bool
    created_at: datetime
    updated_at: datetime


class EffectiveSettingsResponse(BaseModel):
    """What currently governs reordering for an item."""

    source: str = Field(..., description="'explicit' or 'item_default'")
    reorder_level: float
    reorder_quantity: float
    preferred_vendor_id: str | None = None


class ItemReorderSettingsResponse(BaseModel):
    item: ItemSummaryResponse
    settings: list[ReorderSettingsResponse] = Field(default_factory=list)
    effective: EffectiveSettingsResponse


class BulkReorderSettingsResponse(BaseModel):
    updated: int
    results: list[ReorderSettingsResponse] = Field(default_factory=list)


# --- Suggestions and alerts ---


class ReorderSuggestionResponse(BaseModel):
    """An item at or below its reorder level."""

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
    preferred_vendor: VendorResponse | None = None
    stock_levels: list[StockLevelResponse] = Field(default_factory=list)


class ReorderAlertResponse(BaseModel):
    id: str
    item_id: str
    warehouse_id: str
    current_stock: float
    reorder_level: float
    suggested_qty: float
    status: str
    notified_at: datetime
    resolved_at: datetime | None = None
    purchase_order_id: str | None = None
    created_at: datetime
    updated_at: datetime


class ReorderCheckResponse(BaseModel):
    checked: int
    new_alerts: int
    alerts: list[ReorderAlertResponse] = Field(default_factory=list)


class AlertListResponse(BaseModel):
    data: list[ReorderAlertResponse] = Field(default_factory=list)
    meta: PageMeta


# --- Purchase orders ---


class PurchaseOrderItemResponse(BaseModel):
    id: str | None = None
    item_id: str
    description: str | None = None
    quantity: float
    unit: str | None = None
    unit_price: float
    total: float


class PurchaseOrderResponse(BaseModel):
    """Draft purchase order created from an alert."""

    id: str
    order_number: str
    vendor_id: str
    warehouse_id: str | None = None
    order_date: date
    status: str
    subtotal: float
    total: float
    notes: str | None = None
    created_by_id: str | None = None
    items: list[PurchaseOrderItemResponse] = Field(default_factory=list)
    created_at: datetime


class BulkPOItemResponse(BaseModel):
    alert_id: str
    success: bool
    purchase_order_id: str | None = None
    error: str | None = None


class BulkPOResponse(BaseModel):
    created: int
    failed: int
    results: list[BulkPOItemResponse] = Field(default_factory=list)
    errors: list[BulkPOItemResponse] = Field(default_factory=list)


# --- Forecast and report ---


class HistoricalPointResponse(BaseModel):
    period: str
    quantity: float


class ForecastPointResponse(BaseModel):
    period: str
    forecast_qty: float
    confidence: float
    method: str


class DemandForecastResponse(BaseModel):
    item: ItemSummaryResponse
    historical_data: list[HistoricalPointResponse] = Field(default_factory=list)
    forecasts: list[ForecastPointResponse] = Field(default_factory=list)
    method: str
    window_size: int


class ReorderSummaryResponse(BaseModel):
    items_below_reorder: int
    pending_alerts: int
    acknowledged_alerts: int
    po_created_alerts: int
    auto_reorder_active: int


class CoverageItemResponse(BaseModel):
    item_id: str
    sku: str
    name: str
    current_stock: float
    reorder_level: float
    avg_daily_demand: float
    coverage_days: int


class ReorderReportResponse(BaseModel):
    summary: ReorderSummaryResponse
    items_below_reorder: list[ReorderSuggestionResponse] = Field(default_factory=list)
    stock_coverage: list[CoverageItemResponse] = Field(default_factory=list)


# --- System ---


class DatabaseHealthResponse(BaseModel):
    """Result of a round trip to the reorder database."""

    name: str
    available: bool
    latency_ms: float | None = None
    error: str | None = None


class HealthResponse(BaseModel):
    """Service status; ``database`` is only filled by the database probe."""

    status: str
    version: str
    uptime_seconds: float
    database: DatabaseHealthResponse | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. ALERT_NOT_FOUND)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)
