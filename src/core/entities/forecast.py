"""Sales history, demand forecast and reorder report entities."""

from datetime import date

from pydantic import BaseModel, Field

from src.core.entities.reorder import ReorderSuggestion

MOVING_AVERAGE = "MOVING_AVERAGE"


class SalesLine(BaseModel):
    """Quantity of an item sold on a posted (non-void, non-draft) invoice."""

    item_id: str
    sale_date: date
    quantity: float


class ItemSummary(BaseModel):
    id: str
    sku: str
    name: str


class HistoricalPoint(BaseModel):
    """Units sold in one calendar month (``YYYY-MM``)."""

    period: str
    quantity: float


class ForecastPoint(BaseModel):
    """Projected demand for one future calendar month.

    ``confidence`` is a placeholder heuristic that grows with the amount of
    history observed. It is not a validated statistical interval.
    """

    period: str
    forecast_qty: float
    confidence: float
    method: str = MOVING_AVERAGE


class DemandForecast(BaseModel):
    item: ItemSummary
    historical_data: list[HistoricalPoint] = Field(default_factory=list)
    forecasts: list[ForecastPoint] = Field(default_factory=list)
    method: str = MOVING_AVERAGE
    window_size: int = 0


class CoverageItem(BaseModel):
    """How many days current stock lasts at recent average demand."""

    item_id: str
    sku: str
    name: str
    current_stock: float
    reorder_level: float
    avg_daily_demand: float
    coverage_days: int


class ReorderSummary(BaseModel):
    items_below_reorder: int = 0
    pending_alerts: int = 0
    acknowledged_alerts: int = 0
    po_created_alerts: int = 0
    auto_reorder_active: int = 0


class ReorderReport(BaseModel):
    summary: ReorderSummary
    items_below_reorder: list[ReorderSuggestion] = Field(default_factory=list)
    stock_coverage: list[CoverageItem] = Field(default_factory=list)
