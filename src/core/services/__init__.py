"""Core domain services."""

from src.core.services.alert_lifecycle import (
    AlertLifecycleManager,
    AlertPage,
    ReorderCheckResult,
)
from src.core.services.auto_po_generator import (
    AutoPOGenerator,
    BulkPOItemResult,
    BulkPOResult,
    POOverrides,
)
from src.core.services.demand_forecaster import DemandForecaster, coverage_days
from src.core.services.reorder_report import ReorderReportService
from src.core.services.settings_resolver import (
    ItemReorderSettings,
    SettingsResolver,
    resolve_effective_settings,
)
from src.core.services.stock_aggregator import StockAggregator, summarize_stock
from src.core.services.suggestion_calculator import SuggestionCalculator

__all__ = [
    "StockAggregator",
    "summarize_stock",
    "SettingsResolver",
    "ItemReorderSettings",
    "resolve_effective_settings",
    "SuggestionCalculator",
    "AlertLifecycleManager",
    "AlertPage",
    "ReorderCheckResult",
    "DemandForecaster",
    "coverage_days",
    "AutoPOGenerator",
    "BulkPOResult",
    "BulkPOItemResult",
    "POOverrides",
    "ReorderReportService",
]
