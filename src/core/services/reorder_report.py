"""Reorder report: alert counts, items below reorder level, stock coverage."""

from datetime import date

from src.config import ReorderConfig, get_logger
from src.core.entities.forecast import CoverageItem, ReorderReport, ReorderSummary
from src.core.entities.reorder import AlertStatus
from src.core.interfaces.reorder_store import IReorderAlertStore, IReorderSettingsStore
from src.core.services.demand_forecaster import (
    DemandForecaster,
    coverage_days,
    round_half_up,
)
from src.core.services.suggestion_calculator import SuggestionCalculator

logger = get_logger(__name__)


class ReorderReportService:
    """Aggregates reorder state for reporting screens."""

    def __init__(
        self,
        suggestion_calculator: SuggestionCalculator,
        alert_store: IReorderAlertStore,
        settings_store: IReorderSettingsStore,
        forecaster: DemandForecaster,
        config: ReorderConfig | None = None,
    ) -> None:
        self._calculator = suggestion_calculator
        self._alert_store = alert_store
        self._settings_store = settings_store
        self._forecaster = forecaster
        self._config = config or ReorderConfig()

    async def build(self, organization_id: str, today: date | None = None) -> ReorderReport:
        suggestions = await self._calculator.calculate(organization_id)

        summary = ReorderSummary(
            items_below_reorder=len(suggestions),
            pending_alerts=await self._alert_store.count_alerts(
                organization_id, status=AlertStatus.PENDING
            ),
            acknowledged_alerts=await self._alert_store.count_alerts(
                organization_id, status=AlertStatus.ACKNOWLEDGED
            ),
            po_created_alerts=await self._alert_store.count_alerts(
                organization_id, status=AlertStatus.PO_CREATED
            ),
            auto_reorder_active=await self._settings_store.count_auto_reorder(organization_id),
        )

        coverage = []
        for suggestion in suggestions[: self._config.coverage_sample_size]:
            avg_daily = await self._forecaster.average_daily_demand(
                organization_id, suggestion.item_id, today=today
            )
            coverage.append(
                CoverageItem(
                    item_id=suggestion.item_id,
                    sku=suggestion.sku,
                    name=suggestion.name,
                    current_stock=suggestion.current_stock,
                    reorder_level=suggestion.reorder_level,
                    avg_daily_demand=round_half_up(avg_daily, 2),
                    coverage_days=coverage_days(
                        suggestion.current_stock,
                        avg_daily,
                        self._config.coverage_sentinel_days,
                    ),
                )
            )

        logger.info(
            "reorder_report_built",
            organization_id=organization_id,
            items_below_reorder=summary.items_below_reorder,
            coverage_rows=len(coverage),
        )
        return ReorderReport(
            summary=summary,
            items_below_reorder=suggestions,
            stock_coverage=coverage,
        )
