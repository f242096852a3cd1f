"""
Reorder alert lifecycle.

PENDING -> ACKNOWLEDGED -> RESOLVED | PO_CREATED, and PENDING may skip
straight to RESOLVED or PO_CREATED. RESOLVED and PO_CREATED are terminal.
An item has at most one open (PENDING or ACKNOWLEDGED) alert at a time.
"""

from dataclasses import dataclass, field
from datetime import datetime

from src.config import ReorderConfig, get_logger
from src.core.entities.reorder import AlertStatus, ReorderAlert, ReorderSuggestion
from src.core.exceptions import AlertNotFoundError, AlertTransitionError
from src.core.interfaces.reorder_store import IReorderAlertStore
from src.core.services.suggestion_calculator import SuggestionCalculator

logger = get_logger(__name__)


@dataclass
class ReorderCheckResult:
    """Outcome of a reorder point check."""

    checked: int = 0
    alerts: list[ReorderAlert] = field(default_factory=list)

    @property
    def new_alerts(self) -> int:
        return len(self.alerts)


@dataclass
class AlertPage:
    alerts: list[ReorderAlert]
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        return -(-self.total // self.limit) if self.limit else 0


def alert_from_suggestion(organization_id: str, suggestion: ReorderSuggestion) -> ReorderAlert:
    now = datetime.utcnow()
    return ReorderAlert(
        organization_id=organization_id,
        item_id=suggestion.item_id,
        warehouse_id=suggestion.low_stock_warehouse_id,
        current_stock=suggestion.current_stock,
        reorder_level=suggestion.reorder_level,
        suggested_qty=suggestion.suggested_qty,
        status=AlertStatus.PENDING,
        notified_at=now,
        created_at=now,
        updated_at=now,
    )


class AlertLifecycleManager:
    """Creates, deduplicates and transitions reorder alerts."""

    def __init__(
        self,
        alert_store: IReorderAlertStore,
        suggestion_calculator: SuggestionCalculator,
        config: ReorderConfig | None = None,
    ) -> None:
        self._alert_store = alert_store
        self._calculator = suggestion_calculator
        self._config = config or ReorderConfig()

    async def get_alert(self, organization_id: str, alert_id: str) -> ReorderAlert:
        alert = await self._alert_store.get(organization_id, alert_id)
        if alert is None:
            raise AlertNotFoundError(alert_id)
        return alert

    async def check_reorder_points(self, organization_id: str) -> ReorderCheckResult:
        """Open a PENDING alert for each suggested item lacking an open alert."""
        suggestions = await self._calculator.calculate(organization_id)
        result = ReorderCheckResult(checked=len(suggestions))

        for suggestion in suggestions:
            existing = await self._alert_store.find_open(organization_id, suggestion.item_id)
            if existing is not None:
                continue

            created = await self._alert_store.create_if_absent(
                alert_from_suggestion(organization_id, suggestion)
            )
            if created is None:
                # Another caller opened one between our check and insert
                logger.info(
                    "reorder_alert_duplicate_skipped",
                    item_id=suggestion.item_id,
                )
                continue
            result.alerts.append(created)

        logger.info(
            "reorder_check_complete",
            organization_id=organization_id,
            checked=result.checked,
            new_alerts=result.new_alerts,
        )
        return result

    async def list_alerts(
        self,
        organization_id: str,
        status: AlertStatus | None = None,
        item_id: str | None = None,
        page: int = 1,
        limit: int | None = None,
    ) -> AlertPage:
        """Newest first. ``limit`` defaults to the configured alert page size."""
        page = max(page, 1)
        limit = limit or self._config.alert_page_size
        alerts = await self._alert_store.list_alerts(
            organization_id,
            status=status,
            item_id=item_id,
            limit=limit,
            offset=(page - 1) * limit,
        )
        total = await self._alert_store.count_alerts(
            organization_id, status=status, item_id=item_id
        )
        return AlertPage(alerts=alerts, page=page, limit=limit, total=total)

    async def acknowledge(self, organization_id: str, alert_id: str) -> ReorderAlert:
        alert = await self.get_alert(organization_id, alert_id)
        if alert.status != AlertStatus.PENDING:
            raise AlertTransitionError(
                alert_id,
                alert.status.value,
                AlertStatus.ACKNOWLEDGED.value,
                message="Only pending alerts can be acknowledged",
            )
        alert.status = AlertStatus.ACKNOWLEDGED
        alert.updated_at = datetime.utcnow()
        saved = await self._alert_store.update_status(alert)
        logger.info("reorder_alert_acknowledged", alert_id=alert_id)
        return saved

    async def resolve(self, organization_id: str, alert_id: str) -> ReorderAlert:
        alert = await self.get_alert(organization_id, alert_id)
        if not alert.status.can_transition_to(AlertStatus.RESOLVED):
            raise AlertTransitionError(
                alert_id,
                alert.status.value,
                AlertStatus.RESOLVED.value,
                message="Only open alerts can be resolved",
            )
        now = datetime.utcnow()
        alert.status = AlertStatus.RESOLVED
        alert.resolved_at = now
        alert.updated_at = now
        saved = await self._alert_store.update_status(alert)
        logger.info("reorder_alert_resolved", alert_id=alert_id)
        return saved
