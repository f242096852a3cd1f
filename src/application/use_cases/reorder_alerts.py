"""Reorder alert use cases: list, acknowledge, resolve."""

from src.application.dto.requests import ListAlertsRequest
from src.application.dto.responses import AlertListResponse, PageMeta, ReorderAlertResponse
from src.application.use_cases.converters import alert_to_response
from src.core.entities.reorder import ReorderAlert
from src.core.services.alert_lifecycle import AlertLifecycleManager, AlertPage


class _AlertUseCase:
    def __init__(self, alert_manager: AlertLifecycleManager | None = None):
        self._manager = alert_manager

    async def _get_manager(self) -> AlertLifecycleManager:
        if self._manager is None:
            from src.application.services import get_alert_lifecycle_manager

            self._manager = await get_alert_lifecycle_manager()
        return self._manager

    def to_response(self, alert: ReorderAlert) -> ReorderAlertResponse:
        return alert_to_response(alert)


class ListReorderAlertsUseCase(_AlertUseCase):
    """Page through alerts, newest first."""

    async def execute(self, organization_id: str, request: ListAlertsRequest) -> AlertPage:
        manager = await self._get_manager()
        return await manager.list_alerts(
            organization_id,
            status=request.status,
            item_id=request.item_id,
            page=request.page,
            limit=request.limit,
        )

    def to_list_response(self, page: AlertPage) -> AlertListResponse:
        return AlertListResponse(
            data=[alert_to_response(a) for a in page.alerts],
            meta=PageMeta(
                page=page.page,
                limit=page.limit,
                total=page.total,
                total_pages=page.total_pages,
            ),
        )


class AcknowledgeAlertUseCase(_AlertUseCase):
    """PENDING -> ACKNOWLEDGED."""

    async def execute(self, organization_id: str, alert_id: str) -> ReorderAlert:
        manager = await self._get_manager()
        return await manager.acknowledge(organization_id, alert_id)


class ResolveAlertUseCase(_AlertUseCase):
    """Close an open alert without ordering."""

    async def execute(self, organization_id: str, alert_id: str) -> ReorderAlert:
        manager = await self._get_manager()
        return await manager.resolve(organization_id, alert_id)
