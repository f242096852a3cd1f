"""Reorder report use case."""

from datetime import date

from src.application.dto.responses import ReorderReportResponse
from src.core.entities.forecast import ReorderReport
from src.core.services.reorder_report import ReorderReportService


class GetReorderReportUseCase:
    """Summary counts, items below reorder and stock coverage."""

    def __init__(self, report_service: ReorderReportService | None = None):
        self._service = report_service

    async def _get_service(self) -> ReorderReportService:
        if self._service is None:
            from src.application.services import get_reorder_report_service

            self._service = await get_reorder_report_service()
        return self._service

    async def execute(self, organization_id: str, today: date | None = None) -> ReorderReport:
        service = await self._get_service()
        return await service.build(organization_id, today=today)

    def to_response(self, report: ReorderReport) -> ReorderReportResponse:
        return ReorderReportResponse.model_validate(report.model_dump(mode="json"))
