"""Reporting endpoints."""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_organization_id, get_reorder_report_use_case
from src.application.dto.responses import ReorderReportResponse
from src.application.use_cases import GetReorderReportUseCase

router = APIRouter(prefix="/api/reports", tags=["reports"])


@router.get("/reorder", response_model=ReorderReportResponse)
async def reorder_report(
    organization_id: str = Depends(get_organization_id),
    use_case: GetReorderReportUseCase = Depends(get_reorder_report_use_case),
) -> ReorderReportResponse:
    """Alert counts, items below reorder level and stock coverage."""
    report = await use_case.execute(organization_id)
    return use_case.to_response(report)
