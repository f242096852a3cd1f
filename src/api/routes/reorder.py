"""Reorder automation endpoints: settings, suggestions, alerts, auto POs, forecasts."""

from fastapi import APIRouter, Body, Depends, Query, status

from src.api.dependencies import (
    get_acknowledge_alert_use_case,
    get_bulk_create_po_use_case,
    get_bulk_reorder_settings_use_case,
    get_check_reorder_use_case,
    get_create_reorder_po_use_case,
    get_forecast_demand_use_case,
    get_list_alerts_use_case,
    get_organization_id,
    get_reorder_settings_use_case,
    get_reorder_suggestions_use_case,
    get_resolve_alert_use_case,
    get_update_reorder_settings_use_case,
    get_user_id,
)
from src.application.dto.requests import (
    BulkCreatePORequest,
    BulkReorderSettingsRequest,
    CreateReorderPORequest,
    ListAlertsRequest,
    ReorderSettingsRequest,
)
from src.application.dto.responses import (
    AlertListResponse,
    BulkPOResponse,
    BulkReorderSettingsResponse,
    DemandForecastResponse,
    ErrorResponse,
    ItemReorderSettingsResponse,
    PurchaseOrderResponse,
    ReorderAlertResponse,
    ReorderCheckResponse,
    ReorderSettingsResponse,
    ReorderSuggestionResponse,
)
from src.application.use_cases import (
    AcknowledgeAlertUseCase,
    BulkCreatePOUseCase,
    BulkUpdateReorderSettingsUseCase,
    CheckReorderPointsUseCase,
    CreateReorderPOUseCase,
    ForecastDemandUseCase,
    GetReorderSettingsUseCase,
    GetReorderSuggestionsUseCase,
    ListReorderAlertsUseCase,
    ResolveAlertUseCase,
    UpdateReorderSettingsUseCase,
)
from src.core.entities.reorder import AlertStatus

router = APIRouter(prefix="/api/inventory", tags=["reorder"])


# --- Settings ---


@router.put(
    "/reorder-settings/bulk",
    response_model=BulkReorderSettingsResponse,
    responses={404: {"model": ErrorResponse}},
)
async def bulk_update_reorder_settings(
    request: BulkReorderSettingsRequest,
    organization_id: str = Depends(get_organization_id),
    use_case: BulkUpdateReorderSettingsUseCase = Depends(get_bulk_reorder_settings_use_case),
) -> BulkReorderSettingsResponse:
    """Create or update settings for several items in order."""
    results = await use_case.execute(organization_id, request)
    return use_case.to_response(results)


@router.get(
    "/reorder-settings/{item_id}",
    response_model=ItemReorderSettingsResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_reorder_settings(
    item_id: str,
    organization_id: str = Depends(get_organization_id),
    use_case: GetReorderSettingsUseCase = Depends(get_reorder_settings_use_case),
) -> ItemReorderSettingsResponse:
    """Item summary, its settings rows and the settings currently in effect."""
    result = await use_case.execute(organization_id, item_id)
    return use_case.to_response(result)


@router.put(
    "/reorder-settings/{item_id}",
    response_model=ReorderSettingsResponse,
    responses={404: {"model": ErrorResponse}},
)
async def update_reorder_settings(
    item_id: str,
    request: ReorderSettingsRequest,
    organization_id: str = Depends(get_organization_id),
    use_case: UpdateReorderSettingsUseCase = Depends(get_update_reorder_settings_use_case),
) -> ReorderSettingsResponse:
    """Create or partially update the settings row for (item, warehouse)."""
    result = await use_case.execute(organization_id, item_id, request)
    return use_case.to_response(result)


# --- Suggestions and checks ---


@router.get("/reorder-suggestions", response_model=list[ReorderSuggestionResponse])
async def get_reorder_suggestions(
    organization_id: str = Depends(get_organization_id),
    use_case: GetReorderSuggestionsUseCase = Depends(get_reorder_suggestions_use_case),
) -> list[ReorderSuggestionResponse]:
    """Items at or below their reorder level, most depleted first."""
    suggestions = await use_case.execute(organization_id)
    return use_case.to_response(suggestions)


@router.post("/check-reorder", response_model=ReorderCheckResponse)
async def check_reorder_points(
    organization_id: str = Depends(get_organization_id),
    use_case: CheckReorderPointsUseCase = Depends(get_check_reorder_use_case),
) -> ReorderCheckResponse:
    """Open PENDING alerts for suggested items without an open alert."""
    result = await use_case.execute(organization_id)
    return use_case.to_response(result)


# --- Purchase orders ---


@router.post(
    "/auto-reorder/{alert_id}",
    response_model=PurchaseOrderResponse,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def create_reorder_po(
    alert_id: str,
    request: CreateReorderPORequest | None = Body(default=None),
    organization_id: str = Depends(get_organization_id),
    user_id: str | None = Depends(get_user_id),
    use_case: CreateReorderPOUseCase = Depends(get_create_reorder_po_use_case),
) -> PurchaseOrderResponse:
    """Create a draft purchase order from an open alert."""
    order = await use_case.execute(organization_id, alert_id, user_id, request)
    return use_case.to_response(order)


@router.post(
    "/bulk-po",
    response_model=BulkPOResponse,
    status_code=status.HTTP_201_CREATED,
)
async def bulk_create_pos(
    request: BulkCreatePORequest,
    organization_id: str = Depends(get_organization_id),
    user_id: str | None = Depends(get_user_id),
    use_case: BulkCreatePOUseCase = Depends(get_bulk_create_po_use_case),
) -> BulkPOResponse:
    """Create draft POs for several alerts; failures are reported per alert."""
    result = await use_case.execute(organization_id, request, user_id)
    return use_case.to_response(result)


# --- Alerts ---


@router.get("/reorder-alerts", response_model=AlertListResponse)
async def list_reorder_alerts(
    alert_status: AlertStatus | None = Query(default=None, alias="status"),
    item_id: str | None = Query(default=None, alias="itemId"),
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1, le=100),
    organization_id: str = Depends(get_organization_id),
    use_case: ListReorderAlertsUseCase = Depends(get_list_alerts_use_case),
) -> AlertListResponse:
    """Alerts newest first, with paging metadata."""
    result = await use_case.execute(
        organization_id,
        ListAlertsRequest(status=alert_status, item_id=item_id, page=page, limit=limit),
    )
    return use_case.to_list_response(result)


@router.put(
    "/reorder-alerts/{alert_id}/acknowledge",
    response_model=ReorderAlertResponse,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def acknowledge_alert(
    alert_id: str,
    organization_id: str = Depends(get_organization_id),
    use_case: AcknowledgeAlertUseCase = Depends(get_acknowledge_alert_use_case),
) -> ReorderAlertResponse:
    """Move a PENDING alert to ACKNOWLEDGED."""
    alert = await use_case.execute(organization_id, alert_id)
    return use_case.to_response(alert)


@router.put(
    "/reorder-alerts/{alert_id}/resolve",
    response_model=ReorderAlertResponse,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def resolve_alert(
    alert_id: str,
    organization_id: str = Depends(get_organization_id),
    use_case: ResolveAlertUseCase = Depends(get_resolve_alert_use_case),
) -> ReorderAlertResponse:
    """Close an open alert without creating a purchase order."""
    alert = await use_case.execute(organization_id, alert_id)
    return use_case.to_response(alert)


# --- Forecast ---


@router.get(
    "/demand-forecast/{item_id}",
    response_model=DemandForecastResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def demand_forecast(
    item_id: str,
    periods: int | None = Query(default=None, description="Months to forecast (default 3)"),
    organization_id: str = Depends(get_organization_id),
    use_case: ForecastDemandUseCase = Depends(get_forecast_demand_use_case),
) -> DemandForecastResponse:
    """Monthly sales history and a moving-average forecast."""
    forecast = await use_case.execute(organization_id, item_id, periods=periods)
    return use_case.to_response(forecast)
