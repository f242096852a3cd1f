"""
Dependency injection container for FastAPI.

Provides request identity and use case instances to route handlers.
"""

from functools import lru_cache

from fastapi import Header

from src.application.use_cases import (
    AcknowledgeAlertUseCase,
    BulkCreatePOUseCase,
    BulkUpdateReorderSettingsUseCase,
    CheckReorderPointsUseCase,
    CreateReorderPOUseCase,
    ForecastDemandUseCase,
    GetReorderReportUseCase,
    GetReorderSettingsUseCase,
    GetReorderSuggestionsUseCase,
    ListReorderAlertsUseCase,
    ResolveAlertUseCase,
    UpdateReorderSettingsUseCase,
)
from src.config import Settings, get_settings


@lru_cache
def get_app_settings() -> Settings:
    """Get cached application settings."""
    return get_settings()


# Request identity. Authentication happens upstream of this service.
async def get_organization_id(
    x_organization_id: str = Header(..., alias="X-Organization-Id"),
) -> str:
    """Organization the request is scoped to."""
    return x_organization_id


async def get_user_id(
    x_user_id: str | None = Header(default=None, alias="X-User-Id"),
) -> str | None:
    """Acting user, recorded on created purchase orders."""
    return x_user_id


# Use case dependencies
def get_reorder_settings_use_case() -> GetReorderSettingsUseCase:
    return GetReorderSettingsUseCase()


def get_update_reorder_settings_use_case() -> UpdateReorderSettingsUseCase:
    return UpdateReorderSettingsUseCase()


def get_bulk_reorder_settings_use_case() -> BulkUpdateReorderSettingsUseCase:
    return BulkUpdateReorderSettingsUseCase()


def get_reorder_suggestions_use_case() -> GetReorderSuggestionsUseCase:
    return GetReorderSuggestionsUseCase()


def get_check_reorder_use_case() -> CheckReorderPointsUseCase:
    return CheckReorderPointsUseCase()


def get_list_alerts_use_case() -> ListReorderAlertsUseCase:
    return ListReorderAlertsUseCase()


def get_acknowledge_alert_use_case() -> AcknowledgeAlertUseCase:
    return AcknowledgeAlertUseCase()


def get_resolve_alert_use_case() -> ResolveAlertUseCase:
    return ResolveAlertUseCase()


def get_create_reorder_po_use_case() -> CreateReorderPOUseCase:
    return CreateReorderPOUseCase()


def get_bulk_create_po_use_case() -> BulkCreatePOUseCase:
    return BulkCreatePOUseCase()


def get_forecast_demand_use_case() -> ForecastDemandUseCase:
    return ForecastDemandUseCase()


def get_reorder_report_use_case() -> GetReorderReportUseCase:
    return GetReorderReportUseCase()
