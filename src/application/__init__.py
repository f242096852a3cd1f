"""
Application layer - Use cases, DTOs, and service factories.

This layer orchestrates business logic by:
1. Defining request/response DTOs for API contracts
2. Implementing use cases that coordinate core services
3. Providing factory functions for dependency injection

Use cases are the only entry point for API handlers.
"""

from src.application.services import (
    get_alert_lifecycle_manager,
    get_auto_po_generator,
    get_demand_forecaster,
    get_reorder_report_service,
    get_settings_resolver,
    get_stock_aggregator,
    get_suggestion_calculator,
    reset_services,
)
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

__all__ = [
    # Use Cases
    "GetReorderSettingsUseCase",
    "UpdateReorderSettingsUseCase",
    "BulkUpdateReorderSettingsUseCase",
    "GetReorderSuggestionsUseCase",
    "CheckReorderPointsUseCase",
    "ListReorderAlertsUseCase",
    "AcknowledgeAlertUseCase",
    "ResolveAlertUseCase",
    "CreateReorderPOUseCase",
    "BulkCreatePOUseCase",
    "ForecastDemandUseCase",
    "GetReorderReportUseCase",
    # Service factories
    "get_stock_aggregator",
    "get_settings_resolver",
    "get_suggestion_calculator",
    "get_alert_lifecycle_manager",
    "get_demand_forecaster",
    "get_auto_po_generator",
    "get_reorder_report_service",
    "reset_services",
]
