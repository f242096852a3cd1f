"""Application use cases."""

from src.application.use_cases.create_reorder_po import (
    BulkCreatePOUseCase,
    CreateReorderPOUseCase,
)
from src.application.use_cases.forecast_demand import ForecastDemandUseCase
from src.application.use_cases.reorder_alerts import (
    AcknowledgeAlertUseCase,
    ListReorderAlertsUseCase,
    ResolveAlertUseCase,
)
from src.application.use_cases.reorder_report import GetReorderReportUseCase
from src.application.use_cases.reorder_settings import (
    BulkUpdateReorderSettingsUseCase,
    GetReorderSettingsUseCase,
    UpdateReorderSettingsUseCase,
)
from src.application.use_cases.reorder_suggestions import (
    CheckReorderPointsUseCase,
    GetReorderSuggestionsUseCase,
)

__all__ = [
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
]
