"""Data Transfer Objects for API layer.

Request DTOs: Validate and parse incoming API requests.
Response DTOs: Structure and serialize API responses.

These are the ONLY contracts between API handlers and use cases.
"""

from src.application.dto.requests import (
    BulkCreatePORequest,
    BulkReorderSettingsEntry,
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
    HealthResponse,
    ItemReorderSettingsResponse,
    PurchaseOrderResponse,
    ReorderAlertResponse,
    ReorderCheckResponse,
    ReorderReportResponse,
    ReorderSettingsResponse,
    ReorderSuggestionResponse,
)

__all__ = [
    # Requests
    "ReorderSettingsRequest",
    "BulkReorderSettingsEntry",
    "BulkReorderSettingsRequest",
    "CreateReorderPORequest",
    "BulkCreatePORequest",
    "ListAlertsRequest",
    # Responses
    "ItemReorderSettingsResponse",
    "ReorderSettingsResponse",
    "BulkReorderSettingsResponse",
    "ReorderSuggestionResponse",
    "ReorderCheckResponse",
    "ReorderAlertResponse",
    "AlertListResponse",
    "PurchaseOrderResponse",
    "BulkPOResponse",
    "DemandForecastResponse",
    "ReorderReportResponse",
    "HealthResponse",
    "ErrorResponse",
]
