"""Entity to response DTO conversions shared by the reorder use cases."""

from src.application.dto.responses import (
    EffectiveSettingsResponse,
    PurchaseOrderResponse,
    ReorderAlertResponse,
    ReorderSettingsResponse,
    ReorderSuggestionResponse,
)
from src.core.entities.purchase_order import PurchaseOrder
from src.core.entities.reorder import (
    EffectiveSettings,
    ReorderAlert,
    ReorderSettings,
    ReorderSuggestion,
)


def settings_to_response(settings: ReorderSettings) -> ReorderSettingsResponse:
    return ReorderSettingsResponse.model_validate(settings.model_dump(mode="json"))


def effective_to_response(effective: EffectiveSettings) -> EffectiveSettingsResponse:
    return EffectiveSettingsResponse(
        source=effective.source,
        reorder_level=effective.reorder_level,
        reorder_quantity=effective.reorder_quantity,
        preferred_vendor_id=effective.preferred_vendor_id,
    )


def suggestion_to_response(suggestion: ReorderSuggestion) -> ReorderSuggestionResponse:
    return ReorderSuggestionResponse.model_validate(suggestion.model_dump(mode="json"))


def alert_to_response(alert: ReorderAlert) -> ReorderAlertResponse:
    return ReorderAlertResponse.model_validate(alert.model_dump(mode="json"))


def order_to_response(order: PurchaseOrder) -> PurchaseOrderResponse:
    return PurchaseOrderResponse.model_validate(order.model_dump(mode="json"))
