"""Reorder suggestion and reorder point check use cases."""

from src.application.dto.responses import ReorderCheckResponse, ReorderSuggestionResponse
from src.application.use_cases.converters import alert_to_response, suggestion_to_response
from src.core.entities.reorder import ReorderSuggestion
from src.core.services.alert_lifecycle import AlertLifecycleManager, ReorderCheckResult
from src.core.services.suggestion_calculator import SuggestionCalculator


class GetReorderSuggestionsUseCase:
    """List items at or below their reorder level, most depleted first."""

    def __init__(self, suggestion_calculator: SuggestionCalculator | None = None):
        self._calculator = suggestion_calculator

    async def _get_calculator(self) -> SuggestionCalculator:
        if self._calculator is None:
            from src.application.services import get_suggestion_calculator

            self._calculator = await get_suggestion_calculator()
        return self._calculator

    async def execute(self, organization_id: str) -> list[ReorderSuggestion]:
        calculator = await self._get_calculator()
        return await calculator.calculate(organization_id)

    def to_response(
        self, suggestions: list[ReorderSuggestion]
    ) -> list[ReorderSuggestionResponse]:
        return [suggestion_to_response(s) for s in suggestions]


class CheckReorderPointsUseCase:
    """Open a PENDING alert for every suggested item that has no open alert."""

    def __init__(self, alert_manager: AlertLifecycleManager | None = None):
        self._manager = alert_manager

    async def _get_manager(self) -> AlertLifecycleManager:
        if self._manager is None:
            from src.application.services import get_alert_lifecycle_manager

            self._manager = await get_alert_lifecycle_manager()
        return self._manager

    async def execute(self, organization_id: str) -> ReorderCheckResult:
        manager = await self._get_manager()
        return await manager.check_reorder_points(organization_id)

    def to_response(self, result: ReorderCheckResult) -> ReorderCheckResponse:
        return ReorderCheckResponse(
            checked=result.checked,
            new_alerts=result.new_alerts,
            alerts=[alert_to_response(a) for a in result.alerts],
        )
