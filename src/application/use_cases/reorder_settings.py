"""Reorder settings use cases: read, upsert and bulk upsert."""

from src.application.dto.requests import BulkReorderSettingsRequest, ReorderSettingsRequest
from src.application.dto.responses import (
    BulkReorderSettingsResponse,
    ItemReorderSettingsResponse,
    ItemSummaryResponse,
    ReorderSettingsResponse,
)
from src.application.use_cases.converters import (
    effective_to_response,
    settings_to_response,
)
from src.config import get_logger
from src.core.entities.reorder import ReorderSettings
from src.core.services.settings_resolver import ItemReorderSettings, SettingsResolver

logger = get_logger(__name__)


class _SettingsUseCase:
    def __init__(self, settings_resolver: SettingsResolver | None = None):
        self._resolver = settings_resolver

    async def _get_resolver(self) -> SettingsResolver:
        if self._resolver is None:
            from src.application.services import get_settings_resolver

            self._resolver = await get_settings_resolver()
        return self._resolver


class GetReorderSettingsUseCase(_SettingsUseCase):
    """Item summary, its settings rows and the settings in effect."""

    async def execute(self, organization_id: str, item_id: str) -> ItemReorderSettings:
        resolver = await self._get_resolver()
        return await resolver.get_settings(organization_id, item_id)

    def to_response(self, result: ItemReorderSettings) -> ItemReorderSettingsResponse:
        return ItemReorderSettingsResponse(
            item=ItemSummaryResponse(
                id=result.item.id,
                sku=result.item.sku,
                name=result.item.name,
            ),
            settings=[settings_to_response(row) for row in result.settings],
            effective=effective_to_response(result.effective),
        )


class UpdateReorderSettingsUseCase(_SettingsUseCase):
    """Create or update the settings row keyed by (item, warehouse)."""

    async def execute(
        self,
        organization_id: str,
        item_id: str,
        request: ReorderSettingsRequest,
    ) -> ReorderSettings:
        resolver = await self._get_resolver()
        return await resolver.update_settings(organization_id, item_id, request.to_update())

    def to_response(self, result: ReorderSettings) -> ReorderSettingsResponse:
        return settings_to_response(result)


class BulkUpdateReorderSettingsUseCase(_SettingsUseCase):
    """Apply several settings updates in request order."""

    async def execute(
        self,
        organization_id: str,
        request: BulkReorderSettingsRequest,
    ) -> list[ReorderSettings]:
        resolver = await self._get_resolver()
        results = await resolver.bulk_update(
            organization_id,
            [(entry.item_id, entry.to_update()) for entry in request.items],
        )
        logger.info(
            "reorder_settings_bulk_updated",
            organization_id=organization_id,
            updated=len(results),
        )
        return results

    def to_response(self, results: list[ReorderSettings]) -> BulkReorderSettingsResponse:
        return BulkReorderSettingsResponse(
            updated=len(results),
            results=[settings_to_response(row) for row in results],
        )
