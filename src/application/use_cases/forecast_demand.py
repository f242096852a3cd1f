"""Demand forecast use case."""

from datetime import date

from src.application.dto.responses import DemandForecastResponse
from src.core.entities.forecast import DemandForecast
from src.core.exceptions import ItemNotFoundError
from src.core.interfaces.inventory_store import IInventoryStore
from src.core.services.demand_forecaster import DemandForecaster


class ForecastDemandUseCase:
    """Moving-average forecast of an item's monthly demand."""

    def __init__(
        self,
        forecaster: DemandForecaster | None = None,
        inventory_store: IInventoryStore | None = None,
    ):
        self._forecaster = forecaster
        self._inventory_store = inventory_store

    async def _get_forecaster(self) -> DemandForecaster:
        if self._forecaster is None:
            from src.application.services import get_demand_forecaster

            self._forecaster = await get_demand_forecaster()
        return self._forecaster

    async def _get_inventory_store(self) -> IInventoryStore:
        if self._inventory_store is None:
            from src.infrastructure.storage.sqlite import get_inventory_store

            self._inventory_store = await get_inventory_store()
        return self._inventory_store

    async def execute(
        self,
        organization_id: str,
        item_id: str,
        periods: int | None = None,
        today: date | None = None,
    ) -> DemandForecast:
        inventory_store = await self._get_inventory_store()
        item = await inventory_store.get_item(organization_id, item_id)
        if item is None:
            raise ItemNotFoundError(item_id)

        forecaster = await self._get_forecaster()
        return await forecaster.forecast(organization_id, item, periods=periods, today=today)

    def to_response(self, forecast: DemandForecast) -> DemandForecastResponse:
        return DemandForecastResponse.model_validate(forecast.model_dump(mode="json"))
