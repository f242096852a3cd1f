"""Tests for demand forecast and reorder report use cases."""

from datetime import date
from unittest.mock import AsyncMock

import pytest

from src.application.use_cases.forecast_demand import ForecastDemandUseCase
from src.application.use_cases.reorder_report import GetReorderReportUseCase
from src.core.entities.forecast import (
    CoverageItem,
    DemandForecast,
    ForecastPoint,
    HistoricalPoint,
    ItemSummary,
    ReorderReport,
    ReorderSummary,
)
from src.core.entities.item import Item
from src.core.exceptions import ItemNotFoundError


@pytest.fixture
def mock_inventory_store():
    store = AsyncMock()
    store.get_item.return_value = Item(
        id="item-1", organization_id="org-1", sku="SKU-1", name="Widget"
    )
    return store


@pytest.fixture
def mock_forecaster():
    forecaster = AsyncMock()
    forecaster.forecast.return_value = DemandForecast(
        item=ItemSummary(id="item-1", sku="SKU-1", name="Widget"),
        historical_data=[
            HistoricalPoint(period="2024-04", quantity=100),
            HistoricalPoint(period="2024-05", quantity=140),
        ],
        forecasts=[ForecastPoint(period="2024-07", forecast_qty=120, confidence=0.6)],
        window_size=2,
    )
    return forecaster


class TestForecastDemandUseCase:
    async def test_forecast(self, mock_forecaster, mock_inventory_store):
        use_case = ForecastDemandUseCase(
            forecaster=mock_forecaster, inventory_store=mock_inventory_store
        )

        forecast = await use_case.execute(
            "org-1", "item-1", periods=1, today=date(2024, 6, 15)
        )
        response = use_case.to_response(forecast)

        item = mock_forecaster.forecast.await_args.args[1]
        assert item.id == "item-1"
        assert mock_forecaster.forecast.await_args.kwargs == {
            "periods": 1,
            "today": date(2024, 6, 15),
        }
        assert response.method == "MOVING_AVERAGE"
        assert response.window_size == 2
        assert response.forecasts[0].forecast_qty == 120
        assert response.historical_data[1].quantity == 140

    async def test_unknown_item(self, mock_forecaster, mock_inventory_store):
        mock_inventory_store.get_item.return_value = None
        use_case = ForecastDemandUseCase(
            forecaster=mock_forecaster, inventory_store=mock_inventory_store
        )

        with pytest.raises(ItemNotFoundError):
            await use_case.execute("org-1", "missing")
        mock_forecaster.forecast.assert_not_awaited()


class TestGetReorderReportUseCase:
    async def test_report_response(self):
        service = AsyncMock()
        service.build.return_value = ReorderReport(
            summary=ReorderSummary(items_below_reorder=1, pending_alerts=2),
            stock_coverage=[
                CoverageItem(
                    item_id="item-1",
                    sku="SKU-1",
                    name="Widget",
                    current_stock=10,
                    reorder_level=12,
                    avg_daily_demand=0,
                    coverage_days=999,
                )
            ],
        )
        use_case = GetReorderReportUseCase(report_service=service)

        response = use_case.to_response(await use_case.execute("org-1"))

        service.build.assert_awaited_once_with("org-1", today=None)
        assert response.summary.items_below_reorder == 1
        assert response.summary.pending_alerts == 2
        assert response.stock_coverage[0].coverage_days == 999
