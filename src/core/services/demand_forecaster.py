"""
Demand forecasting from sales history.

Moving average over the most recent months of history. Every future period
gets the same projected quantity, so trends and seasonality are ignored.
"""

import calendar
from collections import defaultdict
from collections.abc import Iterable
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal

from src.config import ReorderConfig, get_logger
from src.core.entities.forecast import (
    MOVING_AVERAGE,
    DemandForecast,
    ForecastPoint,
    HistoricalPoint,
    ItemSummary,
    SalesLine,
)
from src.core.entities.item import Item
from src.core.exceptions import ValidationError
from src.core.interfaces.sales_store import ISalesHistoryStore

logger = get_logger(__name__)

MIN_HISTORY_MONTHS = 2


def round_half_up(value: float, places: int = 0) -> float:
    """Round like a cashier: 2.5 -> 3, 0.125 -> 0.13 at two places."""
    exponent = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(exponent, rounding=ROUND_HALF_UP))


def shift_months(day: date, months: int) -> date:
    """Move ``day`` by whole months, clamping to the target month's length."""
    index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def period_label(day: date) -> str:
    return f"{day.year:04d}-{day.month:02d}"


def group_by_month(lines: Iterable[SalesLine]) -> list[HistoricalPoint]:
    """Sum quantities per calendar month, oldest month first."""
    totals: dict[str, float] = defaultdict(float)
    for line in lines:
        totals[period_label(line.sale_date)] += line.quantity
    return [
        HistoricalPoint(period=period, quantity=quantity)
        for period, quantity in sorted(totals.items())
    ]


def forecast_confidence(months_observed: int) -> float:
    # Placeholder heuristic: more months of history reads as more confidence
    return round(min(0.95, 0.5 + 0.05 * months_observed), 2)


def moving_average_forecast(
    history: list[HistoricalPoint],
    periods: int,
    today: date,
    window: int = 3,
) -> tuple[list[ForecastPoint], int]:
    """
    Project ``periods`` months after ``today``'s month.

    Returns:
        The forecast points and the window size actually used. No points are
        produced with fewer than two months of history.
    """
    window_size = min(window, len(history))
    if len(history) < MIN_HISTORY_MONTHS:
        return [], window_size

    recent = history[-window_size:]
    average = sum(point.quantity for point in recent) / window_size
    forecast_qty = round_half_up(average, 2)
    confidence = forecast_confidence(len(history))

    first_of_month = today.replace(day=1)
    points = [
        ForecastPoint(
            period=period_label(shift_months(first_of_month, offset)),
            forecast_qty=forecast_qty,
            confidence=confidence,
            method=MOVING_AVERAGE,
        )
        for offset in range(1, periods + 1)
    ]
    return points, window_size


def coverage_days(
    current_stock: float,
    avg_daily_demand: float,
    sentinel_days: int = 999,
) -> int:
    """Days current stock lasts at ``avg_daily_demand``.

    ``sentinel_days`` stands for "very long" when there is stock but no demand.
    """
    if avg_daily_demand > 0:
        return int(round_half_up(current_stock / avg_daily_demand))
    return sentinel_days if current_stock > 0 else 0


class DemandForecaster:
    """Builds forecasts and demand rates from an item's sales history."""

    def __init__(
        self,
        sales_store: ISalesHistoryStore,
        config: ReorderConfig | None = None,
    ) -> None:
        self._sales_store = sales_store
        self._config = config or ReorderConfig()

    async def forecast(
        self,
        organization_id: str,
        item: Item,
        periods: int | None = None,
        today: date | None = None,
    ) -> DemandForecast:
        today = today or date.today()
        periods = periods if periods is not None else self._config.default_forecast_periods
        if periods < 1:
            raise ValidationError("periods", "must be at least 1", periods)
        since = shift_months(today, -self._config.forecast_history_months)

        lines = await self._sales_store.list_sales_lines(organization_id, item.id, since)
        history = group_by_month(lines)
        forecasts, window_size = moving_average_forecast(
            history, periods, today, window=self._config.forecast_window
        )

        logger.info(
            "demand_forecast_built",
            item_id=item.id,
            history_months=len(history),
            forecast_periods=len(forecasts),
        )
        return DemandForecast(
            item=ItemSummary(id=item.id, sku=item.sku, name=item.name),
            historical_data=history,
            forecasts=forecasts,
            method=MOVING_AVERAGE,
            window_size=window_size,
        )

    async def average_daily_demand(
        self,
        organization_id: str,
        item_id: str,
        today: date | None = None,
    ) -> float:
        """Units sold per day over the configured trailing window."""
        today = today or date.today()
        days = self._config.coverage_lookback_days
        total = await self._sales_store.total_quantity_sold(
            organization_id, item_id, today - timedelta(days=days)
        )
        return total / days
