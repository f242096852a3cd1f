"""Tests for StockAggregator."""

from unittest.mock import AsyncMock

from src.core.services.stock_aggregator import StockAggregator, summarize_stock


class TestSummarizeStock:
    def test_sums_across_warehouses(self, make_level):
        positions = summarize_stock(
            [
                make_level("item-1", "wh-1", on_hand=5, committed=1),
                make_level("item-1", "wh-2", on_hand=7, committed=2),
                make_level("item-2", "wh-1", on_hand=3),
            ]
        )
        assert set(positions) == {"item-1", "item-2"}
        assert positions["item-1"].stock_on_hand == 12
        assert positions["item-1"].committed_stock == 3
        assert positions["item-1"].available_stock == 9
        assert positions["item-2"].stock_on_hand == 3

    def test_keeps_breakdown_in_input_order(self, make_level):
        positions = summarize_stock(
            [
                make_level("item-1", "wh-b", on_hand=1),
                make_level("item-1", "wh-a", on_hand=2),
            ]
        )
        assert [lvl.warehouse_id for lvl in positions["item-1"].levels] == ["wh-b", "wh-a"]

    def test_empty(self):
        assert summarize_stock([]) == {}


class TestStockAggregator:
    async def test_aggregate_passes_filter(self, make_level):
        store = AsyncMock()
        store.list_stock_levels.return_value = [make_level("item-1", on_hand=4)]

        positions = await StockAggregator(store).aggregate("org-1", item_ids=["item-1"])

        store.list_stock_levels.assert_awaited_once_with("org-1", item_ids=["item-1"])
        assert positions["item-1"].stock_on_hand == 4

    async def test_item_without_stock_rows_is_zero(self):
        store = AsyncMock()
        store.list_stock_levels.return_value = []

        position = await StockAggregator(store).position_for("org-1", "item-9")

        assert position.item_id == "item-9"
        assert position.stock_on_hand == 0
        assert position.committed_stock == 0
        assert position.levels == []
