"""Tests for SQLiteInventoryStore."""

import pytest

from src.core.entities.item import ItemStatus
from src.infrastructure.storage.sqlite.inventory_store import SQLiteInventoryStore

ORG = "org-1"
OTHER_ORG = "org-2"


@pytest.fixture
def store(catalog) -> SQLiteInventoryStore:
    return SQLiteInventoryStore()


@pytest.fixture
async def stock(seed, catalog):
    rows = [
        ("item-a", "wh-2", 5, 1),
        ("item-a", "wh-1", 3, 0),
        ("item-b", "wh-1", 8, 2),
        ("item-x", "wh-1", 40, 0),
    ]
    for row in rows:
        await seed(
            """
            INSERT INTO stock_levels (item_id, warehouse_id, stock_on_hand, committed_stock)
            VALUES (?, ?, ?, ?)
            """,
            row,
        )


class TestGetItem:
    async def test_found(self, store):
        item = await store.get_item(ORG, "item-a")

        assert item is not None
        assert item.sku == "SKU-A"
        assert item.cost_price == 2.0
        assert item.reorder_level == 5
        assert item.reorder_qty == 20
        assert item.track_inventory is True
        assert item.status == ItemStatus.ACTIVE

    async def test_scoped_to_organization(self, store):
        assert await store.get_item(ORG, "item-x") is None
        assert await store.get_item(OTHER_ORG, "item-x") is not None

    async def test_missing(self, store):
        assert await store.get_item(ORG, "nope") is None


class TestListTrackedItems:
    async def test_active_tracked_by_sku(self, store):
        items = await store.list_tracked_items(ORG)

        # item-c is untracked and item-d inactive
        assert [i.sku for i in items] == ["SKU-A", "SKU-B"]

    async def test_filter_by_ids(self, store):
        items = await store.list_tracked_items(ORG, ["item-b", "item-c", "item-x"])

        assert [i.id for i in items] == ["item-b"]

    async def test_empty_filter(self, store):
        assert await store.list_tracked_items(ORG, []) == []


class TestListStockLevels:
    async def test_joined_warehouse_details(self, store, stock):
        levels = await store.list_stock_levels(ORG)

        assert [(s.item_id, s.warehouse_id) for s in levels] == [
            ("item-a", "wh-2"),
            ("item-a", "wh-1"),
            ("item-b", "wh-1"),
        ]
        assert levels[0].warehouse_name == "Overflow"
        assert levels[0].warehouse_code == "OVF"
        assert levels[0].stock_on_hand == 5
        assert levels[0].committed_stock == 1

    async def test_filter_by_ids(self, store, stock):
        levels = await store.list_stock_levels(ORG, ["item-b"])

        assert len(levels) == 1
        assert levels[0].stock_on_hand == 8

    async def test_other_organization(self, store, stock):
        levels = await store.list_stock_levels(OTHER_ORG)

        assert [s.item_id for s in levels] == ["item-x"]

    async def test_empty_filter(self, store, stock):
        assert await store.list_stock_levels(ORG, []) == []


class TestGetWarehouse:
    async def test_found(self, store):
        warehouse = await store.get_warehouse(ORG, "wh-1")

        assert warehouse is not None
        assert warehouse.name == "Main"
        assert warehouse.code == "MAIN"

    async def test_scoped_to_organization(self, store):
        assert await store.get_warehouse(OTHER_ORG, "wh-1") is None
