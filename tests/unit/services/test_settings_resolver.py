"""Tests for reorder settings resolution and upserts."""

from unittest.mock import AsyncMock

import pytest

from src.core.entities.reorder import (
    ExplicitSettings,
    ItemDefaultSettings,
    ReorderSettingsUpdate,
)
from src.core.exceptions import ItemNotFoundError
from src.core.services.settings_resolver import SettingsResolver, resolve_effective_settings


class TestResolveEffectiveSettings:
    def test_item_defaults_when_no_rows(self, make_item):
        item = make_item(reorder_level=5, reorder_qty=25)

        effective = resolve_effective_settings(item, [])

        assert isinstance(effective, ItemDefaultSettings)
        assert effective.reorder_level == 5
        assert effective.reorder_quantity == 25
        assert effective.preferred_vendor_id is None

    def test_first_active_row_wins(self, make_item, make_settings):
        item = make_item(reorder_level=5)
        rows = [
            make_settings(reorder_level=10, is_active=False),
            make_settings(reorder_level=20, preferred_vendor_id="vendor-1"),
            make_settings(reorder_level=30, warehouse_id="wh-2"),
        ]

        effective = resolve_effective_settings(item, rows)

        assert isinstance(effective, ExplicitSettings)
        assert effective.reorder_level == 20
        assert effective.preferred_vendor_id == "vendor-1"

    def test_inactive_rows_fall_back_to_item(self, make_item, make_settings):
        item = make_item(reorder_level=7, reorder_qty=0)

        effective = resolve_effective_settings(
            item, [make_settings(reorder_level=99, is_active=False)]
        )

        assert effective.source == "item_default"
        assert effective.reorder_level == 7

    def test_warehouse_filter(self, make_item, make_settings):
        item = make_item()
        rows = [
            make_settings(reorder_level=10),
            make_settings(reorder_level=30, warehouse_id="wh-2"),
        ]

        effective = resolve_effective_settings(item, rows, warehouse_id="wh-2")

        assert effective.reorder_level == 30

    def test_warehouse_lookup_skips_item_wide_row(self, make_item, make_settings):
        item = make_item(reorder_level=4, reorder_qty=12)
        rows = [
            make_settings(reorder_level=10),
            make_settings(reorder_level=30, warehouse_id="wh-2"),
        ]

        effective = resolve_effective_settings(item, rows, warehouse_id="wh-1")

        assert isinstance(effective, ItemDefaultSettings)
        assert effective.reorder_level == 4
        assert effective.reorder_quantity == 12

    def test_rows_for_other_items_ignored(self, make_item, make_settings):
        item = make_item("item-1", reorder_level=3)

        effective = resolve_effective_settings(item, [make_settings("item-2", reorder_level=50)])

        assert effective.source == "item_default"


@pytest.fixture
def stores(make_item):
    settings_store = AsyncMock()
    inventory_store = AsyncMock()
    inventory_store.get_item.return_value = make_item(reorder_level=5)
    settings_store.list_for_item.return_value = []
    settings_store.find.return_value = None
    settings_store.create.side_effect = lambda settings: settings
    settings_store.update.side_effect = lambda settings: settings
    return settings_store, inventory_store


class TestSettingsResolver:
    async def test_get_settings_unknown_item(self, stores):
        settings_store, inventory_store = stores
        inventory_store.get_item.return_value = None
        resolver = SettingsResolver(settings_store, inventory_store)

        with pytest.raises(ItemNotFoundError):
            await resolver.get_settings("org-1", "missing")

    async def test_get_settings_returns_rows_and_effective(self, stores, make_settings):
        settings_store, inventory_store = stores
        row = make_settings(reorder_level=12)
        settings_store.list_for_item.return_value = [row]
        resolver = SettingsResolver(settings_store, inventory_store)

        result = await resolver.get_settings("org-1", "item-1")

        assert result.item.id == "item-1"
        assert result.settings == [row]
        assert result.effective.source == "explicit"
        assert result.effective.reorder_level == 12

    async def test_resolve_reads_active_rows_only(self, stores):
        settings_store, inventory_store = stores
        resolver = SettingsResolver(settings_store, inventory_store)

        effective = await resolver.resolve("org-1", "item-1")

        settings_store.list_for_item.assert_awaited_once_with(
            "org-1", "item-1", active_only=True
        )
        assert effective.reorder_level == 5

    async def test_update_creates_row_with_defaults(self, stores):
        settings_store, inventory_store = stores
        resolver = SettingsResolver(settings_store, inventory_store)

        saved = await resolver.update_settings(
            "org-1", "item-1", ReorderSettingsUpdate(reorder_level=10)
        )

        settings_store.create.assert_awaited_once()
        settings_store.update.assert_not_awaited()
        assert saved.reorder_level == 10
        assert saved.reorder_quantity == 0
        assert saved.is_active is True
        assert saved.warehouse_id is None

    async def test_update_existing_row_keeps_unsent_fields(self, stores, make_settings):
        settings_store, inventory_store = stores
        settings_store.find.return_value = make_settings(
            id="s-1", reorder_level=10, reorder_quantity=40, preferred_vendor_id="vendor-1"
        )
        resolver = SettingsResolver(settings_store, inventory_store)

        saved = await resolver.update_settings(
            "org-1", "item-1", ReorderSettingsUpdate(reorder_quantity=60)
        )

        settings_store.create.assert_not_awaited()
        assert saved.id == "s-1"
        assert saved.reorder_level == 10
        assert saved.reorder_quantity == 60
        assert saved.preferred_vendor_id == "vendor-1"

    async def test_update_looks_up_by_warehouse(self, stores):
        settings_store, inventory_store = stores
        resolver = SettingsResolver(settings_store, inventory_store)

        await resolver.update_settings(
            "org-1", "item-1", ReorderSettingsUpdate(warehouse_id="wh-2", reorder_level=1)
        )

        settings_store.find.assert_awaited_once_with("org-1", "item-1", "wh-2")

    async def test_update_unknown_item(self, stores):
        settings_store, inventory_store = stores
        inventory_store.get_item.return_value = None
        resolver = SettingsResolver(settings_store, inventory_store)

        with pytest.raises(ItemNotFoundError):
            await resolver.update_settings("org-1", "nope", ReorderSettingsUpdate())
        settings_store.create.assert_not_awaited()

    async def test_bulk_update_in_order(self, stores):
        settings_store, inventory_store = stores
        resolver = SettingsResolver(settings_store, inventory_store)

        results = await resolver.bulk_update(
            "org-1",
            [
                ("item-1", ReorderSettingsUpdate(reorder_level=1)),
                ("item-2", ReorderSettingsUpdate(reorder_level=2)),
            ],
        )

        assert [r.item_id for r in results] == ["item-1", "item-2"]
        assert [r.reorder_level for r in results] == [1, 2]

    async def test_bulk_update_stops_at_first_failure(self, stores, make_item):
        settings_store, inventory_store = stores
        inventory_store.get_item.side_effect = [make_item("item-1"), None, make_item("item-3")]
        resolver = SettingsResolver(settings_store, inventory_store)

        with pytest.raises(ItemNotFoundError):
            await resolver.bulk_update(
                "org-1",
                [
                    ("item-1", ReorderSettingsUpdate(reorder_level=1)),
                    ("item-2", ReorderSettingsUpdate(reorder_level=2)),
                    ("item-3", ReorderSettingsUpdate(reorder_level=3)),
                ],
            )
        assert settings_store.create.await_count == 1
