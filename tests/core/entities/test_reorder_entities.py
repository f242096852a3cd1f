"""Tests for reorder entities."""

import pytest
from pydantic import ValidationError

from src.core.entities.item import StockLevel
from src.core.entities.reorder import (
    AlertStatus,
    ExplicitSettings,
    ItemDefaultSettings,
    ReorderAlert,
    ReorderSettings,
    ReorderSettingsUpdate,
    ReorderSuggestion,
)


def _suggestion(levels: list[StockLevel], reorder_level: float = 10) -> ReorderSuggestion:
    return ReorderSuggestion(
        item_id="item-1",
        sku="SKU-1",
        name="Widget",
        unit="pcs",
        current_stock=sum(level.stock_on_hand for level in levels),
        available_stock=sum(level.stock_on_hand for level in levels),
        reorder_level=reorder_level,
        suggested_qty=20,
        cost_price=1.5,
        estimated_cost=30,
        stock_levels=levels,
    )


class TestReorderSettings:
    """Tests for ReorderSettings entity."""

    def test_defaults(self):
        settings = ReorderSettings(organization_id="org-1", item_id="item-1")
        assert settings.id is None
        assert settings.warehouse_id is None
        assert settings.reorder_level == 0.0
        assert settings.reorder_quantity == 0.0
        assert settings.auto_reorder is False
        assert settings.is_active is True

    def test_negative_lead_time_rejected(self):
        with pytest.raises(ValidationError):
            ReorderSettings(organization_id="org-1", item_id="item-1", lead_time_days=-1)


class TestReorderSettingsUpdate:
    """Tests for partial settings updates."""

    def test_changes_only_include_sent_fields(self):
        update = ReorderSettingsUpdate(reorder_level=5)
        assert update.changes() == {"reorder_level": 5}

    def test_changes_exclude_warehouse_key(self):
        update = ReorderSettingsUpdate(warehouse_id="wh-1", reorder_quantity=40)
        assert update.changes() == {"reorder_quantity": 40}

    def test_explicit_null_vendor_clears(self):
        update = ReorderSettingsUpdate(preferred_vendor_id=None)
        assert update.changes() == {"preferred_vendor_id": None}

    def test_explicit_null_level_ignored(self):
        update = ReorderSettingsUpdate(reorder_level=None)
        assert update.changes() == {}

    def test_apply_to_keeps_unsent_fields(self):
        existing = ReorderSettings(
            id="s-1",
            organization_id="org-1",
            item_id="item-1",
            reorder_level=10,
            reorder_quantity=50,
            preferred_vendor_id="vendor-1",
        )
        updated = ReorderSettingsUpdate(reorder_level=15).apply_to(existing)
        assert updated.id == "s-1"
        assert updated.reorder_level == 15
        assert updated.reorder_quantity == 50
        assert updated.preferred_vendor_id == "vendor-1"
        assert updated.updated_at >= existing.updated_at
        # Original is untouched
        assert existing.reorder_level == 10

    def test_negative_level_rejected(self):
        with pytest.raises(ValidationError):
            ReorderSettingsUpdate(reorder_level=-1)


class TestEffectiveSettings:
    def test_explicit_reads_row(self):
        row = ReorderSettings(
            organization_id="org-1",
            item_id="item-1",
            reorder_level=8,
            reorder_quantity=30,
            preferred_vendor_id="vendor-1",
        )
        effective = ExplicitSettings(settings=row)
        assert effective.source == "explicit"
        assert effective.reorder_level == 8
        assert effective.reorder_quantity == 30
        assert effective.preferred_vendor_id == "vendor-1"

    def test_item_default_has_no_vendor(self):
        effective = ItemDefaultSettings(reorder_level=4, reorder_quantity=12)
        assert effective.source == "item_default"
        assert effective.preferred_vendor_id is None


class TestReorderSuggestion:
    def test_low_stock_warehouse_is_first_at_or_below_level(self):
        suggestion = _suggestion(
            [
                StockLevel(item_id="item-1", warehouse_id="wh-a", stock_on_hand=12),
                StockLevel(item_id="item-1", warehouse_id="wh-b", stock_on_hand=3),
            ]
        )
        assert suggestion.low_stock_warehouse_id == "wh-b"

    def test_low_stock_warehouse_falls_back_to_first(self):
        suggestion = _suggestion(
            [
                StockLevel(item_id="item-1", warehouse_id="wh-a", stock_on_hand=30),
                StockLevel(item_id="item-1", warehouse_id="wh-b", stock_on_hand=20),
            ]
        )
        assert suggestion.low_stock_warehouse_id == "wh-a"

    def test_low_stock_warehouse_empty_without_levels(self):
        assert _suggestion([]).low_stock_warehouse_id == ""


class TestAlertStatus:
    def test_open_statuses(self):
        assert AlertStatus.PENDING.is_open
        assert AlertStatus.ACKNOWLEDGED.is_open
        assert AlertStatus.RESOLVED.is_terminal
        assert AlertStatus.PO_CREATED.is_terminal

    @pytest.mark.parametrize(
        ("current", "target", "allowed"),
        [
            (AlertStatus.PENDING, AlertStatus.ACKNOWLEDGED, True),
            (AlertStatus.PENDING, AlertStatus.RESOLVED, True),
            (AlertStatus.PENDING, AlertStatus.PO_CREATED, True),
            (AlertStatus.ACKNOWLEDGED, AlertStatus.RESOLVED, True),
            (AlertStatus.ACKNOWLEDGED, AlertStatus.PO_CREATED, True),
            (AlertStatus.ACKNOWLEDGED, AlertStatus.PENDING, False),
            (AlertStatus.RESOLVED, AlertStatus.PENDING, False),
            (AlertStatus.PO_CREATED, AlertStatus.RESOLVED, False),
        ],
    )
    def test_transitions(self, current, target, allowed):
        assert current.can_transition_to(target) is allowed


class TestReorderAlert:
    def test_defaults(self):
        alert = ReorderAlert(
            organization_id="org-1",
            item_id="item-1",
            current_stock=2,
            reorder_level=10,
            suggested_qty=20,
        )
        assert alert.status == AlertStatus.PENDING
        assert alert.warehouse_id == ""
        assert alert.resolved_at is None
        assert alert.purchase_order_id is None
