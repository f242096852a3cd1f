"""Tests for item, stock and contact entities."""

import pytest
from pydantic import ValidationError

from src.core.entities.contact import Contact, ContactType, VendorSummary
from src.core.entities.item import Item, ItemStatus, StockLevel, StockPosition


class TestItem:
    def test_defaults(self):
        item = Item(id="item-1", organization_id="org-1", sku="SKU-1", name="Widget")
        assert item.unit == "pcs"
        assert item.reorder_level == 0.0
        assert item.reorder_qty == 0.0
        assert item.track_inventory is True
        assert item.status == ItemStatus.ACTIVE


class TestStockLevel:
    def test_negative_on_hand_rejected(self):
        with pytest.raises(ValidationError):
            StockLevel(item_id="item-1", warehouse_id="wh-1", stock_on_hand=-1)


class TestStockPosition:
    def test_available_stock(self):
        position = StockPosition(item_id="item-1", stock_on_hand=10, committed_stock=4)
        assert position.available_stock == 6

    def test_available_stock_can_go_negative(self):
        position = StockPosition(item_id="item-1", stock_on_hand=2, committed_stock=5)
        assert position.available_stock == -3


class TestContact:
    @pytest.mark.parametrize(
        ("contact_type", "is_vendor"),
        [
            (ContactType.VENDOR, True),
            (ContactType.BOTH, True),
            (ContactType.CUSTOMER, False),
        ],
    )
    def test_is_vendor(self, contact_type, is_vendor):
        contact = Contact(
            id="c-1",
            organization_id="org-1",
            display_name="Acme",
            contact_type=contact_type,
        )
        assert contact.is_vendor is is_vendor

    def test_vendor_summary(self):
        contact = Contact(
            id="c-1",
            organization_id="org-1",
            display_name="Acme",
            company_name="Acme Supplies LLC",
        )
        summary = VendorSummary.from_contact(contact)
        assert summary.id == "c-1"
        assert summary.display_name == "Acme"
        assert summary.company_name == "Acme Supplies LLC"
