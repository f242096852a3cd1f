"""Entity factories for service tests.

Services are exercised against AsyncMock stores; these fixtures build the
entities those mocks return.
"""

from datetime import datetime, timedelta

import pytest

from src.core.entities.contact import Contact, ContactType
from src.core.entities.item import Item, StockLevel
from src.core.entities.reorder import AlertStatus, ReorderAlert, ReorderSettings

ORG = "org-1"


@pytest.fixture
def make_item():
    def _make(item_id: str = "item-1", sku: str | None = None, **kwargs) -> Item:
        return Item(
            id=item_id,
            organization_id=ORG,
            sku=sku or f"SKU-{item_id}",
            name=kwargs.pop("name", f"Item {item_id}"),
            **kwargs,
        )

    return _make


@pytest.fixture
def make_level():
    def _make(
        item_id: str = "item-1",
        warehouse_id: str = "wh-1",
        on_hand: float = 0,
        committed: float = 0,
    ) -> StockLevel:
        return StockLevel(
            item_id=item_id,
            warehouse_id=warehouse_id,
            stock_on_hand=on_hand,
            committed_stock=committed,
        )

    return _make


@pytest.fixture
def make_settings():
    counter = iter(range(1, 1000))
    base = datetime(2024, 1, 1)

    def _make(item_id: str = "item-1", **kwargs) -> ReorderSettings:
        n = next(counter)
        kwargs.setdefault("created_at", base + timedelta(minutes=n))
        return ReorderSettings(
            id=kwargs.pop("id", f"settings-{n}"),
            organization_id=ORG,
            item_id=item_id,
            **kwargs,
        )

    return _make


@pytest.fixture
def make_alert():
    def _make(
        alert_id: str = "alert-1",
        item_id: str = "item-1",
        status: AlertStatus = AlertStatus.PENDING,
        **kwargs,
    ) -> ReorderAlert:
        return ReorderAlert(
            id=alert_id,
            organization_id=ORG,
            item_id=item_id,
            warehouse_id=kwargs.pop("warehouse_id", "wh-1"),
            current_stock=kwargs.pop("current_stock", 2),
            reorder_level=kwargs.pop("reorder_level", 10),
            suggested_qty=kwargs.pop("suggested_qty", 20),
            status=status,
            **kwargs,
        )

    return _make


@pytest.fixture
def vendor() -> Contact:
    return Contact(
        id="vendor-1",
        organization_id=ORG,
        display_name="Acme Supply",
        company_name="Acme Supply LLC",
        contact_type=ContactType.VENDOR,
    )
