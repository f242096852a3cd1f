"""
Converts reorder alerts into draft purchase orders.

The store commits the order, its number and the alert link together, so a
failure at any point leaves neither a half-written order nor a consumed
order number.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from src.config import get_logger
from src.core.entities.purchase_order import (
    PurchaseOrder,
    PurchaseOrderItem,
    PurchaseOrderStatus,
)
from src.core.entities.reorder import ReorderAlert
from src.core.exceptions import (
    AlertClosedError,
    AlertNotFoundError,
    ItemNotFoundError,
    MissingVendorError,
    RestockError,
    VendorNotFoundError,
)
from src.core.interfaces.contact_store import IContactStore
from src.core.interfaces.inventory_store import IInventoryStore
from src.core.interfaces.purchase_order_store import IPurchaseOrderStore
from src.core.interfaces.reorder_store import IReorderAlertStore
from src.core.services.settings_resolver import SettingsResolver

logger = get_logger(__name__)


@dataclass
class POOverrides:
    """Caller-supplied replacements for the resolved vendor and warehouse."""

    vendor_id: str | None = None
    warehouse_id: str | None = None


@dataclass
class BulkPOItemResult:
    alert_id: str
    success: bool
    purchase_order_id: str | None = None
    error: str | None = None


@dataclass
class BulkPOResult:
    """Per-alert outcomes of a bulk run. Failures never abort the batch."""

    results: list[BulkPOItemResult] = field(default_factory=list)
    errors: list[BulkPOItemResult] = field(default_factory=list)

    @property
    def created(self) -> int:
        return len(self.results)

    @property
    def failed(self) -> int:
        return len(self.errors)


class AutoPOGenerator:
    """Builds and persists draft purchase orders for reorder alerts."""

    def __init__(
        self,
        alert_store: IReorderAlertStore,
        inventory_store: IInventoryStore,
        contact_store: IContactStore,
        purchase_order_store: IPurchaseOrderStore,
        settings_resolver: SettingsResolver,
    ) -> None:
        self._alert_store = alert_store
        self._inventory_store = inventory_store
        self._contact_store = contact_store
        self._po_store = purchase_order_store
        self._settings_resolver = settings_resolver

    async def _load_open_alert(self, organization_id: str, alert_id: str) -> ReorderAlert:
        alert = await self._alert_store.get(organization_id, alert_id)
        if alert is None:
            raise AlertNotFoundError(alert_id)
        if alert.status.is_terminal:
            raise AlertClosedError(alert_id, alert.status.value)
        return alert

    async def _resolve_vendor_id(
        self,
        organization_id: str,
        alert: ReorderAlert,
        override_vendor_id: str | None,
    ) -> str:
        vendor_id = override_vendor_id
        if not vendor_id:
            effective = await self._settings_resolver.resolve(organization_id, alert.item_id)
            vendor_id = effective.preferred_vendor_id
        if not vendor_id:
            raise MissingVendorError(alert.item_id)

        # Vendor role is checked, the contact's active flag is not
        vendor = await self._contact_store.get_vendor(organization_id, vendor_id)
        if vendor is None:
            raise VendorNotFoundError(vendor_id)
        return vendor.id

    async def create_auto_reorder_po(
        self,
        organization_id: str,
        alert_id: str,
        user_id: str | None = None,
        overrides: POOverrides | None = None,
    ) -> PurchaseOrder:
        """Create a draft PO for one alert and mark the alert PO_CREATED."""
        overrides = overrides or POOverrides()

        alert = await self._load_open_alert(organization_id, alert_id)

        item = await self._inventory_store.get_item(organization_id, alert.item_id)
        if item is None:
            raise ItemNotFoundError(alert.item_id)

        vendor_id = await self._resolve_vendor_id(
            organization_id, alert, overrides.vendor_id
        )

        order = PurchaseOrder(
            organization_id=organization_id,
            vendor_id=vendor_id,
            warehouse_id=overrides.warehouse_id or alert.warehouse_id or None,
            status=PurchaseOrderStatus.DRAFT,
            notes=f"Auto-generated from reorder alert for {item.sku}",
            created_by_id=user_id,
            items=[
                PurchaseOrderItem(
                    item_id=item.id,
                    description=item.name,
                    quantity=alert.suggested_qty,
                    unit=item.unit,
                    unit_price=item.cost_price,
                )
            ],
        )

        created = await self._po_store.create_for_alert(order, alert.id or alert_id)

        logger.info(
            "auto_po_created",
            alert_id=alert_id,
            purchase_order_id=created.id,
            order_number=created.order_number,
            vendor_id=vendor_id,
            total=created.total,
        )
        return created

    async def bulk_create_pos(
        self,
        organization_id: str,
        alert_ids: Sequence[str],
        user_id: str | None = None,
    ) -> BulkPOResult:
        """
        Run each alert through the single-alert path independently.

        A failure on one alert is recorded with its message and the batch
        moves on; orders already created stay committed.
        """
        outcome = BulkPOResult()

        for alert_id in alert_ids:
            try:
                po = await self.create_auto_reorder_po(organization_id, alert_id, user_id)
            except RestockError as e:
                logger.warning(
                    "bulk_po_item_failed",
                    alert_id=alert_id,
                    error_code=e.code,
                    error=e.message,
                )
                outcome.errors.append(
                    BulkPOItemResult(alert_id=alert_id, success=False, error=e.message)
                )
                continue
            except Exception as e:
                logger.exception("bulk_po_item_failed", alert_id=alert_id, error=str(e))
                outcome.errors.append(
                    BulkPOItemResult(alert_id=alert_id, success=False, error=str(e))
                )
                continue

            outcome.results.append(
                BulkPOItemResult(alert_id=alert_id, success=True, purchase_order_id=po.id)
            )

        logger.info(
            "bulk_po_complete",
            organization_id=organization_id,
            created=outcome.created,
            failed=outcome.failed,
        )
        return outcome
