"""Abstract interface for purchase order storage."""

from abc import ABC, abstractmethod

from src.core.entities.purchase_order import PurchaseOrder


class IPurchaseOrderStore(ABC):
    """Persistence for purchase orders and their numbering sequence."""

    @abstractmethod
    async def get_order(
        self, organization_id: str, order_id: str
    ) -> PurchaseOrder | None:
        """Get purchase order with its lines."""
        pass

    @abstractmethod
    async def create_for_alert(
        self, order: PurchaseOrder, alert_id: str
    ) -> PurchaseOrder:
        """Create a purchase order and mark the alert PO_CREATED as one unit.

        Allocates the next order number, inserts the order with its lines and
        links the alert. Either all of it commits or none of it does. Raises
        ``AlertClosedError`` if the alert is no longer open at commit time.
        """
        pass
