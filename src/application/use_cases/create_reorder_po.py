"""Create draft purchase orders from reorder alerts."""

from src.application.dto.requests import BulkCreatePORequest, CreateReorderPORequest
from src.application.dto.responses import (
    BulkPOItemResponse,
    BulkPOResponse,
    PurchaseOrderResponse,
)
from src.application.use_cases.converters import order_to_response
from src.config import get_logger
from src.core.entities.purchase_order import PurchaseOrder
from src.core.services.auto_po_generator import AutoPOGenerator, BulkPOResult, POOverrides

logger = get_logger(__name__)


class _POUseCase:
    def __init__(self, po_generator: AutoPOGenerator | None = None):
        self._generator = po_generator

    async def _get_generator(self) -> AutoPOGenerator:
        if self._generator is None:
            from src.application.services import get_auto_po_generator

            self._generator = await get_auto_po_generator()
        return self._generator


class CreateReorderPOUseCase(_POUseCase):
    """One alert, one draft PO."""

    async def execute(
        self,
        organization_id: str,
        alert_id: str,
        user_id: str | None = None,
        request: CreateReorderPORequest | None = None,
    ) -> PurchaseOrder:
        request = request or CreateReorderPORequest()
        logger.info(
            "create_reorder_po_started",
            alert_id=alert_id,
            vendor_override=request.vendor_id is not None,
        )
        generator = await self._get_generator()
        return await generator.create_auto_reorder_po(
            organization_id,
            alert_id,
            user_id=user_id,
            overrides=POOverrides(
                vendor_id=request.vendor_id,
                warehouse_id=request.warehouse_id,
            ),
        )

    def to_response(self, order: PurchaseOrder) -> PurchaseOrderResponse:
        return order_to_response(order)


class BulkCreatePOUseCase(_POUseCase):
    """Draft POs for many alerts; per-alert failures are reported, not raised."""

    async def execute(
        self,
        organization_id: str,
        request: BulkCreatePORequest,
        user_id: str | None = None,
    ) -> BulkPOResult:
        generator = await self._get_generator()
        return await generator.bulk_create_pos(organization_id, request.alert_ids, user_id)

    def to_response(self, result: BulkPOResult) -> BulkPOResponse:
        def item(r) -> BulkPOItemResponse:
            return BulkPOItemResponse(
                alert_id=r.alert_id,
                success=r.success,
                purchase_order_id=r.purchase_order_id,
                error=r.error,
            )

        return BulkPOResponse(
            created=result.created,
            failed=result.failed,
            results=[item(r) for r in result.results],
            errors=[item(r) for r in result.errors],
        )
