"""Abstract interface for sales history."""

from abc import ABC, abstractmethod
from datetime import date

from src.core.entities.forecast import SalesLine


class ISalesHistoryStore(ABC):
    """Read access to posted sales invoice lines."""

    @abstractmethod
    async def list_sales_lines(
        self, organization_id: str, item_id: str, since: date
    ) -> list[SalesLine]:
        """Lines for ``item_id`` on posted invoices dated on or after ``since``, oldest first."""
        pass

    @abstractmethod
    async def total_quantity_sold(
        self, organization_id: str, item_id: str, since: date
    ) -> float:
        """Sum of quantities for ``item_id`` on posted invoices since ``since``."""
        pass
