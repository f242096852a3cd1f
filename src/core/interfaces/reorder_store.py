"""Abstract interfaces for reorder settings and alert storage."""

from abc import ABC, abstractmethod

from src.core.entities.reorder import AlertStatus, ReorderAlert, ReorderSettings


class IReorderSettingsStore(ABC):
    """Persistence for per-item and per-warehouse reorder settings."""

    @abstractmethod
    async def list_for_item(
        self, organization_id: str, item_id: str, active_only: bool = False
    ) -> list[ReorderSettings]:
        """Settings rows for an item, item-wide row first, then by creation time."""
        pass

    @abstractmethod
    async def list_active(
        self, organization_id: str, item_ids: list[str] | None = None
    ) -> list[ReorderSettings]:
        """All active rows in the organization, same ordering per item."""
        pass

    @abstractmethod
    async def find(
        self, organization_id: str, item_id: str, warehouse_id: str | None
    ) -> ReorderSettings | None:
        """The row keyed by (item, warehouse); ``None`` warehouse is the item-wide row."""
        pass

    @abstractmethod
    async def create(self, settings: ReorderSettings) -> ReorderSettings:
        """Insert a new settings row."""
        pass

    @abstractmethod
    async def update(self, settings: ReorderSettings) -> ReorderSettings:
        """Overwrite an existing settings row."""
        pass

    @abstractmethod
    async def count_auto_reorder(self, organization_id: str) -> int:
        """Number of active rows with auto reorder enabled."""
        pass


class IReorderAlertStore(ABC):
    """Persistence for reorder alerts."""

    @abstractmethod
    async def get(self, organization_id: str, alert_id: str) -> ReorderAlert | None:
        """Get alert by ID within the organization."""
        pass

    @abstractmethod
    async def find_open(self, organization_id: str, item_id: str) -> ReorderAlert | None:
        """The PENDING or ACKNOWLEDGED alert for an item, if any."""
        pass

    @abstractmethod
    async def create_if_absent(self, alert: ReorderAlert) -> ReorderAlert | None:
        """Insert an open alert unless one already exists for the item.

        Returns ``None`` when the store rejected the insert as a duplicate.
        """
        pass

    @abstractmethod
    async def update_status(self, alert: ReorderAlert) -> ReorderAlert:
        """Persist ``status``, ``resolved_at`` and ``purchase_order_id``."""
        pass

    @abstractmethod
    async def list_alerts(
        self,
        organization_id: str,
        status: AlertStatus | None = None,
        item_id: str | None = None,
        limit: int = 25,
        offset: int = 0,
    ) -> list[ReorderAlert]:
        """List alerts newest first."""
        pass

    @abstractmethod
    async def count_alerts(
        self,
        organization_id: str,
        status: AlertStatus | None = None,
        item_id: str | None = None,
    ) -> int:
        """Count alerts matching the filters."""
        pass
