"""Abstract interface for contact storage."""

from abc import ABC, abstractmethod

from src.core.entities.contact import Contact


class IContactStore(ABC):
    """Read access to customer and vendor contacts."""

    @abstractmethod
    async def get_contact(self, organization_id: str, contact_id: str) -> Contact | None:
        """Get contact by ID within the organization."""
        pass

    @abstractmethod
    async def get_vendor(self, organization_id: str, contact_id: str) -> Contact | None:
        """Get contact by ID only if it is tagged VENDOR or BOTH."""
        pass

    @abstractmethod
    async def get_contacts(
        self, organization_id: str, contact_ids: list[str]
    ) -> dict[str, Contact]:
        """Batch lookup, keyed by contact ID. Unknown IDs are omitted."""
        pass
