"""Contact entities (customers and vendors)."""

from enum import Enum

from pydantic import BaseModel


class ContactType(str, Enum):
    """Role a contact plays for the organization."""

    CUSTOMER = "CUSTOMER"
    VENDOR = "VENDOR"
    BOTH = "BOTH"


class Contact(BaseModel):
    """A customer or vendor record."""

    id: str
    organization_id: str
    display_name: str
    company_name: str | None = None
    contact_type: ContactType = ContactType.VENDOR
    is_active: bool = True

    @property
    def is_vendor(self) -> bool:
        return self.contact_type in (ContactType.VENDOR, ContactType.BOTH)


class VendorSummary(BaseModel):
    """Vendor fields shown alongside suggestions and orders."""

    id: str
    display_name: str
    company_name: str | None = None

    @classmethod
    def from_contact(cls, contact: Contact) -> "VendorSummary":
        return cls(
            id=contact.id,
            display_name=contact.display_name,
            company_name=contact.company_name,
        )
