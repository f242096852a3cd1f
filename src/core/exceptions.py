"""
Domain exceptions for the reorder service.

NotFound and InvalidState errors are surfaced to callers verbatim and are
never retried. Storage errors propagate unchanged from the store layer.
"""

from typing import Any


class RestockError(Exception):
    """Base exception for all reorder service errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Not Found
class NotFoundError(RestockError):
    """Requested record is absent or outside the caller's organization."""

    pass


class ItemNotFoundError(NotFoundError):
    """Item not found in the organization."""

    def __init__(self, item_id: str):
        super().__init__(
            "Item not found",
            code="ITEM_NOT_FOUND",
            details={"item_id": item_id},
        )


class AlertNotFoundError(NotFoundError):
    """Reorder alert not found in the organization."""

    def __init__(self, alert_id: str):
        super().__init__(
            "Alert not found",
            code="ALERT_NOT_FOUND",
            details={"alert_id": alert_id},
        )


class VendorNotFoundError(NotFoundError):
    """Vendor contact missing or not tagged as a vendor."""

    def __init__(self, vendor_id: str):
        super().__init__(
            "Vendor not found",
            code="VENDOR_NOT_FOUND",
            details={"vendor_id": vendor_id},
        )


# Invalid State
class InvalidStateError(RestockError):
    """Operation is not legal for the record's current state."""

    pass


class AlertTransitionError(InvalidStateError):
    """Alert cannot move from its current status to the requested one."""

    def __init__(self, alert_id: str, current: str, target: str, message: str | None = None):
        super().__init__(
            message or f"Cannot move alert from {current} to {target}",
            code="INVALID_ALERT_TRANSITION",
            details={"alert_id": alert_id, "current": current, "target": target},
        )


class AlertClosedError(InvalidStateError):
    """Alert is already resolved or already fulfilled by a purchase order."""

    def __init__(self, alert_id: str, status: str):
        super().__init__(
            "Alert is already resolved or has a PO",
            code="ALERT_CLOSED",
            details={"alert_id": alert_id, "status": status},
        )


class MissingVendorError(InvalidStateError):
    """No vendor could be resolved for a purchase order."""

    def __init__(self, item_id: str):
        super().__init__(
            "No vendor specified. Set a preferred vendor in reorder settings or provide one.",
            code="MISSING_VENDOR",
            details={"item_id": item_id},
        )


# Storage Exceptions
class StorageError(RestockError):
    """Base exception for storage operations."""

    pass


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


# Validation Exceptions
class ValidationError(RestockError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )


class ConfigurationError(RestockError):
    """Configuration error."""

    pass
