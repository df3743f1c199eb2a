"""
Domain exceptions for the Flip Cam application.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class FlipCamError(Exception):
    """Base exception for all Flip Cam errors."""

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
            "error": self.message,
            "code": self.code,
        }


# Authentication
class UnauthenticatedError(FlipCamError):
    """No valid session accompanied the request."""

    def __init__(self, reason: str = "Not authenticated"):
        super().__init__(reason, code="UNAUTHENTICATED")


class InvalidSessionError(FlipCamError):
    """A session payload could not be verified."""

    def __init__(self, reason: str):
        super().__init__(reason, code="INVALID_SESSION")


# Input
class InvalidInputError(FlipCamError):
    """Missing, malformed, or out-of-enumeration request fields."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(
            message,
            code="INVALID_INPUT",
            details={"field": field} if field else None,
        )


# Lookups
class NotFoundError(FlipCamError):
    """Identifier does not resolve to a visible row."""

    pass


class MovementNotFoundError(NotFoundError):
    """Movement not found or not visible to the actor."""

    def __init__(self, movement_id: str):
        super().__init__(
            "Movimiento no encontrado",
            code="MOVEMENT_NOT_FOUND",
            details={"movement_id": movement_id},
        )


class InventoryItemNotFoundError(NotFoundError):
    """Inventory item not found or not visible to the actor."""

    def __init__(self, item_id: str):
        super().__init__(
            "Item no encontrado",
            code="INVENTORY_ITEM_NOT_FOUND",
            details={"item_id": item_id},
        )


# Store
class UpstreamError(FlipCamError):
    """Base exception for store-level failures."""

    pass


class DatabaseError(UpstreamError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


class WriteRejectedError(UpstreamError):
    """The store refused a movement write."""

    def __init__(self, message: str):
        super().__init__(message, code="WRITE_REJECTED")


class KpiUnavailableError(UpstreamError):
    """The KPI aggregate could not be read."""

    def __init__(self, reason: str = "KPI aggregate unavailable"):
        super().__init__(reason, code="KPI_UNAVAILABLE")
