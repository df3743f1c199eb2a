"""Data transfer objects for the API boundary."""

from flipcam.application.dto.requests import (
    AuthEventRequest,
    CreateInventoryItemRequest,
    CreateMovementRequest,
    DeleteRequest,
    SessionPayload,
    UpdateInventoryItemRequest,
    UpdateMovementRequest,
)
from flipcam.application.dto.responses import (
    DataResponse,
    DeleteResponse,
    ErrorResponse,
    HealthResponse,
    InventoryItemResponse,
    KpiSnapshotResponse,
    MovementResponse,
    OkResponse,
)

__all__ = [
    # Requests
    "AuthEventRequest",
    "CreateInventoryItemRequest",
    "CreateMovementRequest",
    "DeleteRequest",
    "SessionPayload",
    "UpdateInventoryItemRequest",
    "UpdateMovementRequest",
    # Responses
    "DataResponse",
    "DeleteResponse",
    "ErrorResponse",
    "HealthResponse",
    "InventoryItemResponse",
    "KpiSnapshotResponse",
    "MovementResponse",
    "OkResponse",
]
