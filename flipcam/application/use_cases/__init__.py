"""Application use cases."""

from flipcam.application.use_cases.get_kpis import GetKpisUseCase
from flipcam.application.use_cases.inventory import (
    CreateInventoryItemUseCase,
    DeleteInventoryItemUseCase,
    ListInventoryUseCase,
    UpdateInventoryItemUseCase,
)
from flipcam.application.use_cases.movements import (
    CreateMovementUseCase,
    DeleteMovementUseCase,
    ListMovementsUseCase,
    UpdateMovementUseCase,
)
from flipcam.application.use_cases.sync_session import (
    SessionSyncResult,
    SyncSessionUseCase,
)

__all__ = [
    "GetKpisUseCase",
    # Inventory
    "CreateInventoryItemUseCase",
    "DeleteInventoryItemUseCase",
    "ListInventoryUseCase",
    "UpdateInventoryItemUseCase",
    # Movements
    "CreateMovementUseCase",
    "DeleteMovementUseCase",
    "ListMovementsUseCase",
    "UpdateMovementUseCase",
    # Session
    "SessionSyncResult",
    "SyncSessionUseCase",
]
