"""Movement use cases: list, create, update and delete ledger entries."""

from flipcam.application.dto.requests import (
    CreateMovementRequest,
    DeleteRequest,
    UpdateMovementRequest,
)
from flipcam.config import get_logger
from flipcam.core.entities.movement import Movement
from flipcam.core.exceptions import (
    DatabaseError,
    InvalidInputError,
    MovementNotFoundError,
    WriteRejectedError,
)
from flipcam.core.interfaces.movement_store import IMovementStore

logger = get_logger(__name__)


class ListMovementsUseCase:
    """Most recent movements first."""

    def __init__(self, movement_store: IMovementStore, limit: int = 100):
        self._store = movement_store
        self._limit = limit

    async def execute(self) -> list[Movement]:
        return await self._store.list_movements(limit=self._limit)


class CreateMovementUseCase:
    """Record a movement; the store stamps the owner."""

    def __init__(self, movement_store: IMovementStore):
        self._store = movement_store

    async def execute(self, request: CreateMovementRequest) -> Movement:
        try:
            return await self._store.create_movement(request.to_entity())
        except DatabaseError as e:
            logger.warning("movement_create_rejected", error=e.message)
            raise WriteRejectedError(e.message) from e


class UpdateMovementUseCase:
    """Apply the whitelisted fields present in the request."""

    def __init__(self, movement_store: IMovementStore):
        self._store = movement_store

    async def execute(self, request: UpdateMovementRequest) -> Movement:
        patch = request.to_patch()
        if not patch.changes():
            raise InvalidInputError("No fields to update")

        try:
            movement = await self._store.update_movement(request.id, patch)
        except DatabaseError as e:
            logger.warning(
                "movement_update_rejected", movement_id=request.id, error=e.message
            )
            raise WriteRejectedError(e.message) from e

        if movement is None:
            raise MovementNotFoundError(request.id)
        return movement


class DeleteMovementUseCase:
    """Delete a movement; deleting an absent one is not an error."""

    def __init__(self, movement_store: IMovementStore):
        self._store = movement_store

    async def execute(self, request: DeleteRequest) -> Movement | None:
        try:
            deleted = await self._store.delete_movement(request.id)
        except DatabaseError as e:
            raise WriteRejectedError(e.message) from e

        if deleted is None:
            logger.info("movement_already_absent", movement_id=request.id)
        return deleted
