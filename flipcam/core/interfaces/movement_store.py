"""Abstract interface for movement storage."""

from abc import ABC, abstractmethod

from flipcam.core.entities.movement import Movement, MovementPatch


class IMovementStore(ABC):
    """Interface for movement persistence.

    Implementations are bound to one actor: they stamp the owner on insert and
    only return rows visible to that actor.
    """

    @abstractmethod
    async def list_movements(self, limit: int = 100) -> list[Movement]:
        """List the most recent movements, ordered by fecha DESC."""
        pass

    @abstractmethod
    async def get_movement(self, movement_id: str) -> Movement | None:
        """Get movement by ID."""
        pass

    @abstractmethod
    async def create_movement(self, movement: Movement) -> Movement:
        """Insert a movement and return the stored row."""
        pass

    @abstractmethod
    async def update_movement(
        self, movement_id: str, patch: MovementPatch
    ) -> Movement | None:
        """Apply a patch; None when the movement is not visible."""
        pass

    @abstractmethod
    async def delete_movement(self, movement_id: str) -> Movement | None:
        """Delete a movement; returns the removed row or None if absent."""
        pass
