"""Abstract interface for inventory storage."""

from abc import ABC, abstractmethod

from flipcam.core.entities.inventory import InventoryItem, InventoryPatch


class IInventoryStore(ABC):
    """Interface for inventory item persistence."""

    @abstractmethod
    async def list_items(self) -> list[InventoryItem]:
        """List all visible items, ordered by fecha_ingreso DESC."""
        pass

    @abstractmethod
    async def list_unsold_items(self) -> list[InventoryItem]:
        """List visible items whose estado is not vendido."""
        pass

    @abstractmethod
    async def get_item(self, item_id: str) -> InventoryItem | None:
        """Get inventory item by ID."""
        pass

    @abstractmethod
    async def create_item(self, item: InventoryItem) -> InventoryItem:
        """Create a new inventory item."""
        pass

    @abstractmethod
    async def update_item(
        self, item_id: str, patch: InventoryPatch
    ) -> InventoryItem | None:
        """Apply a partial update; None when the item is not visible."""
        pass

    @abstractmethod
    async def delete_item(self, item_id: str) -> InventoryItem | None:
        """Delete an item; returns the removed row or None if absent."""
        pass
