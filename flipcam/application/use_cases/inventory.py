"""Inventory use cases: list, create, update and delete resale items."""

from flipcam.application.dto.requests import (
    CreateInventoryItemRequest,
    DeleteRequest,
    UpdateInventoryItemRequest,
)
from flipcam.config import get_logger
from flipcam.core.entities.inventory import InventoryItem
from flipcam.core.exceptions import InventoryItemNotFoundError
from flipcam.core.interfaces.inventory_store import IInventoryStore

logger = get_logger(__name__)


class ListInventoryUseCase:
    def __init__(self, inventory_store: IInventoryStore):
        self._store = inventory_store

    async def execute(self) -> list[InventoryItem]:
        return await self._store.list_items()


class CreateInventoryItemUseCase:
    def __init__(self, inventory_store: IInventoryStore):
        self._store = inventory_store

    async def execute(self, request: CreateInventoryItemRequest) -> InventoryItem:
        return await self._store.create_item(request.to_entity())


class UpdateInventoryItemUseCase:
    """
    Partial update of an item.

    Any status in the enumeration may be written at any time; the workflow
    (en_stock → reservado → pendiente → vendido) is driven by the client.
    """

    def __init__(self, inventory_store: IInventoryStore):
        self._store = inventory_store

    async def execute(self, request: UpdateInventoryItemRequest) -> InventoryItem:
        item = await self._store.update_item(request.id, request.to_patch())
        if item is None:
            raise InventoryItemNotFoundError(request.id)
        return item


class DeleteInventoryItemUseCase:
    def __init__(self, inventory_store: IInventoryStore):
        self._store = inventory_store

    async def execute(self, request: DeleteRequest) -> InventoryItem | None:
        deleted = await self._store.delete_item(request.id)
        if deleted is None:
            logger.info("inventory_item_already_absent", item_id=request.id)
        return deleted
