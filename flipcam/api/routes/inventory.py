"""Inventory management endpoints."""

from fastapi import APIRouter, Depends, status

from flipcam.api.dependencies import (
    get_create_inventory_item_use_case,
    get_delete_inventory_item_use_case,
    get_list_inventory_use_case,
    get_update_inventory_item_use_case,
)
from flipcam.application.dto.requests import (
    CreateInventoryItemRequest,
    DeleteRequest,
    UpdateInventoryItemRequest,
)
from flipcam.application.dto.responses import (
    DataResponse,
    DeleteResponse,
    ErrorResponse,
    InventoryItemResponse,
)
from flipcam.application.use_cases.inventory import (
    CreateInventoryItemUseCase,
    DeleteInventoryItemUseCase,
    ListInventoryUseCase,
    UpdateInventoryItemUseCase,
)

router = APIRouter(
    prefix="/api/inventario",
    tags=["inventario"],
    responses={401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


@router.get("", response_model=DataResponse[list[InventoryItemResponse]])
async def list_items(
    use_case: ListInventoryUseCase = Depends(get_list_inventory_use_case),
) -> DataResponse[list[InventoryItemResponse]]:
    """All items, most recent intake first."""
    items = await use_case.execute()
    return DataResponse(data=[InventoryItemResponse.from_entity(i) for i in items])


@router.post(
    "",
    response_model=DataResponse[InventoryItemResponse],
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_item(
    request: CreateInventoryItemRequest,
    use_case: CreateInventoryItemUseCase = Depends(get_create_inventory_item_use_case),
) -> DataResponse[InventoryItemResponse]:
    """Register a unit bought for resale; estado defaults to en_stock."""
    item = await use_case.execute(request)
    return DataResponse(data=InventoryItemResponse.from_entity(item))


@router.put(
    "",
    response_model=DataResponse[InventoryItemResponse],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_item(
    request: UpdateInventoryItemRequest,
    use_case: UpdateInventoryItemUseCase = Depends(get_update_inventory_item_use_case),
) -> DataResponse[InventoryItemResponse]:
    """Partial update. Moving into vendido stamps fecha_venta."""
    item = await use_case.execute(request)
    return DataResponse(data=InventoryItemResponse.from_entity(item))


@router.delete(
    "",
    response_model=DeleteResponse[InventoryItemResponse],
    response_model_exclude_unset=True,
    responses={400: {"model": ErrorResponse}},
)
async def delete_item(
    request: DeleteRequest,
    use_case: DeleteInventoryItemUseCase = Depends(get_delete_inventory_item_use_case),
) -> DeleteResponse[InventoryItemResponse]:
    """Physically delete an item."""
    deleted = await use_case.execute(request)
    if deleted is None:
        return DeleteResponse(ok=True)
    return DeleteResponse(data=InventoryItemResponse.from_entity(deleted))
