"""Cash movement endpoints."""

from fastapi import APIRouter, Depends, status

from flipcam.api.dependencies import (
    get_create_movement_use_case,
    get_delete_movement_use_case,
    get_list_movements_use_case,
    get_update_movement_use_case,
)
from flipcam.application.dto.requests import (
    CreateMovementRequest,
    DeleteRequest,
    UpdateMovementRequest,
)
from flipcam.application.dto.responses import (
    DataResponse,
    DeleteResponse,
    ErrorResponse,
    MovementResponse,
)
from flipcam.application.use_cases.movements import (
    CreateMovementUseCase,
    DeleteMovementUseCase,
    ListMovementsUseCase,
    UpdateMovementUseCase,
)

router = APIRouter(
    prefix="/api/movimientos",
    tags=["movimientos"],
    responses={401: {"model": ErrorResponse}},
)


@router.get("", response_model=DataResponse[list[MovementResponse]])
async def list_movements(
    use_case: ListMovementsUseCase = Depends(get_list_movements_use_case),
) -> DataResponse[list[MovementResponse]]:
    """Most recent movements, newest first."""
    movements = await use_case.execute()
    return DataResponse(data=[MovementResponse.from_entity(m) for m in movements])


@router.post(
    "",
    response_model=DataResponse[MovementResponse],
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_movement(
    request: CreateMovementRequest,
    use_case: CreateMovementUseCase = Depends(get_create_movement_use_case),
) -> DataResponse[MovementResponse]:
    """Record a capital, compra, venta, gasto or retiro movement."""
    movement = await use_case.execute(request)
    return DataResponse(data=MovementResponse.from_entity(movement))


@router.put(
    "",
    response_model=DataResponse[MovementResponse],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_movement(
    request: UpdateMovementRequest,
    use_case: UpdateMovementUseCase = Depends(get_update_movement_use_case),
) -> DataResponse[MovementResponse]:
    """Update the fields present in the body; the ID travels in the body."""
    movement = await use_case.execute(request)
    return DataResponse(data=MovementResponse.from_entity(movement))


@router.delete(
    "",
    response_model=DeleteResponse[MovementResponse],
    response_model_exclude_unset=True,
    responses={400: {"model": ErrorResponse}},
)
async def delete_movement(
    request: DeleteRequest,
    use_case: DeleteMovementUseCase = Depends(get_delete_movement_use_case),
) -> DeleteResponse[MovementResponse]:
    """Delete a movement. Deleting one that is already gone returns ``{ok: true}``."""
    deleted = await use_case.execute(request)
    if deleted is None:
        return DeleteResponse(ok=True)
    return DeleteResponse(data=MovementResponse.from_entity(deleted))
