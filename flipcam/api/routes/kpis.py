"""KPI endpoint."""

from fastapi import APIRouter, Depends

from flipcam.api.dependencies import get_kpis_use_case
from flipcam.application.dto.responses import (
    DataResponse,
    ErrorResponse,
    KpiSnapshotResponse,
)
from flipcam.application.use_cases.get_kpis import GetKpisUseCase

router = APIRouter(prefix="/api/kpis", tags=["kpis"])


@router.get(
    "",
    response_model=DataResponse[KpiSnapshotResponse],
    responses={401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_kpis(
    use_case: GetKpisUseCase = Depends(get_kpis_use_case),
) -> DataResponse[KpiSnapshotResponse]:
    """Cash, capital and profit with projections over unsold inventory."""
    snapshot = await use_case.execute()
    return DataResponse(data=KpiSnapshotResponse.from_entity(snapshot))
