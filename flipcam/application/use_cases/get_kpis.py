"""Get KPIs Use Case: stored aggregate plus projections over unsold stock."""

from flipcam.config import get_logger
from flipcam.core.entities.kpi import KpiSnapshot
from flipcam.core.exceptions import KpiUnavailableError
from flipcam.core.interfaces.inventory_store import IInventoryStore
from flipcam.core.interfaces.kpi_store import IKpiStore
from flipcam.core.services.kpi_projection import project_kpis

logger = get_logger(__name__)


class GetKpisUseCase:
    """Recomputed on every read; nothing is persisted."""

    def __init__(
        self,
        kpi_store: IKpiStore,
        inventory_store: IInventoryStore,
    ):
        self._kpi_store = kpi_store
        self._inventory_store = inventory_store

    async def execute(self) -> KpiSnapshot:
        # 1. Stored aggregate
        aggregate = await self._kpi_store.get_aggregate()
        if aggregate is None:
            raise KpiUnavailableError()

        # 2. Pending inventory
        unsold = await self._inventory_store.list_unsold_items()

        # 3. Projections
        snapshot = project_kpis(aggregate, unsold)

        logger.info(
            "kpis_computed",
            unsold_items=len(unsold),
            caja_actual=snapshot.caja_actual,
            roi=round(snapshot.roi, 2),
        )
        return snapshot
