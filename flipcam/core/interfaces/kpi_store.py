"""Abstract interface for the KPI aggregate."""

from abc import ABC, abstractmethod

from flipcam.core.entities.kpi import KpiAggregate


class IKpiStore(ABC):
    """Read access to the cash aggregate over visible movements."""

    @abstractmethod
    async def get_aggregate(self) -> KpiAggregate | None:
        """Get current cash, capital and profit."""
        pass
