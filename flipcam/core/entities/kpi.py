"""KPI aggregate and projection entities."""

from pydantic import BaseModel


class KpiAggregate(BaseModel):
    """Cash totals computed by the store from the movement ledger."""

    caja_actual: float = 0.0
    capital: float = 0.0
    utilidad: float = 0.0


class KpiSnapshot(KpiAggregate):
    """Aggregate merged with projections over unsold inventory."""

    inversion_en_inventario: float = 0.0
    ventas_potenciales_pendientes: float = 0.0
    utilidad_proyectada: float = 0.0
    cash_proyectado: float = 0.0
    roi: float = 0.0
    roi_proyectado: float = 0.0
