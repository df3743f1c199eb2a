"""
KPI projection over unsold inventory.

Pure, deterministic read-time arithmetic: nothing here is persisted.
"""

from collections.abc import Iterable

from flipcam.core.entities.inventory import InventoryItem
from flipcam.core.entities.kpi import KpiAggregate, KpiSnapshot


def return_on_capital(profit: float, capital: float) -> float:
    """Profit as a percentage of capital, 0 when there is no capital."""
    if capital <= 0:
        return 0.0
    return profit / capital * 100


def project_kpis(
    aggregate: KpiAggregate,
    unsold_items: Iterable[InventoryItem],
) -> KpiSnapshot:
    """
    Merge the stored aggregate with projections over pending inventory.

    Every unsold item counts its full cost as investment, but only items with a
    sale price contribute to pending sales. Purchases are already subtracted
    from ``utilidad`` through their compra movements, so projected profit adds
    the pending sale revenue only.

    Args:
        aggregate: Current cash, capital and profit
        unsold_items: Items whose estado is not vendido

    Returns:
        Snapshot with the six derived fields filled in
    """
    inversion = 0.0
    pendientes = 0.0

    for item in unsold_items:
        inversion += float(item.costo or 0)
        if item.precio_venta:
            pendientes += float(item.precio_venta)

    utilidad_proyectada = aggregate.utilidad + pendientes

    return KpiSnapshot(
        **aggregate.model_dump(),
        inversion_en_inventario=inversion,
        ventas_potenciales_pendientes=pendientes,
        utilidad_proyectada=utilidad_proyectada,
        cash_proyectado=aggregate.caja_actual + pendientes,
        roi=return_on_capital(aggregate.utilidad, aggregate.capital),
        roi_proyectado=return_on_capital(utilidad_proyectada, aggregate.capital),
    )
