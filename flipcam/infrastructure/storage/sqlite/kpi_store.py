"""SQLite implementation of the KPI aggregate."""

import aiosqlite

from flipcam.core.entities.kpi import KpiAggregate
from flipcam.core.exceptions import DatabaseError
from flipcam.core.interfaces.kpi_store import IKpiStore
from flipcam.infrastructure.storage.sqlite.scoped import ActorScopedStore


class SQLiteKpiStore(ActorScopedStore, IKpiStore):
    """Cash totals summed over the movements visible to the actor."""

    async def get_aggregate(self) -> KpiAggregate | None:
        """
        Get current cash, capital and profit.

        capital     = capital
        caja_actual = capital + venta - compra - gasto - retiro
        utilidad    = venta - compra - gasto
        """
        where, params = self._visibility()
        try:
            async with self._pool.acquire() as conn:
                cursor = await conn.execute(
                    f"""
                    SELECT
                        COALESCE(SUM(CASE WHEN tipo = 'capital' THEN monto END), 0)
                            AS capital,
                        COALESCE(SUM(CASE
                            WHEN tipo IN ('capital', 'venta') THEN monto
                            WHEN tipo IN ('compra', 'gasto', 'retiro') THEN -monto
                        END), 0) AS caja_actual,
                        COALESCE(SUM(CASE
                            WHEN tipo = 'venta' THEN monto
                            WHEN tipo IN ('compra', 'gasto') THEN -monto
                        END), 0) AS utilidad
                    FROM movimientos
                    WHERE {where}
                    """,
                    params,
                )
                row = await cursor.fetchone()
        except aiosqlite.Error as e:
            raise DatabaseError("get_aggregate", str(e)) from e

        if row is None:
            return None
        return KpiAggregate(
            caja_actual=float(row["caja_actual"]),
            capital=float(row["capital"]),
            utilidad=float(row["utilidad"]),
        )
