"""SQLite implementation of inventory storage."""

from datetime import UTC, datetime
from uuid import uuid4

import aiosqlite

from flipcam.config import get_logger
from flipcam.core.entities.actor import Actor
from flipcam.core.entities.inventory import InventoryItem, InventoryPatch, InventoryStatus
from flipcam.core.entities.movement import Movement
from flipcam.core.exceptions import DatabaseError
from flipcam.core.interfaces.inventory_store import IInventoryStore
from flipcam.core.services.inventory_rules import (
    apply_inventory_patch,
    is_sale_transition,
    purchase_movement_for,
    sale_movement_for,
    stamp_sale_date,
)
from flipcam.infrastructure.storage.sqlite.connection import ConnectionPool
from flipcam.infrastructure.storage.sqlite.movement_store import insert_movement
from flipcam.infrastructure.storage.sqlite.scoped import (
    ActorScopedStore,
    from_db_timestamp,
    to_db_timestamp,
)

logger = get_logger(__name__)


class SQLiteInventoryStore(ActorScopedStore, IInventoryStore):
    """
    SQLite implementation of inventory item storage.

    When ``auto_movements`` is on, buying and selling an item also writes the
    matching compra/venta movement in the same transaction.
    """

    def __init__(
        self,
        pool: ConnectionPool,
        actor: Actor,
        shared_ledger: bool = True,
        auto_movements: bool = True,
    ):
        super().__init__(pool, actor, shared_ledger)
        self._auto_movements = auto_movements

    async def list_items(self) -> list[InventoryItem]:
        """List all visible items, newest intake first."""
        where, params = self._visibility()
        return await self._select(
            "list_items",
            f"SELECT * FROM inventario WHERE {where} ORDER BY fecha_ingreso DESC",
            params,
        )

    async def list_unsold_items(self) -> list[InventoryItem]:
        """List visible items that are not sold yet."""
        where, params = self._visibility()
        return await self._select(
            "list_unsold_items",
            f"SELECT * FROM inventario WHERE estado != ? AND {where}",
            (InventoryStatus.VENDIDO.value, *params),
        )

    async def get_item(self, item_id: str) -> InventoryItem | None:
        """Get inventory item by ID."""
        try:
            async with self._pool.acquire() as conn:
                row = await self._fetch(conn, item_id)
        except aiosqlite.Error as e:
            raise DatabaseError("get_item", str(e)) from e
        return self._row_to_inventory_item(row) if row else None

    async def create_item(self, item: InventoryItem) -> InventoryItem:
        """Create a new inventory item owned by the actor."""
        item = item.model_copy(
            update={
                "id": str(uuid4()),
                "creado_por": self._actor.user_id,
                "actualizado_por": self._actor.user_id,
            }
        )
        item = stamp_sale_date(None, item)
        sold = is_sale_transition(None, item)
        try:
            async with self._pool.transaction() as conn:
                await conn.execute(
                    """
                    INSERT INTO inventario (
                        id, titulo, marca, modelo, estado, costo, precio_venta,
                        fecha_ingreso, fecha_venta, notas, creado_por, actualizado_por
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        item.id,
                        item.titulo,
                        item.marca,
                        item.modelo,
                        item.estado.value,
                        item.costo,
                        item.precio_venta,
                        to_db_timestamp(item.fecha_ingreso),
                        to_db_timestamp(item.fecha_venta),
                        item.notas,
                        item.creado_por,
                        item.actualizado_por,
                    ),
                )
                if self._auto_movements:
                    await self._log_movement(conn, purchase_movement_for(item))
                    if sold:
                        await self._log_movement(conn, sale_movement_for(item))
        except aiosqlite.Error as e:
            raise DatabaseError("create_item", str(e)) from e

        logger.info(
            "inventory_item_created",
            item_id=item.id,
            estado=item.estado.value,
            costo=item.costo,
            sold=sold,
        )
        return item

    async def update_item(
        self, item_id: str, patch: InventoryPatch
    ) -> InventoryItem | None:
        """Apply a partial update; None when the item is not visible."""
        try:
            async with self._pool.transaction() as conn:
                row = await self._fetch(conn, item_id)
                if row is None:
                    return None

                current = self._row_to_inventory_item(row)
                updated = apply_inventory_patch(current, patch, self._actor.user_id)

                await conn.execute(
                    """
                    UPDATE inventario SET
                        titulo = ?,
                        marca = ?,
                        modelo = ?,
                        estado = ?,
                        costo = ?,
                        precio_venta = ?,
                        fecha_venta = ?,
                        notas = ?,
                        actualizado_por = ?
                    WHERE id = ?
                    """,
                    (
                        updated.titulo,
                        updated.marca,
                        updated.modelo,
                        InventoryStatus(updated.estado).value,
                        updated.costo,
                        updated.precio_venta,
                        to_db_timestamp(updated.fecha_venta),
                        updated.notas,
                        updated.actualizado_por,
                        item_id,
                    ),
                )

                sold = is_sale_transition(current, updated)
                if sold and self._auto_movements:
                    await self._log_movement(conn, sale_movement_for(updated))
        except aiosqlite.Error as e:
            raise DatabaseError("update_item", str(e)) from e

        logger.info(
            "inventory_item_updated",
            item_id=item_id,
            fields=sorted(patch.changes()),
            sold=sold,
        )
        return updated

    async def delete_item(self, item_id: str) -> InventoryItem | None:
        """Delete a visible item; None when it was already absent."""
        try:
            async with self._pool.transaction() as conn:
                row = await self._fetch(conn, item_id)
                if row is None:
                    return None
                await conn.execute("DELETE FROM inventario WHERE id = ?", (item_id,))
        except aiosqlite.Error as e:
            raise DatabaseError("delete_item", str(e)) from e

        logger.info("inventory_item_deleted", item_id=item_id)
        return self._row_to_inventory_item(row)

    async def _log_movement(
        self, conn: aiosqlite.Connection, movement: Movement | None
    ) -> None:
        """Write an implied movement, skipping ones already logged."""
        if movement is None:
            return
        movement = movement.model_copy(
            update={"id": str(uuid4()), "creado_por": self._actor.user_id}
        )
        written = await insert_movement(conn, movement)
        logger.info(
            "inventory_movement_logged" if written else "inventory_movement_skipped",
            equipo_id=movement.equipo_id,
            tipo=movement.tipo.value,
            idempotency_key=movement.idempotency_key,
        )

    async def _select(
        self, operation: str, sql: str, params: tuple
    ) -> list[InventoryItem]:
        try:
            async with self._pool.acquire() as conn:
                cursor = await conn.execute(sql, params)
                rows = await cursor.fetchall()
        except aiosqlite.Error as e:
            raise DatabaseError(operation, str(e)) from e
        return [self._row_to_inventory_item(row) for row in rows]

    async def _fetch(
        self, conn: aiosqlite.Connection, item_id: str
    ) -> aiosqlite.Row | None:
        where, params = self._visibility()
        cursor = await conn.execute(
            f"SELECT * FROM inventario WHERE id = ? AND {where}",
            (item_id, *params),
        )
        return await cursor.fetchone()

    @staticmethod
    def _row_to_inventory_item(row: aiosqlite.Row) -> InventoryItem:
        """Convert a database row to an InventoryItem entity."""
        return InventoryItem(
            id=row["id"],
            titulo=row["titulo"],
            marca=row["marca"],
            modelo=row["modelo"],
            estado=InventoryStatus(row["estado"]),
            costo=float(row["costo"]),
            precio_venta=float(row["precio_venta"]) if row["precio_venta"] is not None else None,
            fecha_ingreso=from_db_timestamp(row["fecha_ingreso"]) or datetime.now(UTC),
            fecha_venta=from_db_timestamp(row["fecha_venta"]),
            notas=row["notas"],
            creado_por=row["creado_por"],
            actualizado_por=row["actualizado_por"],
        )
