"""SQLite implementation of movement storage."""

from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

import aiosqlite

from flipcam.config import get_logger
from flipcam.core.entities.movement import Movement, MovementPatch, MovementType
from flipcam.core.exceptions import DatabaseError
from flipcam.core.interfaces.movement_store import IMovementStore
from flipcam.infrastructure.storage.sqlite.scoped import (
    ActorScopedStore,
    from_db_json,
    from_db_timestamp,
    to_db_json,
    to_db_timestamp,
)

logger = get_logger(__name__)

# Patch fields → column names
_PATCH_COLUMNS = {
    "tipo": "tipo",
    "monto": "monto",
    "descripcion": "descripcion",
    "fecha": "fecha",
    "equipo_id": "equipo_id",
    "metadata": "metadata_json",
}


async def insert_movement(conn: aiosqlite.Connection, movement: Movement) -> bool:
    """
    Insert a movement on an open connection.

    Movements sharing an idempotency key with an existing row are skipped.

    Returns:
        True if a row was written
    """
    cursor = await conn.execute(
        """
        INSERT INTO movimientos (
            id, tipo, monto, descripcion, fecha,
            creado_por, equipo_id, metadata_json, idempotency_key
        ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
        ON CONFLICT(idempotency_key) DO NOTHING
        """,
        (
            movement.id,
            movement.tipo.value,
            movement.monto,
            movement.descripcion,
            to_db_timestamp(movement.fecha),
            movement.creado_por,
            movement.equipo_id,
            to_db_json(movement.metadata),
            movement.idempotency_key,
        ),
    )
    return cursor.rowcount > 0


def row_to_movement(row: aiosqlite.Row) -> Movement:
    """Convert a database row to a Movement entity."""
    return Movement(
        id=row["id"],
        tipo=MovementType(row["tipo"]),
        monto=float(row["monto"]),
        descripcion=row["descripcion"],
        fecha=from_db_timestamp(row["fecha"]) or datetime.now(UTC),
        creado_por=row["creado_por"],
        equipo_id=row["equipo_id"],
        metadata=from_db_json(row["metadata_json"]),
        idempotency_key=row["idempotency_key"],
    )


class SQLiteMovementStore(ActorScopedStore, IMovementStore):
    """SQLite implementation of movement storage."""

    async def list_movements(self, limit: int = 100) -> list[Movement]:
        """List the most recent movements, ordered by fecha DESC."""
        where, params = self._visibility()
        try:
            async with self._pool.acquire() as conn:
                cursor = await conn.execute(
                    f"""
                    SELECT * FROM movimientos
                    WHERE {where}
                    ORDER BY fecha DESC, rowid DESC
                    LIMIT ?
                    """,
                    (*params, limit),
                )
                rows = await cursor.fetchall()
        except aiosqlite.Error as e:
            raise DatabaseError("list_movements", str(e)) from e
        return [row_to_movement(row) for row in rows]

    async def get_movement(self, movement_id: str) -> Movement | None:
        """Get movement by ID."""
        try:
            async with self._pool.acquire() as conn:
                row = await self._fetch(conn, movement_id)
        except aiosqlite.Error as e:
            raise DatabaseError("get_movement", str(e)) from e
        return row_to_movement(row) if row else None

    async def create_movement(self, movement: Movement) -> Movement:
        """Insert a movement owned by the actor and return the stored row."""
        movement = movement.model_copy(
            update={"id": str(uuid4()), "creado_por": self._actor.user_id}
        )
        try:
            async with self._pool.transaction() as conn:
                await insert_movement(conn, movement)
                row = await self._fetch(conn, movement.id)  # type: ignore[arg-type]
        except aiosqlite.Error as e:
            raise DatabaseError("create_movement", str(e)) from e

        logger.info(
            "movement_created",
            movement_id=movement.id,
            tipo=movement.tipo.value,
            monto=movement.monto,
        )
        return row_to_movement(row)

    async def update_movement(
        self, movement_id: str, patch: MovementPatch
    ) -> Movement | None:
        """Apply the explicitly set patch fields; None when not visible."""
        assignments: list[str] = []
        values: list[Any] = []
        for field, value in patch.changes().items():
            if field == "tipo" and value is not None:
                value = MovementType(value).value
            elif field == "fecha":
                value = to_db_timestamp(value)
            elif field == "metadata":
                value = to_db_json(value)
            assignments.append(f"{_PATCH_COLUMNS[field]} = ?")
            values.append(value)

        try:
            async with self._pool.transaction() as conn:
                if await self._fetch(conn, movement_id) is None:
                    return None
                if assignments:
                    await conn.execute(
                        f"UPDATE movimientos SET {', '.join(assignments)} WHERE id = ?",
                        (*values, movement_id),
                    )
                row = await self._fetch(conn, movement_id)
        except aiosqlite.Error as e:
            raise DatabaseError("update_movement", str(e)) from e

        logger.info(
            "movement_updated",
            movement_id=movement_id,
            fields=sorted(patch.changes()),
        )
        return row_to_movement(row)

    async def delete_movement(self, movement_id: str) -> Movement | None:
        """Delete a visible movement; None when it was already absent."""
        try:
            async with self._pool.transaction() as conn:
                row = await self._fetch(conn, movement_id)
                if row is None:
                    return None
                await conn.execute("DELETE FROM movimientos WHERE id = ?", (movement_id,))
        except aiosqlite.Error as e:
            raise DatabaseError("delete_movement", str(e)) from e

        logger.info("movement_deleted", movement_id=movement_id)
        return row_to_movement(row)

    async def _fetch(
        self, conn: aiosqlite.Connection, movement_id: str
    ) -> aiosqlite.Row | None:
        where, params = self._visibility()
        cursor = await conn.execute(
            f"SELECT * FROM movimientos WHERE id = ? AND {where}",
            (movement_id, *params),
        )
        return await cursor.fetchone()
