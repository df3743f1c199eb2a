"""Tests for the SQLite connection pool."""

from pathlib import Path

from flipcam.config.settings import StorageSettings
from flipcam.infrastructure.storage.sqlite import ConnectionPool


class TestConnectionPool:
    def test_from_settings(self, tmp_path: Path):
        pool = ConnectionPool.from_settings(
            StorageSettings(data_dir=tmp_path, db_name="x.db", pool_size=3)
        )
        assert pool.db_path == tmp_path / "x.db"
        assert pool.pool_size == 3

    async def test_ping(self, pool: ConnectionPool):
        assert await pool.ping() is True

    async def test_foreign_keys_enabled(self, pool: ConnectionPool):
        async with pool.acquire() as conn:
            cursor = await conn.execute("PRAGMA foreign_keys")
            assert (await cursor.fetchone())[0] == 1

    async def test_transaction_rolls_back(self, pool: ConnectionPool):
        try:
            async with pool.transaction() as conn:
                await conn.execute(
                    "INSERT INTO movimientos (id, tipo, monto, fecha, creado_por) "
                    "VALUES ('m1', 'gasto', 10, '2024-01-01', 'u')"
                )
                raise RuntimeError("boom")
        except RuntimeError:
            pass

        async with pool.acquire() as conn:
            cursor = await conn.execute("SELECT COUNT(*) FROM movimientos")
            assert (await cursor.fetchone())[0] == 0

    async def test_reinitialize_after_close(self, temp_db_path: Path):
        pool = ConnectionPool(temp_db_path, pool_size=1)
        await pool.initialize()
        await pool.close()

        assert await pool.ping() is True
        await pool.close()
