"""Tests for the schema migrator."""

from pathlib import Path

import aiosqlite

from flipcam.infrastructure.storage.sqlite.migrations.migrator import (
    discover_migrations,
    initialize_database,
)


class TestMigrator:
    def test_discovers_bundled_migrations(self):
        migrations = discover_migrations()
        assert [m.version for m in migrations][0] == "001"
        assert all(m.checksum for m in migrations)

    async def test_creates_tables(self, temp_db_path: Path):
        results = await initialize_database(temp_db_path)

        assert results and all(r.success for r in results)
        async with aiosqlite.connect(temp_db_path) as conn:
            cursor = await conn.execute(
                "SELECT name FROM sqlite_master WHERE type='table'"
            )
            tables = {row[0] for row in await cursor.fetchall()}
        assert {"movimientos", "inventario", "schema_migrations"} <= tables

    async def test_second_run_is_noop(self, temp_db_path: Path):
        await initialize_database(temp_db_path)
        results = await initialize_database(temp_db_path)
        assert results == []

    async def test_failed_migration_reported(self, tmp_path: Path, temp_db_path: Path):
        migrations_dir = tmp_path / "migrations"
        migrations_dir.mkdir()
        (migrations_dir / "v001_broken.sql").write_text("CREATE TABLE (;")

        results = await initialize_database(temp_db_path, migrations_dir)

        assert len(results) == 1
        assert results[0].success is False
        assert results[0].error
