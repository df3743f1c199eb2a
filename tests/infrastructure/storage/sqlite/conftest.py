"""Pytest fixtures for SQLite storage tests."""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest

from flipcam.core.entities.actor import Actor
from flipcam.infrastructure.storage.sqlite import ConnectionPool
from flipcam.infrastructure.storage.sqlite.migrations.migrator import initialize_database


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Create a temporary database path."""
    return tmp_path / "test.db"


@pytest.fixture
async def pool(temp_db_path: Path) -> AsyncGenerator[ConnectionPool, None]:
    """Migrated database behind a single-connection pool."""
    await initialize_database(temp_db_path)
    pool = ConnectionPool(temp_db_path, pool_size=1)
    await pool.initialize()
    yield pool
    await pool.close()


@pytest.fixture
def owner() -> Actor:
    return Actor(user_id="user-1")


@pytest.fixture
def partner() -> Actor:
    return Actor(user_id="user-2")
