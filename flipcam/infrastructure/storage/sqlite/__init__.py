"""SQLite storage implementations."""

from flipcam.infrastructure.storage.sqlite.connection import ConnectionPool
from flipcam.infrastructure.storage.sqlite.inventory_store import SQLiteInventoryStore
from flipcam.infrastructure.storage.sqlite.kpi_store import SQLiteKpiStore
from flipcam.infrastructure.storage.sqlite.migrations import run_migrations
from flipcam.infrastructure.storage.sqlite.movement_store import SQLiteMovementStore

__all__ = [
    "ConnectionPool",
    "SQLiteInventoryStore",
    "SQLiteKpiStore",
    "SQLiteMovementStore",
    "run_migrations",
]
