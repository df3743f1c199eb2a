"""Core domain entities."""

from flipcam.core.entities.actor import Actor
from flipcam.core.entities.inventory import (
    InventoryItem,
    InventoryPatch,
    InventoryStatus,
)
from flipcam.core.entities.kpi import KpiAggregate, KpiSnapshot
from flipcam.core.entities.movement import Movement, MovementPatch, MovementType

__all__ = [
    "Actor",
    "InventoryItem",
    "InventoryPatch",
    "InventoryStatus",
    "KpiAggregate",
    "KpiSnapshot",
    "Movement",
    "MovementPatch",
    "MovementType",
]
