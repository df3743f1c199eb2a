"""Abstract interfaces for stores and the identity gateway."""

from flipcam.core.interfaces.inventory_store import IInventoryStore
from flipcam.core.interfaces.kpi_store import IKpiStore
from flipcam.core.interfaces.movement_store import IMovementStore
from flipcam.core.interfaces.session_gateway import ISessionGateway

__all__ = [
    "IInventoryStore",
    "IKpiStore",
    "IMovementStore",
    "ISessionGateway",
]
