"""API route modules."""

from flipcam.api.routes.auth import router as auth_router
from flipcam.api.routes.health import router as health_router
from flipcam.api.routes.inventory import router as inventory_router
from flipcam.api.routes.kpis import router as kpis_router
from flipcam.api.routes.movements import router as movements_router

__all__ = [
    "auth_router",
    "health_router",
    "inventory_router",
    "kpis_router",
    "movements_router",
]
