"""
Health check endpoints.
"""

import time

from fastapi import APIRouter, Depends

from flipcam.api.dependencies import get_app_settings, get_pool
from flipcam.application.dto.responses import HealthResponse
from flipcam.config import Settings
from flipcam.infrastructure.storage.sqlite import ConnectionPool

router = APIRouter(prefix="/api/health", tags=["health"])

# Track startup time
_start_time = time.time()


@router.get("", response_model=HealthResponse)
async def health_check(
    pool: ConnectionPool = Depends(get_pool),
    settings: Settings = Depends(get_app_settings),
) -> HealthResponse:
    """
    Health check with a database ping.

    Reports "degraded" when SQLite does not answer.
    """
    database_ok = await pool.ping()
    return HealthResponse(
        status="healthy" if database_ok else "degraded",
        version=settings.app_version,
        uptime_seconds=time.time() - _start_time,
        database=database_ok,
    )
