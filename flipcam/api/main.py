"""
FastAPI application factory.

Creates and configures the main application instance.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from flipcam import __version__
from flipcam.api.middleware import ErrorHandlerMiddleware, LoggingMiddleware
from flipcam.api.middleware.error_handler import setup_exception_handlers
from flipcam.api.routes import (
    auth_router,
    health_router,
    inventory_router,
    kpis_router,
    movements_router,
)
from flipcam.config import Settings, configure_logging, get_logger, get_settings
from flipcam.infrastructure.auth import JWTSessionGateway
from flipcam.infrastructure.storage.sqlite import ConnectionPool, run_migrations

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan handler.

    Migrates the database and opens the connection pool on startup; closes the
    pool on shutdown.
    """
    settings: Settings = app.state.settings

    logger.info(
        "application_starting",
        host=settings.api.host,
        port=settings.api.port,
        debug=settings.api.debug,
        db_path=str(settings.storage.db_path),
    )

    try:
        results = await run_migrations(settings.storage.db_path)
        failed = [r for r in results if not r.success]
        if failed:
            raise RuntimeError(f"Migration {failed[0].version} failed: {failed[0].error}")
        logger.info("database_initialized", applied=len(results))

        pool = ConnectionPool.from_settings(settings.storage)
        await pool.initialize()
        app.state.pool = pool
        logger.info("connection_pool_ready", size=pool.pool_size)

    except Exception as e:
        logger.error("database_init_failed", error=str(e))
        raise

    logger.info("application_started")

    yield

    logger.info("application_stopping")

    try:
        await app.state.pool.close()
        logger.info("connection_pool_closed")

    except Exception as e:
        logger.warning("connection_pool_close_failed", error=str(e))

    logger.info("application_stopped")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: Settings to use instead of the environment-derived ones

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Cash movements, camera inventory and KPIs for a resale business",
        version=__version__,
        docs_url="/docs" if settings.api.debug else None,
        redoc_url="/redoc" if settings.api.debug else None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.session_gateway = JWTSessionGateway.from_settings(settings.auth)

    # Add middleware
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(ErrorHandlerMiddleware)

    # CORS
    if settings.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Setup exception handlers
    setup_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(movements_router)
    app.include_router(inventory_router)
    app.include_router(kpis_router)

    @app.get("/")
    async def root() -> dict[str, str]:
        """API info."""
        return {
            "name": f"{settings.app_name} API",
            "version": __version__,
            "docs": "/docs",
        }

    # Root health endpoint (for container health checks)
    @app.get("/health")
    async def root_health(request: Request) -> dict[str, str]:
        """Simple health check at root level."""
        database_ok = await request.app.state.pool.ping()
        return {
            "status": "healthy" if database_ok else "degraded",
            "version": __version__,
        }

    return app


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "flipcam.api.main:create_app",
        factory=True,
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.debug,
    )
