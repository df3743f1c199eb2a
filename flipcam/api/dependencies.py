"""
Dependency injection for FastAPI.

Every request gets its own store instances, built from the application's
connection pool and bound to the authenticated actor.
"""

import structlog
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from flipcam.application.use_cases import (
    CreateInventoryItemUseCase,
    CreateMovementUseCase,
    DeleteInventoryItemUseCase,
    DeleteMovementUseCase,
    GetKpisUseCase,
    ListInventoryUseCase,
    ListMovementsUseCase,
    SyncSessionUseCase,
    UpdateInventoryItemUseCase,
    UpdateMovementUseCase,
)
from flipcam.config import Settings
from flipcam.core.entities.actor import Actor
from flipcam.core.exceptions import InvalidSessionError, UnauthenticatedError
from flipcam.core.interfaces import (
    IInventoryStore,
    IKpiStore,
    IMovementStore,
    ISessionGateway,
)
from flipcam.infrastructure.storage.sqlite import (
    ConnectionPool,
    SQLiteInventoryStore,
    SQLiteKpiStore,
    SQLiteMovementStore,
)

bearer_scheme = HTTPBearer(auto_error=False)


# Application state
def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_pool(request: Request) -> ConnectionPool:
    """Connection pool opened by the lifespan handler."""
    return request.app.state.pool


def get_session_gateway(request: Request) -> ISessionGateway:
    """Access token verifier."""
    return request.app.state.session_gateway


# Authentication
def read_session_token(request: Request, settings: Settings) -> str | None:
    """Bearer token from the Authorization header, else the session cookie."""
    scheme, _, credentials = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return request.cookies.get(settings.auth.cookie_name) or None


def authenticate_request(request: Request) -> Actor:
    """
    Resolve the actor for a request from application state.

    Also used by the validation error handler, which runs before any
    dependency when the request body cannot be decoded.
    """
    settings: Settings = request.app.state.settings
    gateway: ISessionGateway = request.app.state.session_gateway

    token = read_session_token(request, settings)
    if not token:
        raise UnauthenticatedError()

    try:
        actor = gateway.authenticate(token)
    except InvalidSessionError as e:
        raise UnauthenticatedError(e.message) from e

    request.state.user_id = actor.user_id
    structlog.contextvars.bind_contextvars(user_id=actor.user_id)
    return actor


async def get_current_actor(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Actor:
    """Resolve the actor from a bearer token or the session cookie."""
    # credentials only registers the bearer scheme in OpenAPI
    return authenticate_request(request)


# Store dependencies
def get_movement_store(
    actor: Actor = Depends(get_current_actor),
    pool: ConnectionPool = Depends(get_pool),
    settings: Settings = Depends(get_app_settings),
) -> IMovementStore:
    """Get movement store bound to the actor."""
    return SQLiteMovementStore(pool, actor, shared_ledger=settings.auth.shared_ledger)


def get_inventory_store(
    actor: Actor = Depends(get_current_actor),
    pool: ConnectionPool = Depends(get_pool),
    settings: Settings = Depends(get_app_settings),
) -> IInventoryStore:
    """Get inventory store bound to the actor."""
    return SQLiteInventoryStore(
        pool,
        actor,
        shared_ledger=settings.auth.shared_ledger,
        auto_movements=settings.storage.auto_movements,
    )


def get_kpi_store(
    actor: Actor = Depends(get_current_actor),
    pool: ConnectionPool = Depends(get_pool),
    settings: Settings = Depends(get_app_settings),
) -> IKpiStore:
    """Get KPI store bound to the actor."""
    return SQLiteKpiStore(pool, actor, shared_ledger=settings.auth.shared_ledger)


# Movement use cases
def get_list_movements_use_case(
    store: IMovementStore = Depends(get_movement_store),
    settings: Settings = Depends(get_app_settings),
) -> ListMovementsUseCase:
    return ListMovementsUseCase(store, limit=settings.api.movement_list_limit)


def get_create_movement_use_case(
    store: IMovementStore = Depends(get_movement_store),
) -> CreateMovementUseCase:
    return CreateMovementUseCase(store)


def get_update_movement_use_case(
    store: IMovementStore = Depends(get_movement_store),
) -> UpdateMovementUseCase:
    return UpdateMovementUseCase(store)


def get_delete_movement_use_case(
    store: IMovementStore = Depends(get_movement_store),
) -> DeleteMovementUseCase:
    return DeleteMovementUseCase(store)


# Inventory use cases
def get_list_inventory_use_case(
    store: IInventoryStore = Depends(get_inventory_store),
) -> ListInventoryUseCase:
    return ListInventoryUseCase(store)


def get_create_inventory_item_use_case(
    store: IInventoryStore = Depends(get_inventory_store),
) -> CreateInventoryItemUseCase:
    return CreateInventoryItemUseCase(store)


def get_update_inventory_item_use_case(
    store: IInventoryStore = Depends(get_inventory_store),
) -> UpdateInventoryItemUseCase:
    return UpdateInventoryItemUseCase(store)


def get_delete_inventory_item_use_case(
    store: IInventoryStore = Depends(get_inventory_store),
) -> DeleteInventoryItemUseCase:
    return DeleteInventoryItemUseCase(store)


# KPI use case
def get_kpis_use_case(
    kpi_store: IKpiStore = Depends(get_kpi_store),
    inventory_store: IInventoryStore = Depends(get_inventory_store),
) -> GetKpisUseCase:
    return GetKpisUseCase(kpi_store, inventory_store)


# Session bridge
def get_sync_session_use_case(
    gateway: ISessionGateway = Depends(get_session_gateway),
    settings: Settings = Depends(get_app_settings),
) -> SyncSessionUseCase:
    return SyncSessionUseCase(gateway, default_max_age=settings.auth.cookie_max_age)
