"""
Error handling middleware.

Standardizes all API error responses to:
- error: human-readable description
- code: machine-readable identifier
- hint: suggested recovery action
"""

import traceback
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, status
from fastapi.dependencies.models import Dependant
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from flipcam.api.dependencies import authenticate_request, get_current_actor
from flipcam.application.dto.responses import ErrorResponse
from flipcam.config import get_logger
from flipcam.core.exceptions import (
    FlipCamError,
    InvalidInputError,
    InvalidSessionError,
    NotFoundError,
    UnauthenticatedError,
    UpstreamError,
    WriteRejectedError,
)

logger = get_logger(__name__)


# Map exceptions to HTTP status codes; first match wins, so subclasses go first
EXCEPTION_STATUS_MAP: dict[type[Exception], int] = {
    UnauthenticatedError: status.HTTP_401_UNAUTHORIZED,
    InvalidSessionError: status.HTTP_400_BAD_REQUEST,
    InvalidInputError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    WriteRejectedError: status.HTTP_400_BAD_REQUEST,
    UpstreamError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Hint messages per error code
HINT_MAP: dict[str, str] = {
    "UNAUTHENTICATED": "Sign in again; the session is missing or expired.",
    "INVALID_SESSION": "Send a session with a valid access_token.",
    "INVALID_INPUT": "Check the request body fields and types.",
    "VALIDATION_ERROR": "Check the request body against the API schema.",
    "MOVEMENT_NOT_FOUND": "Check the movement ID with GET /api/movimientos.",
    "INVENTORY_ITEM_NOT_FOUND": "Check the item ID with GET /api/inventario.",
    "WRITE_REJECTED": "The database refused the change. Check linked IDs and values.",
    "DATABASE_ERROR": "A database operation failed. Check server logs.",
    "KPI_UNAVAILABLE": "The KPI aggregate could not be read. Retry later.",
}

# Default hints by HTTP status code
STATUS_HINTS: dict[int, str] = {
    400: "Check the request parameters and body.",
    401: "Authentication is required.",
    404: "The requested resource was not found. Verify the ID.",
    500: "An internal error occurred. Check server logs.",
}

# Generic messages when an exception carries none
FALLBACK_MESSAGES: dict[str, str] = {
    "/api/movimientos": "Error al procesar el movimiento",
    "/api/inventario": "Error al procesar el inventario",
    "/api/kpis": "Error al calcular los KPIs",
}
DEFAULT_FALLBACK_MESSAGE = "Error interno del servidor"


def _get_hint(error_code: str, status_code: int) -> str:
    """Resolve hint from error code, falling back to status-based hint."""
    return HINT_MAP.get(error_code) or STATUS_HINTS.get(status_code, "")


def _fallback_message(path: str) -> str:
    for prefix, message in FALLBACK_MESSAGES.items():
        if path.startswith(prefix):
            return message
    return DEFAULT_FALLBACK_MESSAGE


def _needs_actor(dependant: Dependant) -> bool:
    return any(
        dep.call is get_current_actor or _needs_actor(dep)
        for dep in dependant.dependencies
    )


def unauthenticated_error(request: Request) -> UnauthenticatedError | None:
    """
    Authentication failure for a request whose body was rejected.

    FastAPI decodes the body before resolving dependencies, so a protected
    route with an undecodable body never reaches ``get_current_actor``.
    """
    route = request.scope.get("route")
    dependant = getattr(route, "dependant", None)
    if dependant is None or not _needs_actor(dependant):
        return None
    try:
        authenticate_request(request)
    except UnauthenticatedError as e:
        return e
    return None


def status_for(exc: Exception) -> int:
    """HTTP status for an exception."""
    for exc_type, code in EXCEPTION_STATUS_MAP.items():
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(
    request: Request,
    exc: Exception,
    status_code: int,
) -> JSONResponse:
    """Build the standardized JSON error response for an exception."""
    if isinstance(exc, FlipCamError):
        error_code = exc.code
        message = exc.message
    else:
        error_code = "INTERNAL_ERROR"
        message = str(exc)

    content = ErrorResponse(
        error=message or _fallback_message(request.url.path),
        code=error_code,
        hint=_get_hint(error_code, status_code) or None,
    )
    return JSONResponse(
        status_code=status_code,
        content=content.model_dump(mode="json", exclude_none=True),
    )


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Global error handling middleware.

    Converts exceptions that escaped the routes to JSON error responses.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """Handle request with error catching."""
        try:
            return await call_next(request)

        except Exception as e:
            status_code = status_for(e)
            logger.error(
                "unhandled_exception",
                request_id=getattr(request.state, "request_id", None),
                path=request.url.path,
                error_type=e.__class__.__name__,
                error=str(e),
                traceback=traceback.format_exc() if status_code >= 500 else None,
            )
            return error_response(request, e, status_code)


def setup_exception_handlers(app: FastAPI) -> None:
    """Set up FastAPI exception handlers."""
    from fastapi.exceptions import RequestValidationError
    from starlette.exceptions import HTTPException

    @app.exception_handler(FlipCamError)
    async def domain_exception_handler(
        request: Request,
        exc: FlipCamError,
    ) -> JSONResponse:
        """Handle domain errors raised by routes and dependencies."""
        status_code = status_for(exc)
        log = logger.error if status_code >= 500 else logger.info
        log(
            "request_error",
            request_id=getattr(request.state, "request_id", None),
            path=request.url.path,
            status=status_code,
            error_code=exc.code,
            error=exc.message,
        )
        return error_response(request, exc, status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Report request validation failures as 400 Bad Request."""
        auth_error = unauthenticated_error(request)
        if auth_error is not None:
            return error_response(request, auth_error, status.HTTP_401_UNAUTHORIZED)

        errors = []
        for error in exc.errors():
            loc = " -> ".join(str(part) for part in error["loc"] if part != "body")
            errors.append(f"{loc}: {error['msg']}" if loc else error["msg"])

        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(
                error=errors[0] if errors else "Invalid request",
                code="VALIDATION_ERROR",
                hint=HINT_MAP["VALIDATION_ERROR"],
                detail="; ".join(errors),
            ).model_dump(mode="json", exclude_none=True),
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(
        request: Request,
        exc: HTTPException,
    ) -> JSONResponse:
        """Handle HTTP exceptions with standardized format."""
        error_code = "NOT_FOUND" if exc.status_code == 404 else "HTTP_ERROR"
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(
                error=str(exc.detail) if exc.detail else "An error occurred",
                code=error_code,
                hint=_get_hint(error_code, exc.status_code) or None,
            ).model_dump(mode="json", exclude_none=True),
        )
