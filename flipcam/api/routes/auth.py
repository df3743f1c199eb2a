"""
Auth bridge endpoints.

The browser-side identity client posts its auth events here so the server can
keep the session in an HTTP-only cookie.
"""

from typing import Any

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from flipcam.api.dependencies import get_app_settings, get_sync_session_use_case
from flipcam.application.dto.responses import ErrorResponse, OkResponse
from flipcam.application.use_cases.sync_session import SyncSessionUseCase
from flipcam.config import Settings

router = APIRouter(prefix="/api", tags=["auth"])


@router.post(
    "/auth",
    response_model=OkResponse,
    responses={400: {"model": ErrorResponse}},
)
async def sync_session(
    request: Request,
    response: Response,
    use_case: SyncSessionUseCase = Depends(get_sync_session_use_case),
    settings: Settings = Depends(get_app_settings),
) -> OkResponse:
    """Mirror SIGNED_IN / SIGNED_OUT events (or a bare session) into the cookie."""
    try:
        payload: Any = await request.json()
    except ValueError:
        payload = {}

    result = use_case.execute(payload)

    if result.signed_out:
        response.delete_cookie(settings.auth.cookie_name, path="/")
    else:
        response.set_cookie(
            settings.auth.cookie_name,
            result.access_token or "",
            max_age=result.max_age,
            path="/",
            httponly=True,
            secure=settings.auth.cookie_secure,
            samesite="lax",
        )
    return OkResponse()


@router.post(
    "/bootstrap-profile",
    status_code=status.HTTP_410_GONE,
    response_model=ErrorResponse,
)
async def bootstrap_profile() -> JSONResponse:
    """Deprecated: profiles are no longer bootstrapped server-side."""
    return JSONResponse(
        status_code=status.HTTP_410_GONE,
        content={"error": "deprecated", "code": "DEPRECATED"},
    )
