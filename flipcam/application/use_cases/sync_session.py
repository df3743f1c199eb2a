"""Sync Session Use Case: mirror browser auth events into a server session."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from pydantic import ValidationError

from flipcam.application.dto.requests import AuthEventRequest, SessionPayload
from flipcam.config import get_logger
from flipcam.core.entities.actor import Actor
from flipcam.core.exceptions import InvalidInputError
from flipcam.core.interfaces.session_gateway import ISessionGateway

logger = get_logger(__name__)

SIGNED_OUT = "SIGNED_OUT"


@dataclass
class SessionSyncResult:
    """What the route should do with the session cookie."""

    signed_out: bool = False
    access_token: str | None = None
    max_age: int | None = None
    actor: Actor | None = None


class SyncSessionUseCase:
    """
    Accepts ``{event, session}`` payloads.

    SIGNED_OUT clears the session regardless of the rest of the payload;
    SIGNED_IN with a session, or a bare session, stores it once the access
    token verifies. Anything else is an invalid payload.
    """

    def __init__(self, gateway: ISessionGateway, default_max_age: int = 3600):
        self._gateway = gateway
        self._default_max_age = default_max_age

    def execute(self, payload: Any) -> SessionSyncResult:
        if not isinstance(payload, dict):
            payload = {}

        # Sign-out clears the cookie whatever session the client still holds
        if payload.get("event") == SIGNED_OUT:
            logger.info("session_signed_out")
            return SessionSyncResult(signed_out=True)

        try:
            request = AuthEventRequest.model_validate(payload)
        except ValidationError as e:
            raise InvalidInputError("invalid payload") from e

        # SIGNED_IN and a bare session are handled alike
        if request.session:
            return self._sign_in(request.session)

        raise InvalidInputError("invalid payload")

    def _sign_in(self, session: SessionPayload) -> SessionSyncResult:
        actor = self._gateway.authenticate(session.access_token)
        logger.info("session_signed_in", user_id=actor.user_id)
        return SessionSyncResult(
            access_token=session.access_token,
            max_age=self._max_age(session, actor),
            actor=actor,
        )

    def _max_age(self, session: SessionPayload, actor: Actor) -> int:
        if session.expires_in:
            return session.expires_in
        if actor.expires_at is not None:
            remaining = int((actor.expires_at - datetime.now(UTC)).total_seconds())
            return max(remaining, 0)
        return self._default_max_age
