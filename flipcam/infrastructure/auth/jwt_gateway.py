"""
Identity gateway backed by signed JWT access tokens.

The identity provider signs access tokens with a shared secret; this gateway
only verifies them. Credentials, refresh and sign-in stay with the provider.
"""

from datetime import UTC, datetime
from typing import Any

from jose import ExpiredSignatureError, JWTError, jwt

from flipcam.config import get_logger
from flipcam.config.settings import AuthSettings
from flipcam.core.entities.actor import Actor
from flipcam.core.exceptions import InvalidSessionError
from flipcam.core.interfaces.session_gateway import ISessionGateway

logger = get_logger(__name__)


class JWTSessionGateway(ISessionGateway):
    """Verify HS256 (or configured algorithm) access tokens."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        audience: str | None = None,
    ):
        self._secret = secret
        self._algorithm = algorithm
        self._audience = audience

    @classmethod
    def from_settings(cls, settings: AuthSettings) -> "JWTSessionGateway":
        return cls(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            audience=settings.jwt_audience,
        )

    def authenticate(self, token: str) -> Actor:
        """Decode and validate a token, returning the actor it names."""
        if not token:
            raise InvalidSessionError("Missing access token")

        try:
            claims: dict[str, Any] = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                audience=self._audience,
                options={"verify_aud": self._audience is not None},
            )
        except ExpiredSignatureError as e:
            raise InvalidSessionError("Session expired") from e
        except JWTError as e:
            logger.info("access_token_rejected", error=str(e))
            raise InvalidSessionError(f"Invalid access token: {e}") from e

        subject = claims.get("sub")
        if not subject:
            raise InvalidSessionError("Access token has no subject")

        expires_at = None
        if isinstance(claims.get("exp"), int | float):
            expires_at = datetime.fromtimestamp(claims["exp"], UTC)

        return Actor(
            user_id=str(subject),
            email=claims.get("email"),
            role=claims.get("role"),
            expires_at=expires_at,
        )
