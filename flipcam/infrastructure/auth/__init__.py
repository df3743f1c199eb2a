"""Access token verification."""

from flipcam.infrastructure.auth.jwt_gateway import JWTSessionGateway

__all__ = ["JWTSessionGateway"]
