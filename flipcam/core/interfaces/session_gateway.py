"""Abstract interface for the identity gateway."""

from abc import ABC, abstractmethod

from flipcam.core.entities.actor import Actor


class ISessionGateway(ABC):
    """Verifies access tokens issued by the identity provider."""

    @abstractmethod
    def authenticate(self, token: str) -> Actor:
        """Resolve a token to an actor.

        Raises:
            InvalidSessionError: token is malformed, expired or forged
        """
        pass
