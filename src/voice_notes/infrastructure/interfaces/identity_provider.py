"""Abstract interface for bearer credential validation."""

from abc import ABC, abstractmethod

from voice_notes.domain.models import AuthenticatedUser


class IdentityProvider(ABC):
    """Abstract base class for external identity services."""

    @abstractmethod
    def validate(self, token: str) -> AuthenticatedUser:
        """
        Validates a bearer token against the identity service.

        Args:
            token: The opaque access token, without the "Bearer" scheme.

        Returns:
            The identity the token was issued to.

        Raises:
            AuthError: If the token is invalid, expired, or cannot be checked.
        """
        pass
