"""Supabase implementation of the IdentityProvider interface."""

from supabase import Client

from voice_notes.domain.models import AuthenticatedUser
from voice_notes.exceptions import AuthError
from voice_notes.logging import setup_logging

from .interfaces import IdentityProvider

logger = setup_logging()


class SupabaseIdentityProvider(IdentityProvider):
    """Validates access tokens issued by Supabase Auth."""

    def __init__(self, client: Client):
        self._client = client

    def validate(self, token: str) -> AuthenticatedUser:
        try:
            response = self._client.auth.get_user(token)
        except Exception as e:
            logger.warning("Supabase token validation failed", extra={"error": str(e)})
            raise AuthError("Invalid token", cause=e) from e

        user = response.user if response is not None else None
        if user is None:
            raise AuthError("Invalid token")

        return AuthenticatedUser(id=str(user.id), email=user.email)
