"""Bearer-token gate in front of the summarize pipeline."""

from voice_notes.domain.models import AuthenticatedUser
from voice_notes.exceptions import AuthError
from voice_notes.infrastructure.interfaces import IdentityProvider
from voice_notes.logging import setup_logging

logger = setup_logging()

BEARER_PREFIX = "bearer "


def extract_bearer_token(authorization: str | None) -> str:
    """
    Pulls the token out of an Authorization header value.

    A value without the "Bearer" scheme is taken as the raw token.

    Raises:
        AuthError: If the header is absent or carries no token.
    """
    if authorization is None or not authorization.strip():
        raise AuthError("No authorization header")

    value = authorization.strip()
    if value.lower().startswith(BEARER_PREFIX):
        value = value[len(BEARER_PREFIX):].strip()
    elif value.lower() == BEARER_PREFIX.strip():
        value = ""

    if not value:
        raise AuthError("No authorization header")
    return value


class AuthGate:
    """Validates a request's bearer credential, once, with no retries."""

    def __init__(self, identity_provider: IdentityProvider):
        self._identity_provider = identity_provider

    def authenticate(self, authorization: str | None) -> AuthenticatedUser:
        """
        Resolves the identity behind an Authorization header.

        Args:
            authorization: Raw header value, or None if the header was absent.

        Returns:
            The authenticated user.

        Raises:
            AuthError: If the header is missing or the token is rejected.
        """
        try:
            token = extract_bearer_token(authorization)
        except AuthError:
            logger.info("Request rejected: no authorization header")
            raise

        try:
            user = self._identity_provider.validate(token)
        except AuthError as e:
            logger.info("Request rejected: invalid token")
            raise AuthError("Invalid token", cause=e.cause or e) from e
        except Exception as e:
            logger.exception("Identity service error")
            raise AuthError("Invalid token", cause=e) from e

        logger.info("User authenticated", extra={"user_id": user.id})
        return user
