"""JWT session token domain service."""

import logfire

from commentkit.config import AuthSettings
from commentkit.domain.value import UserId
from commentkit.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for session token operations.

    The session token travels in the auth cookie (or a Bearer header) and
    is shared by the widget iframe and the dashboard.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: UserId, email: str) -> str:
        """Create a session token for a user.

        Args:
            user_id: User ID
            email: User e-mail

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=str(user_id)):
            token = create_token(int(user_id), email, self.auth_settings)
            logfire.info("JWT token created", user_id=str(user_id))
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise
            logfire.info("JWT token verified", user_id=str(payload.user_id))
            return payload

    def get_user_id_from_token(self, token: str | None) -> UserId | None:
        """Extract user ID from a token without raising.

        Routes that optionally authenticate use this so that a stale cookie
        degrades to an anonymous request instead of an error.

        Returns:
            User ID if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
        except JWTError as e:
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None
        return UserId(payload.user_id)
