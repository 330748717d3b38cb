"""JWT token domain service."""

from uuid import UUID

import logfire

from circle.config import AuthSettings
from circle.domain.value import Principal, UserId
from circle.util.jwt import JWTError, TokenPayload, verify_token

from .base import Service


class JWTService(Service):
    """Resolves the current principal from the session token."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.user_id)
                return payload
            except JWTError as e:
                logfire.error("JWT token verification failed", error=str(e))
                raise

    def get_principal_from_token(self, token: str | None) -> Principal | None:
        """Resolve the principal behind a token without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            Principal if the token is valid, None if missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            return Principal(
                id=UserId(UUID(payload.user_id)),
                display_name=payload.display_name,
                avatar_ref=payload.avatar_ref,
                is_admin=payload.is_admin,
            )
        except (JWTError, ValueError) as e:
            # Invalid, expired or malformed token (bad UUID or payload), treat as anonymous
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None
