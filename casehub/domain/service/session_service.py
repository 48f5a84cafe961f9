"""Session domain service."""

from uuid import UUID

import logfire

from casehub.config import AuthSettings
from casehub.domain.model import User
from casehub.domain.repository import UserRepository
from casehub.domain.value import UserId
from casehub.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class SessionService(Service):
    """Domain service for recognising active sessions.

    A session is active when its token verifies and was issued at the
    user's current session version.
    """

    def __init__(
        self, auth_settings: AuthSettings, user_repository: UserRepository
    ) -> None:
        """Initialize session service.

        Args:
            auth_settings: Authentication settings
            user_repository: User repository
        """
        self.auth_settings = auth_settings
        self.user_repository = user_repository

    def create_token(self, user: User) -> str:
        """Create a session token for a user at their current session version.

        Args:
            user: User to create the session for

        Returns:
            Session token string
        """
        with logfire.span("session_service.create_token", user_id=str(user.id)):
            return create_token(
                str(user.id),
                user.primary_email or "",
                user.session_version,
                self.auth_settings,
            )

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a session token and extract its payload.

        Args:
            token: Session token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("session_service.verify_token"):
            try:
                return verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.info("Session token rejected", error=str(e))
                raise

    async def resolve_active_user_id(self, token: str | None) -> UserId | None:
        """Return the user behind a session token, if the session is active.

        Missing, invalid, expired and superseded tokens all count as
        no session.

        Args:
            token: Session token (optional)

        Returns:
            User ID if the session is active, None otherwise
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            user_id = UserId(UUID(payload.user_id))
        except (JWTError, ValueError):
            return None

        user = await self.user_repository.find_by_id(user_id)
        if user is None or user.session_version != payload.session_version:
            logfire.info("Session no longer active", user_id=str(user_id))
            return None

        return user_id
