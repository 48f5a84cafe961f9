"""User domain service."""

import logfire

from casehub.domain.error import (
    InvalidOrExpiredCodeError,
    MissingInviterRecordError,
    NotFoundError,
)
from casehub.domain.model import CaseInvitation, InvitedIdentity, User
from casehub.domain.repository import UserRepository
from casehub.domain.value import AccessToken, InviterDetails, UserId

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def resolve_invited_identity(
        self, token: AccessToken
    ) -> tuple[InvitedIdentity, CaseInvitation]:
        """Find the limited user and the invitation addressed by a token.

        The invitation is picked by token equality, so users holding
        several case invitations get the one the link was made for.

        Args:
            token: Access token from the invitation link

        Returns:
            The invited identity and its matching invitation

        Raises:
            InvalidOrExpiredCodeError: If no limited user holds the token
        """
        with logfire.span(
            "user_service.resolve_invited_identity", token=token.redacted()
        ):
            identity = await self.user_repository.find_limited_by_access_token(token)
            invitation = identity.invitation_for(token) if identity else None
            if identity is None or invitation is None:
                logfire.warn("No limited user holds token", token=token.redacted())
                raise InvalidOrExpiredCodeError()

            logfire.info(
                "Invited identity resolved",
                user_id=str(identity.user_id),
                unit_id=invitation.unit_id,
                case_id=invitation.case_id,
            )
            return identity, invitation

    async def increment_accessed_count(
        self, user_id: UserId, token: AccessToken
    ) -> None:
        """Count one more use of the invitation holding `token`.

        Args:
            user_id: Owner of the invitation
            token: Access token of the invitation
        """
        with logfire.span(
            "user_service.increment_accessed_count",
            user_id=str(user_id),
            token=token.redacted(),
        ):
            await self.user_repository.increment_accessed_count(user_id, token)

    async def get_inviter_details(self, inviter_id: UserId) -> InviterDetails:
        """Get the email and name of the user who sent an invitation.

        Args:
            inviter_id: The inviting user's ID

        Returns:
            Inviter's primary email and display name

        Raises:
            MissingInviterRecordError: If the inviter does not exist
        """
        with logfire.span(
            "user_service.get_inviter_details", inviter_id=str(inviter_id)
        ):
            inviter = await self.user_repository.find_by_id(inviter_id)
            if inviter is None or inviter.primary_email is None:
                logfire.error("Inviter record missing", inviter_id=str(inviter_id))
                raise MissingInviterRecordError(str(inviter_id))

            return InviterDetails(email=inviter.primary_email, name=inviter.profile.name)

    async def update_name(self, user_id: UserId, name: str) -> None:
        """Overwrite a user's display name.

        Args:
            user_id: User ID
            name: New display name
        """
        with logfire.span("user_service.update_name", user_id=str(user_id)):
            await self.user_repository.update_name(user_id, name)
            logfire.info("User name updated", user_id=str(user_id))
