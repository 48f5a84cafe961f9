"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from casehub.domain.model.user import InvitedIdentity, User
from casehub.domain.value import AccessToken, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_limited_by_access_token(
        self, token: AccessToken
    ) -> Optional[InvitedIdentity]:
        """Find the limited user holding an invitation with this token.

        Users whose profile is no longer limited never match.

        Args:
            token: The invitation access token

        Returns:
            Projection with the primary email and all case invitations,
            None if no limited user holds the token
        """
        pass

    @abstractmethod
    async def increment_accessed_count(
        self, user_id: UserId, token: AccessToken
    ) -> None:
        """Atomically increment the counter of the invitation with this token.

        Args:
            user_id: Owner of the invitation
            token: Access token of the invitation to update
        """
        pass

    @abstractmethod
    async def replace_credential(self, user_id: UserId, credential_hash: str) -> int:
        """Store a new credential hash and end all existing sessions.

        Args:
            user_id: The user's unique identifier
            credential_hash: Hash of the new credential

        Returns:
            The user's new session version

        Raises:
            NotFoundError: If the user does not exist
        """
        pass

    @abstractmethod
    async def find_credential_hash(self, user_id: UserId) -> Optional[str]:
        """Get the stored credential hash.

        Args:
            user_id: The user's unique identifier

        Returns:
            The hash, None if the user has no credential
        """
        pass

    @abstractmethod
    async def update_name(self, user_id: UserId, name: str) -> None:
        """Overwrite the user's display name.

        Args:
            user_id: The user's unique identifier
            name: New display name
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
