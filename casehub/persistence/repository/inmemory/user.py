"""In-memory user repository for testing."""

from datetime import datetime, timezone
from typing import Optional

from casehub.domain.error import NotFoundError
from casehub.domain.model import InvitedIdentity, User
from casehub.domain.repository.user import UserRepository
from casehub.domain.value import AccessToken, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}
        self._credential_hashes: dict[UserId, str] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_limited_by_access_token(
        self, token: AccessToken
    ) -> Optional[InvitedIdentity]:
        """Find the limited user holding an invitation with this token."""
        for user in self._users.values():
            if not user.profile.is_limited or user.primary_email is None:
                continue
            if any(inv.access_token == token for inv in user.invited_to_cases):
                return InvitedIdentity(
                    user_id=user.id,
                    email=user.primary_email,
                    invited_to_cases=list(user.invited_to_cases),
                )
        return None

    async def increment_accessed_count(
        self, user_id: UserId, token: AccessToken
    ) -> None:
        """Increment the counter of the invitation with this token."""
        user = self._users.get(user_id)
        if not user:
            return

        invitations = [
            inv.model_copy(update={"accessed_count": inv.accessed_count + 1})
            if inv.access_token == token
            else inv
            for inv in user.invited_to_cases
        ]
        self._users[user_id] = user.model_copy(update={"invited_to_cases": invitations})

    async def replace_credential(self, user_id: UserId, credential_hash: str) -> int:
        """Store a new credential hash and bump the session version."""
        user = self._users.get(user_id)
        if not user:
            raise NotFoundError("User", str(user_id))

        self._credential_hashes[user_id] = credential_hash
        updated = user.model_copy(
            update={
                "session_version": user.session_version + 1,
                "updated_at": datetime.now(timezone.utc),
            }
        )
        self._users[user_id] = updated
        return updated.session_version

    async def find_credential_hash(self, user_id: UserId) -> Optional[str]:
        """Get the stored credential hash."""
        return self._credential_hashes.get(user_id)

    async def update_name(self, user_id: UserId, name: str) -> None:
        """Overwrite the user's display name."""
        user = self._users.get(user_id)
        if user:
            profile = user.profile.model_copy(update={"name": name})
            self._users[user_id] = user.model_copy(
                update={"profile": profile, "updated_at": datetime.now(timezone.utc)}
            )

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user

    def snapshot(self) -> tuple[dict[UserId, User], dict[UserId, str]]:
        """Copy of the stored state, for rolling back a request."""
        return dict(self._users), dict(self._credential_hashes)

    def restore(self, state: tuple[dict[UserId, User], dict[UserId, str]]) -> None:
        """Put back state taken with `snapshot()`."""
        users, credential_hashes = state
        self._users = dict(users)
        self._credential_hashes = dict(credential_hashes)
