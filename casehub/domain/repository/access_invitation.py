"""Access audit repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from casehub.domain.model.access_invitation import AccessInvitation
from casehub.domain.value import UnitId, UserId


class AccessInvitationRepository(ABC):
    """Repository for AccessInvitation records."""

    @abstractmethod
    async def append_access(
        self, user_id: UserId, unit_id: UnitId, accessed_at: datetime
    ) -> AccessInvitation:
        """Append a timestamp, creating the record on first access.

        Must be a single upsert so concurrent calls for the same key
        never create two records or drop a timestamp.

        Args:
            user_id: The accessing user
            unit_id: The unit the invitation grants access to
            accessed_at: Timestamp to append

        Returns:
            The record after the append
        """
        pass

    @abstractmethod
    async def find_by_user_and_unit(
        self, user_id: UserId, unit_id: UnitId
    ) -> AccessInvitation | None:
        """Find the record for a (user, unit) pair.

        Args:
            user_id: The user's unique identifier
            unit_id: The unit identifier

        Returns:
            The record if found, None otherwise
        """
        pass
