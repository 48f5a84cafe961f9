"""Pending invitation repository interface."""

from abc import ABC, abstractmethod

from casehub.domain.model.pending_invitation import PendingInvitation


class PendingInvitationRepository(ABC):
    """Repository for PendingInvitation entity."""

    @abstractmethod
    async def find_all(self) -> list[PendingInvitation]:
        """Return every pending invitation, oldest first."""
        pass

    @abstractmethod
    async def save(self, invitation: PendingInvitation) -> PendingInvitation:
        """Save a pending invitation (create or update).

        Args:
            invitation: The invitation to save

        Returns:
            The saved invitation
        """
        pass
