"""In-memory pending invitation repository for testing."""

from casehub.domain.model import PendingInvitation
from casehub.domain.repository.pending_invitation import PendingInvitationRepository
from casehub.domain.value import PendingInvitationId


class InMemoryPendingInvitationRepository(PendingInvitationRepository):
    """In-memory implementation of PendingInvitationRepository for testing."""

    def __init__(self) -> None:
        self._invitations: dict[PendingInvitationId, PendingInvitation] = {}

    async def find_all(self) -> list[PendingInvitation]:
        """Return every pending invitation, oldest first."""
        return sorted(self._invitations.values(), key=lambda inv: inv.created_at)

    async def save(self, invitation: PendingInvitation) -> PendingInvitation:
        """Save or update a pending invitation."""
        self._invitations[invitation.id] = invitation
        return invitation

    def snapshot(self) -> dict[PendingInvitationId, PendingInvitation]:
        """Copy of the stored invitations, for rolling back a request."""
        return dict(self._invitations)

    def restore(self, state: dict[PendingInvitationId, PendingInvitation]) -> None:
        """Put back invitations taken with `snapshot()`."""
        self._invitations = dict(state)
