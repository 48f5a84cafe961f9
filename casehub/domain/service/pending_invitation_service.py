"""Pending invitation domain service."""

import logfire

from casehub.domain.model import PendingInvitation
from casehub.domain.repository import PendingInvitationRepository

from .base import Service


class PendingInvitationService(Service):
    """Domain service for invitations awaiting delivery."""

    def __init__(
        self, pending_invitation_repository: PendingInvitationRepository
    ) -> None:
        self.pending_invitation_repository = pending_invitation_repository

    async def list_all(self) -> list[PendingInvitation]:
        """List every pending invitation, unfiltered and unpaginated."""
        with logfire.span("pending_invitation_service.list_all"):
            invitations = await self.pending_invitation_repository.find_all()
            logfire.info("Pending invitations listed", count=len(invitations))
            return invitations
