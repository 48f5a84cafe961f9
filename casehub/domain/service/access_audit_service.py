"""Access audit domain service."""

from datetime import datetime, timezone

import logfire

from casehub.domain.model import AccessInvitation
from casehub.domain.repository import AccessInvitationRepository
from casehub.domain.value import UnitId, UserId

from .base import Service


class AccessAuditService(Service):
    """Keeps the history of invitation logins per user and unit."""

    def __init__(self, access_invitation_repository: AccessInvitationRepository) -> None:
        """Initialize access audit service.

        Args:
            access_invitation_repository: Access invitation repository
        """
        self.access_invitation_repository = access_invitation_repository

    async def record_access(self, user_id: UserId, unit_id: UnitId) -> AccessInvitation:
        """Append the current time to the user's record for this unit.

        Every call appends, including repeated logins with the same token.

        Args:
            user_id: The user logging in
            unit_id: Unit of the redeemed invitation

        Returns:
            The record after the append
        """
        with logfire.span(
            "access_audit_service.record_access", user_id=str(user_id), unit_id=unit_id
        ):
            record = await self.access_invitation_repository.append_access(
                user_id, unit_id, datetime.now(timezone.utc)
            )
            logfire.info(
                "Invitation access recorded",
                user_id=str(user_id),
                unit_id=unit_id,
                access_count=len(record.dates),
            )
            return record
