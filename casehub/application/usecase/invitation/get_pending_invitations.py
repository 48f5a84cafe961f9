"""Get pending invitations use case."""

import secrets
from datetime import datetime

import logfire
from pydantic import BaseModel

from casehub.config import ApiAccessSettings
from casehub.domain.error import UnauthorizedError
from casehub.domain.service import PendingInvitationService


class GetPendingInvitationsRequest(BaseModel):
    """Get pending invitations request."""

    access_token: str | None = None


class PendingInvitationInfo(BaseModel):
    """Pending invitation as handed to the case tracker."""

    id: str
    invitee_email: str
    invited_by: str
    case_id: str
    unit_id: str
    role: str
    is_occupant: bool
    created_at: datetime


class GetPendingInvitationsResponse(BaseModel):
    """Get pending invitations response."""

    invitations: list[PendingInvitationInfo]


class GetPendingInvitationsUseCase:
    """Use case for the case tracker to pull every pending invitation.

    Guarded by a single pre-shared token from configuration rather than
    a user session.
    """

    def __init__(
        self,
        pending_invitation_service: PendingInvitationService,
        api_access_settings: ApiAccessSettings,
    ) -> None:
        """Initialize get pending invitations use case.

        Args:
            pending_invitation_service: Pending invitation domain service
            api_access_settings: Holds the expected access token
        """
        self.pending_invitation_service = pending_invitation_service
        self.api_access_settings = api_access_settings

    def _is_authorized(self, access_token: str | None) -> bool:
        expected = self.api_access_settings.expected_token
        if not expected or access_token is None:
            return False
        return secrets.compare_digest(access_token.encode(), expected.encode())

    async def execute(
        self, request: GetPendingInvitationsRequest
    ) -> GetPendingInvitationsResponse:
        """List all pending invitations.

        Args:
            request: Request with the caller's access token

        Returns:
            Every pending invitation

        Raises:
            UnauthorizedError: If the token does not match exactly
        """
        if not self._is_authorized(request.access_token):
            logfire.warn("Pending invitations requested with a bad access token")
            raise UnauthorizedError()

        invitations = await self.pending_invitation_service.list_all()
        return GetPendingInvitationsResponse(
            invitations=[
                PendingInvitationInfo(
                    id=str(invitation.id),
                    invitee_email=invitation.invitee_email,
                    invited_by=str(invitation.invited_by),
                    case_id=invitation.case_id,
                    unit_id=invitation.unit_id,
                    role=invitation.role,
                    is_occupant=invitation.is_occupant,
                    created_at=invitation.created_at,
                )
                for invitation in invitations
            ]
        )
