"""Pending invitation entity."""

from datetime import datetime, timezone

from pydantic import Field

from casehub.domain.model.common import DomainModel
from casehub.domain.value import CaseId, PendingInvitationId, UnitId, UserId


class PendingInvitation(DomainModel):
    """Invitation waiting to be delivered by the case tracker.

    Created by the invitation flow and listed as-is to the tracker
    through the static-token endpoint.
    """

    id: PendingInvitationId
    invitee_email: str
    invited_by: UserId
    case_id: CaseId
    unit_id: UnitId
    role: str
    is_occupant: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
