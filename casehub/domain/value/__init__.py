"""Domain value objects for casehub."""

from casehub.domain.value.identifiers import (
    AccessInvitationId,
    CaseId,
    PendingInvitationId,
    UnitId,
    UserId,
)
from casehub.domain.value.types import AccessToken, InviterDetails

__all__ = [
    # Identifiers
    "UserId",
    "AccessInvitationId",
    "PendingInvitationId",
    "UnitId",
    "CaseId",
    # Types
    "AccessToken",
    "InviterDetails",
]
