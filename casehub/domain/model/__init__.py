"""Domain model entities for casehub."""

from casehub.domain.model.access_invitation import AccessInvitation
from casehub.domain.model.pending_invitation import PendingInvitation
from casehub.domain.model.user import (
    CaseInvitation,
    EmailEntry,
    InvitedIdentity,
    Profile,
    User,
)

__all__ = [
    "User",
    "EmailEntry",
    "Profile",
    "CaseInvitation",
    "InvitedIdentity",
    "AccessInvitation",
    "PendingInvitation",
]
