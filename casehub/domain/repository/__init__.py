"""Repository interfaces for casehub domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from casehub.domain.repository.access_invitation import AccessInvitationRepository
from casehub.domain.repository.pending_invitation import PendingInvitationRepository
from casehub.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "AccessInvitationRepository",
    "PendingInvitationRepository",
]
