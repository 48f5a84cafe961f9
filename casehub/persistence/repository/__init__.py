"""PostgreSQL repository implementations."""

from casehub.persistence.repository.access_invitation import (
    PostgresAccessInvitationRepository,
)
from casehub.persistence.repository.pending_invitation import (
    PostgresPendingInvitationRepository,
)
from casehub.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresAccessInvitationRepository",
    "PostgresPendingInvitationRepository",
]
