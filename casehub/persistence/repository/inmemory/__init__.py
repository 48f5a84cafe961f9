"""In-memory repository implementations for testing."""

from .access_invitation import InMemoryAccessInvitationRepository
from .pending_invitation import InMemoryPendingInvitationRepository
from .transaction import InMemoryTransaction
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryAccessInvitationRepository",
    "InMemoryPendingInvitationRepository",
    "InMemoryTransaction",
    "InMemoryUserRepository",
]
