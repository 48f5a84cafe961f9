"""Domain services."""

from .access_audit_service import AccessAuditService
from .base import Service
from .credential_service import CredentialService
from .pending_invitation_service import PendingInvitationService
from .session_service import SessionService
from .user_service import UserService

__all__ = [
    "AccessAuditService",
    "CredentialService",
    "PendingInvitationService",
    "Service",
    "SessionService",
    "UserService",
]
