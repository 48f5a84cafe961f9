"""Domain layer DI providers."""

from argon2 import PasswordHasher
from dishka import Scope, provide

from casehub.config import AuthSettings
from casehub.domain.repository import (
    AccessInvitationRepository,
    PendingInvitationRepository,
    UserRepository,
)
from casehub.domain.service import (
    AccessAuditService,
    CredentialService,
    PendingInvitationService,
    SessionService,
    UserService,
)
from casehub.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_password_hasher(self) -> PasswordHasher:
        """Provide argon2 password hasher."""
        return PasswordHasher()

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_access_audit_service(
        self, access_invitation_repository: AccessInvitationRepository
    ) -> AccessAuditService:
        """Provide access audit domain service."""
        return AccessAuditService(
            access_invitation_repository=access_invitation_repository
        )

    @provide
    def get_credential_service(
        self,
        user_repository: UserRepository,
        auth_settings: AuthSettings,
        password_hasher: PasswordHasher,
    ) -> CredentialService:
        """Provide credential domain service."""
        return CredentialService(
            user_repository=user_repository,
            auth_settings=auth_settings,
            password_hasher=password_hasher,
        )

    @provide
    def get_session_service(
        self, auth_settings: AuthSettings, user_repository: UserRepository
    ) -> SessionService:
        """Provide session domain service."""
        return SessionService(
            auth_settings=auth_settings, user_repository=user_repository
        )

    @provide
    def get_pending_invitation_service(
        self, pending_invitation_repository: PendingInvitationRepository
    ) -> PendingInvitationService:
        """Provide pending invitation domain service."""
        return PendingInvitationService(
            pending_invitation_repository=pending_invitation_repository
        )
