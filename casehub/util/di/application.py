"""Application layer DI providers."""

from dishka import Scope, provide

from casehub.application.usecase.auth import InvitationLoginUseCase
from casehub.application.usecase.invitation import GetPendingInvitationsUseCase
from casehub.application.usecase.user import (
    GetMyTrackerLoginUseCase,
    UpdateMyNameUseCase,
)
from casehub.config import ApiAccessSettings
from casehub.domain.service import (
    AccessAuditService,
    CredentialService,
    PendingInvitationService,
    SessionService,
    UserService,
)
from casehub.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_invitation_login_use_case(
        self,
        session_service: SessionService,
        user_service: UserService,
        access_audit_service: AccessAuditService,
        credential_service: CredentialService,
    ) -> InvitationLoginUseCase:
        """Provide invitation login use case."""
        return InvitationLoginUseCase(
            session_service=session_service,
            user_service=user_service,
            access_audit_service=access_audit_service,
            credential_service=credential_service,
        )

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_get_my_tracker_login_use_case(
        self, session_service: SessionService, user_service: UserService
    ) -> GetMyTrackerLoginUseCase:
        """Provide get my tracker login use case."""
        return GetMyTrackerLoginUseCase(
            session_service=session_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_my_name_use_case(
        self, session_service: SessionService, user_service: UserService
    ) -> UpdateMyNameUseCase:
        """Provide update my name use case."""
        return UpdateMyNameUseCase(
            session_service=session_service, user_service=user_service
        )

    # Invitation use cases
    @provide(scope=Scope.REQUEST)
    def get_get_pending_invitations_use_case(
        self,
        pending_invitation_service: PendingInvitationService,
        api_access_settings: ApiAccessSettings,
    ) -> GetPendingInvitationsUseCase:
        """Provide get pending invitations use case."""
        return GetPendingInvitationsUseCase(
            pending_invitation_service=pending_invitation_service,
            api_access_settings=api_access_settings,
        )
