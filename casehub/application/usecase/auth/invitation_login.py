"""Invitation login use case."""

from uuid import uuid4

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from casehub.application.usecase.base import BaseUseCase
from casehub.domain.error import AlreadyAuthenticatedError, InvalidOrExpiredCodeError
from casehub.domain.service import (
    AccessAuditService,
    CredentialService,
    SessionService,
    UserService,
)
from casehub.domain.value import AccessToken


class InvitationLoginRequest(BaseModel):
    """Invitation login request."""

    code: str  # Access token from the invitation link
    session_token: str | None = None  # Caller's session, if any


class InvitedByDetails(BaseModel):
    """Who sent the invitation."""

    email: str
    name: str | None


class InvitationLoginResponse(BaseModel):
    """Invitation login response.

    `temporary_password` is the only copy of the new credential; the
    client uses it right away to log in as `email`.
    """

    email: str
    temporary_password: str
    case_id: str
    invited_by_details: InvitedByDetails


class InvitationLoginUseCase(BaseUseCase):
    """Use case for redeeming a case invitation link.

    A limited user opening their link gets a fresh one-time password
    for an automated login, and the access is recorded.
    """

    def __init__(
        self,
        session_service: SessionService,
        user_service: UserService,
        access_audit_service: AccessAuditService,
        credential_service: CredentialService,
    ) -> None:
        """Initialize invitation login use case.

        Args:
            session_service: Session domain service
            user_service: User domain service
            access_audit_service: Access audit domain service
            credential_service: Credential domain service
        """
        self.session_service = session_service
        self.user_service = user_service
        self.access_audit_service = access_audit_service
        self.credential_service = credential_service

    async def execute(self, request: InvitationLoginRequest) -> InvitationLoginResponse:
        """Execute invitation login flow.

        Steps:
        1. Reject callers that already have an active session
        2. Resolve the limited user and the invitation holding the token
        3. Record the access for the invitation's unit
        4. Count the use on the invitation
        5. Reissue the user's credential, logging out other sessions
        6. Look up who sent the invitation

        All writes share the request's database transaction, so a failure
        in any step leaves nothing behind.

        Args:
            request: Request with the invitation code

        Returns:
            Login email, one-time password, case and inviter details

        Raises:
            AlreadyAuthenticatedError: If the caller has an active session
            InvalidOrExpiredCodeError: If no limited user holds the code
            MissingInviterRecordError: If the inviter no longer exists
        """
        with logfire.span("invitation_login.execute", attempt_id=str(uuid4())):
            if await self.session_service.resolve_active_user_id(request.session_token):
                logfire.warn("Invitation login attempted with an active session")
                raise AlreadyAuthenticatedError()

            try:
                token = AccessToken(root=request.code)
            except PydanticValidationError:
                raise InvalidOrExpiredCodeError()

            identity, invitation = await self.user_service.resolve_invited_identity(
                token
            )

            await self.access_audit_service.record_access(
                identity.user_id, invitation.unit_id
            )
            await self.user_service.increment_accessed_count(identity.user_id, token)

            logfire.info(
                "{email} is using an invitation to access the system",
                email=identity.email,
                user_id=str(identity.user_id),
                case_id=invitation.case_id,
            )

            password = await self.credential_service.reissue(identity.user_id)
            inviter = await self.user_service.get_inviter_details(invitation.invited_by)

            return InvitationLoginResponse(
                email=identity.email,
                temporary_password=password,
                case_id=invitation.case_id,
                invited_by_details=InvitedByDetails(
                    email=inviter.email, name=inviter.name
                ),
            )
