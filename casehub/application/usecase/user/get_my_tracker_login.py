"""Get my tracker login use case."""

from pydantic import BaseModel

from casehub.domain.error import AuthenticationRequiredError
from casehub.domain.service import SessionService, UserService


class GetMyTrackerLoginRequest(BaseModel):
    """Get my tracker login request."""

    session_token: str | None = None


class GetMyTrackerLoginResponse(BaseModel):
    """Only the caller's case tracker login; nothing else of the account."""

    tracker_login: str | None


class GetMyTrackerLoginUseCase:
    """Use case for reading the caller's own case tracker login."""

    def __init__(
        self, session_service: SessionService, user_service: UserService
    ) -> None:
        self.session_service = session_service
        self.user_service = user_service

    async def execute(
        self, request: GetMyTrackerLoginRequest
    ) -> GetMyTrackerLoginResponse:
        """Return the tracker login of the session's user.

        Raises:
            AuthenticationRequiredError: If there is no active session
        """
        user_id = await self.session_service.resolve_active_user_id(
            request.session_token
        )
        if user_id is None:
            raise AuthenticationRequiredError()

        user = await self.user_service.get_by_id(user_id)
        return GetMyTrackerLoginResponse(tracker_login=user.tracker_login)
