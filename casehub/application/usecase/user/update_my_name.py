"""Update my name use case."""

import logfire
from pydantic import BaseModel

from casehub.domain.error import AuthenticationRequiredError, ValidationError
from casehub.domain.service import SessionService, UserService

MIN_NAME_LENGTH = 2


class UpdateMyNameRequest(BaseModel):
    """Update my name request."""

    session_token: str | None = None
    name: str | None = None


class UpdateMyNameResponse(BaseModel):
    """Update my name response."""

    user_id: str
    name: str


class UpdateMyNameUseCase:
    """Use case for an invited user setting their display name.

    Invited users have no name until they pick one during onboarding.
    """

    def __init__(
        self, session_service: SessionService, user_service: UserService
    ) -> None:
        """Initialize update my name use case.

        Args:
            session_service: Session domain service
            user_service: User domain service
        """
        self.session_service = session_service
        self.user_service = user_service

    async def execute(self, request: UpdateMyNameRequest) -> UpdateMyNameResponse:
        """Execute update name flow.

        Args:
            request: Request with session token and new name

        Returns:
            The user ID and stored name

        Raises:
            AuthenticationRequiredError: If there is no active session
            ValidationError: If the name is shorter than two characters
        """
        user_id = await self.session_service.resolve_active_user_id(
            request.session_token
        )
        if user_id is None:
            raise AuthenticationRequiredError("Must be logged in")

        if not request.name or len(request.name) < MIN_NAME_LENGTH:
            logfire.info("Rejected name update", user_id=str(user_id))
            raise ValidationError(
                f"Name should be of minimum {MIN_NAME_LENGTH} characters"
            )

        await self.user_service.update_name(user_id, request.name)
        return UpdateMyNameResponse(user_id=str(user_id), name=request.name)
