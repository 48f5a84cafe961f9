"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel

from casehub.application.usecase.auth import (
    InvitationLoginRequest,
    InvitationLoginResponse,
    InvitationLoginUseCase,
)
from casehub.domain.error import (
    AlreadyAuthenticatedError,
    InvalidOrExpiredCodeError,
    MissingInviterRecordError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class InvitationLoginAPIRequest(BaseModel):
    """API request for redeeming an invitation link."""

    code: str


@router.post("/invitation-login", response_model=InvitationLoginResponse)
async def invitation_login(
    request: InvitationLoginAPIRequest,
    invitation_login_use_case: FromDishka[InvitationLoginUseCase],
    auth_token: str | None = Cookie(default=None),
) -> InvitationLoginResponse:
    """Redeem an invitation code for a one-time password.

    The caller must not be logged in. The returned password is shown
    exactly once; any earlier password and session of the invited user
    stop working.

    Args:
        request: Body with the invitation code
        invitation_login_use_case: Invitation login use case from DI
        auth_token: Session token from cookie, if any

    Returns:
        Login email, one-time password, case and inviter details

    Raises:
        HTTPException: 403 if already logged in, 400 if the code is unknown

    Example:
        POST /auth/invitation-login

        Request:
        {
            "code": "abc123"
        }

        Response:
        {
            "email": "a@x.com",
            "temporary_password": "Xk3...",
            "case_id": "C1",
            "invited_by_details": {"email": "alice@x.com", "name": "Alice"}
        }
    """
    try:
        return await invitation_login_use_case.execute(
            InvitationLoginRequest(code=request.code, session_token=auth_token)
        )
    except AlreadyAuthenticatedError as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(e),
        )
    except InvalidOrExpiredCodeError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except MissingInviterRecordError as e:
        # Propagates as an opaque 500 so the request transaction rolls back
        logger.error(f"Invitation references a missing inviter: {e.inviter_id}")
        raise
