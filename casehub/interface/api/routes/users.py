"""User routes for the caller's own account."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel

from casehub.application.usecase.user import (
    GetMyTrackerLoginUseCase,
    UpdateMyNameUseCase,
)
from casehub.application.usecase.user.get_my_tracker_login import (
    GetMyTrackerLoginRequest,
    GetMyTrackerLoginResponse,
)
from casehub.application.usecase.user.update_my_name import (
    UpdateMyNameRequest,
    UpdateMyNameResponse,
)
from casehub.domain.error import AuthenticationRequiredError, ValidationError

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateMyNameAPIRequest(BaseModel):
    """API request for setting the display name."""

    name: str | None = None


@router.get("/me/tracker-login", response_model=GetMyTrackerLoginResponse)
async def get_my_tracker_login(
    get_my_tracker_login_use_case: FromDishka[GetMyTrackerLoginUseCase],
    auth_token: str | None = Cookie(default=None),
) -> GetMyTrackerLoginResponse:
    """Get the current user's case tracker login.

    Args:
        get_my_tracker_login_use_case: Use case from DI
        auth_token: Session token from cookie

    Returns:
        The tracker login and nothing else

    Raises:
        HTTPException: 401 if not authenticated
    """
    try:
        return await get_my_tracker_login_use_case.execute(
            GetMyTrackerLoginRequest(session_token=auth_token)
        )
    except AuthenticationRequiredError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )


@router.patch("/me/name", response_model=UpdateMyNameResponse)
async def update_my_name(
    request: UpdateMyNameAPIRequest,
    update_my_name_use_case: FromDishka[UpdateMyNameUseCase],
    auth_token: str | None = Cookie(default=None),
) -> UpdateMyNameResponse:
    """Set the current user's display name.

    Args:
        request: Body with the new name
        update_my_name_use_case: Use case from DI
        auth_token: Session token from cookie

    Returns:
        User ID and the stored name

    Raises:
        HTTPException: 401 if not authenticated, 400 if the name is too short

    Example:
        PATCH /users/me/name
        Cookie: auth_token=...

        Request:
        {
            "name": "Bob"
        }
    """
    try:
        return await update_my_name_use_case.execute(
            UpdateMyNameRequest(session_token=auth_token, name=request.name)
        )
    except AuthenticationRequiredError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
