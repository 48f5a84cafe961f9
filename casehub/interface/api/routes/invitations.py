"""Pending invitation routes for the case tracker."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Response, status

from casehub.application.usecase.invitation import (
    GetPendingInvitationsRequest,
    GetPendingInvitationsUseCase,
)
from casehub.application.usecase.invitation.get_pending_invitations import (
    PendingInvitationInfo,
)
from casehub.domain.error import UnauthorizedError

router = APIRouter(prefix="/api", tags=["invitations"], route_class=DishkaRoute)


@router.get(
    "/pending-invitations",
    response_model=list[PendingInvitationInfo],
    responses={401: {"description": "Access token missing or wrong"}},
)
async def get_pending_invitations(
    get_pending_invitations_use_case: FromDishka[GetPendingInvitationsUseCase],
    access_token: str | None = Query(default=None, alias="accessToken"),
) -> list[PendingInvitationInfo] | Response:
    """List every pending invitation.

    Authorised by a pre-shared token in the query string, not by a
    user session. A wrong token gets a bare 401 with no body.

    Args:
        get_pending_invitations_use_case: Use case from DI
        access_token: Pre-shared token

    Returns:
        All pending invitations

    Example:
        GET /api/pending-invitations?accessToken=...
    """
    try:
        response = await get_pending_invitations_use_case.execute(
            GetPendingInvitationsRequest(access_token=access_token)
        )
    except UnauthorizedError:
        return Response(status_code=status.HTTP_401_UNAUTHORIZED)

    return response.invitations
