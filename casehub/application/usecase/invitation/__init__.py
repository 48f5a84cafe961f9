"""Invitation use cases."""

from casehub.application.usecase.invitation.get_pending_invitations import (
    GetPendingInvitationsRequest,
    GetPendingInvitationsResponse,
    GetPendingInvitationsUseCase,
)

__all__ = [
    "GetPendingInvitationsRequest",
    "GetPendingInvitationsResponse",
    "GetPendingInvitationsUseCase",
]
