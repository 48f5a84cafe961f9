"""Authentication use cases."""

from casehub.application.usecase.auth.invitation_login import (
    InvitationLoginRequest,
    InvitationLoginResponse,
    InvitationLoginUseCase,
)

__all__ = [
    "InvitationLoginRequest",
    "InvitationLoginResponse",
    "InvitationLoginUseCase",
]
