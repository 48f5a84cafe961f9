"""Test configuration and fixtures."""

from uuid import uuid4

from casehub.domain.model import CaseInvitation, EmailEntry, Profile, User
from casehub.domain.value import AccessToken, CaseId, UnitId, UserId


def make_inviter(email: str = "alice@example.com", name: str | None = "Alice") -> User:
    """Build a full (non-limited) user who sends invitations."""
    return User(
        id=UserId(uuid4()),
        emails=[EmailEntry(address=email, verified=True)],
        profile=Profile(name=name),
    )


def make_invitation(
    token: str,
    invited_by: UserId,
    unit_id: str = "U1",
    case_id: str = "C1",
    accessed_count: int = 0,
) -> CaseInvitation:
    """Build a case invitation entry."""
    return CaseInvitation(
        unit_id=UnitId(unit_id),
        case_id=CaseId(case_id),
        access_token=AccessToken(token),
        invited_by=invited_by,
        accessed_count=accessed_count,
    )


def make_invited_user(
    invitations: list[CaseInvitation],
    email: str = "a@x.com",
    is_limited: bool = True,
    tracker_login: str | None = None,
) -> User:
    """Build an invited user holding the given case invitations.

    Limited by default, as users created by the invitation flow are.
    """
    return User(
        id=UserId(uuid4()),
        emails=[EmailEntry(address=email)],
        profile=Profile(is_limited=is_limited),
        invited_to_cases=invitations,
        tracker_login=tracker_login,
    )
