"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict, Sequence
from uuid import UUID

from casehub.domain.model import (
    AccessInvitation,
    CaseInvitation,
    EmailEntry,
    PendingInvitation,
    Profile,
    User,
)
from casehub.domain.value import (
    AccessInvitationId,
    AccessToken,
    CaseId,
    PendingInvitationId,
    UnitId,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_email(row: Dict[str, Any]) -> EmailEntry:
    """Convert a user_emails row to an EmailEntry."""
    return EmailEntry(address=row["address"], verified=row["verified"])


def row_to_case_invitation(row: Dict[str, Any]) -> CaseInvitation:
    """Convert a case_invitations row to a CaseInvitation."""
    return CaseInvitation(
        unit_id=UnitId(row["unit_id"]),
        case_id=CaseId(row["case_id"]),
        access_token=AccessToken(row["access_token"]),
        invited_by=UserId(_uuid(row["invited_by"])),
        accessed_count=row["accessed_count"],
        created_at=row["created_at"],
    )


def row_to_user(
    row: Dict[str, Any],
    email_rows: Sequence[Dict[str, Any]],
    invitation_rows: Sequence[Dict[str, Any]],
) -> User:
    """Convert a users row and its child rows to a User.

    Args:
        row: users row as dict
        email_rows: user_emails rows ordered by position
        invitation_rows: case_invitations rows ordered by position

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        emails=[row_to_email(r) for r in email_rows],
        profile=Profile(name=row.get("name"), is_limited=row["is_limited"]),
        invited_to_cases=[row_to_case_invitation(r) for r in invitation_rows],
        tracker_login=row.get("tracker_login"),
        session_version=row["session_version"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert a User to a users row (credential columns excluded)."""
    return {
        "id": user.id,
        "name": user.profile.name,
        "is_limited": user.profile.is_limited,
        "session_version": user.session_version,
        "tracker_login": user.tracker_login,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def user_emails_to_dicts(user: User) -> list[Dict[str, Any]]:
    """Convert a User's emails to user_emails rows."""
    return [
        {
            "user_id": user.id,
            "position": position,
            "address": email.address,
            "verified": email.verified,
        }
        for position, email in enumerate(user.emails)
    ]


def case_invitations_to_dicts(user: User) -> list[Dict[str, Any]]:
    """Convert a User's case invitations to case_invitations rows."""
    return [
        {
            "user_id": user.id,
            "position": position,
            "unit_id": invitation.unit_id,
            "case_id": invitation.case_id,
            "access_token": invitation.access_token.root,
            "invited_by": invitation.invited_by,
            "accessed_count": invitation.accessed_count,
            "created_at": invitation.created_at,
        }
        for position, invitation in enumerate(user.invited_to_cases)
    ]


def row_to_access_invitation(row: Dict[str, Any]) -> AccessInvitation:
    """Convert an access_invitations row to an AccessInvitation."""
    return AccessInvitation(
        id=AccessInvitationId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        unit_id=UnitId(row["unit_id"]),
        dates=list(row["dates"] or []),
    )


def row_to_pending_invitation(row: Dict[str, Any]) -> PendingInvitation:
    """Convert a pending_invitations row to a PendingInvitation."""
    return PendingInvitation(
        id=PendingInvitationId(_uuid(row["id"])),
        invitee_email=row["invitee_email"],
        invited_by=UserId(_uuid(row["invited_by"])),
        case_id=CaseId(row["case_id"]),
        unit_id=UnitId(row["unit_id"]),
        role=row["role"],
        is_occupant=row["is_occupant"],
        created_at=row["created_at"],
    )


def pending_invitation_to_dict(invitation: PendingInvitation) -> Dict[str, Any]:
    """Convert a PendingInvitation to a pending_invitations row."""
    return invitation.model_dump()
