"""User aggregate root.

A user is either a full account or a restricted ("limited") identity
provisioned by an invitation. Limited identities can log in through
the one-click links in their case invitations until onboarding is done.
"""

from datetime import datetime, timezone

from pydantic import Field

from casehub.domain.model.common import DomainModel
from casehub.domain.value import AccessToken, CaseId, UnitId, UserId


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EmailEntry(DomainModel):
    """An email address attached to a user."""

    address: str
    verified: bool = False


class Profile(DomainModel):
    """User profile.

    `name` stays empty until the invited user completes onboarding.
    `is_limited` is true while the account is invite-only.
    """

    name: str | None = None
    is_limited: bool = False


class CaseInvitation(DomainModel):
    """Invitation to a case, embedded in the invited user.

    Business rules:
    - access_token is unique across every invitation in the system
    - accessed_count only ever grows, by one per successful redemption
    """

    unit_id: UnitId
    case_id: CaseId
    access_token: AccessToken
    invited_by: UserId
    accessed_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=_utcnow)


class User(DomainModel):
    """User aggregate root.

    The login credential is never part of the model; only its hash is
    kept, by the persistence layer.
    """

    id: UserId
    emails: list[EmailEntry] = Field(default_factory=list)
    profile: Profile = Field(default_factory=Profile)
    invited_to_cases: list[CaseInvitation] = Field(default_factory=list)
    tracker_login: str | None = None  # Login of the linked case tracker account
    session_version: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    @property
    def primary_email(self) -> str | None:
        """First email address, if any."""
        return self.emails[0].address if self.emails else None


class InvitedIdentity(DomainModel):
    """Minimal projection of a limited user found through an access token.

    Carries only what invitation login needs: no credential and no
    unrelated profile data.
    """

    user_id: UserId
    email: str
    invited_to_cases: list[CaseInvitation]

    def invitation_for(self, token: AccessToken) -> CaseInvitation | None:
        """Return the invitation addressed by `token`."""
        for invitation in self.invited_to_cases:
            if invitation.access_token == token:
                return invitation
        return None
