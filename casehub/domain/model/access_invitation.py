"""Access audit record for invitation logins."""

from datetime import datetime

from pydantic import Field

from casehub.domain.model.common import DomainModel
from casehub.domain.value import AccessInvitationId, UnitId, UserId


class AccessInvitation(DomainModel):
    """Timestamps of every invitation login by a user into a unit.

    Business rules:
    - At most one record per (user_id, unit_id)
    - dates is append-only, never truncated or reordered
    """

    id: AccessInvitationId
    user_id: UserId
    unit_id: UnitId
    dates: list[datetime] = Field(default_factory=list)
