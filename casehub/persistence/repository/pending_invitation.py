"""PostgreSQL implementation of PendingInvitation repository."""

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from casehub.domain.model import PendingInvitation
from casehub.domain.repository import PendingInvitationRepository
from casehub.persistence.mappers import (
    pending_invitation_to_dict,
    row_to_pending_invitation,
)
from casehub.persistence.tables import pending_invitations_table


class PostgresPendingInvitationRepository(PendingInvitationRepository):
    """PostgreSQL implementation of PendingInvitationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_all(self) -> list[PendingInvitation]:
        """Return every pending invitation, oldest first."""
        stmt = select(pending_invitations_table).order_by(
            pending_invitations_table.c.created_at
        )
        result = await self.session.execute(stmt)
        return [row_to_pending_invitation(dict(row)) for row in result.mappings().all()]

    async def save(self, invitation: PendingInvitation) -> PendingInvitation:
        """Save a pending invitation (create or update)."""
        invitation_dict = pending_invitation_to_dict(invitation)
        stmt = (
            pg_insert(pending_invitations_table)
            .values(**invitation_dict)
            .on_conflict_do_update(
                index_elements=[pending_invitations_table.c.id],
                set_={k: v for k, v in invitation_dict.items() if k != "id"},
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return invitation
