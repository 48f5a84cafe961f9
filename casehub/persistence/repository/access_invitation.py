"""PostgreSQL implementation of AccessInvitation repository."""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import and_, func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from casehub.domain.model import AccessInvitation
from casehub.domain.repository import AccessInvitationRepository
from casehub.domain.value import UnitId, UserId
from casehub.persistence.mappers import row_to_access_invitation
from casehub.persistence.tables import access_invitations_table


class PostgresAccessInvitationRepository(AccessInvitationRepository):
    """PostgreSQL implementation of AccessInvitationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def append_access(
        self, user_id: UserId, unit_id: UnitId, accessed_at: datetime
    ) -> AccessInvitation:
        """Append a timestamp with a single INSERT ... ON CONFLICT.

        Args:
            user_id: Accessing user
            unit_id: Unit of the invitation
            accessed_at: Timestamp to append

        Returns:
            The record after the append
        """
        stmt = pg_insert(access_invitations_table).values(
            id=uuid4(), user_id=user_id, unit_id=unit_id, dates=[accessed_at]
        )
        stmt = stmt.on_conflict_do_update(
            constraint="uq_access_invitation_user_unit",
            set_={
                "dates": func.array_cat(
                    access_invitations_table.c.dates, stmt.excluded.dates
                )
            },
        ).returning(access_invitations_table)

        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_access_invitation(dict(row))

    async def find_by_user_and_unit(
        self, user_id: UserId, unit_id: UnitId
    ) -> AccessInvitation | None:
        """Find the record for a (user, unit) pair.

        Args:
            user_id: User ID
            unit_id: Unit ID

        Returns:
            The record if found, None otherwise
        """
        stmt = select(access_invitations_table).where(
            and_(
                access_invitations_table.c.user_id == user_id,
                access_invitations_table.c.unit_id == unit_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_access_invitation(dict(row)) if row else None
