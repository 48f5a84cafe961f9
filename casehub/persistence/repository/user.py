"""PostgreSQL implementation of User repository."""

from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from casehub.domain.error import NotFoundError
from casehub.domain.model import InvitedIdentity, User
from casehub.domain.repository import UserRepository
from casehub.domain.value import AccessToken, UserId
from casehub.persistence.mappers import (
    case_invitations_to_dicts,
    row_to_case_invitation,
    row_to_user,
    user_emails_to_dicts,
    user_to_dict,
)
from casehub.persistence.tables import (
    case_invitations_table,
    user_emails_table,
    users_table,
)


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _email_rows(self, user_id: UserId) -> list[dict[str, Any]]:
        stmt = (
            select(user_emails_table)
            .where(user_emails_table.c.user_id == user_id)
            .order_by(user_emails_table.c.position)
        )
        result = await self.session.execute(stmt)
        return [dict(row) for row in result.mappings().all()]

    async def _invitation_rows(self, user_id: UserId) -> list[dict[str, Any]]:
        stmt = (
            select(case_invitations_table)
            .where(case_invitations_table.c.user_id == user_id)
            .order_by(case_invitations_table.c.position)
        )
        result = await self.session.execute(stmt)
        return [dict(row) for row in result.mappings().all()]

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID, with emails and case invitations.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None

        return row_to_user(
            dict(row),
            await self._email_rows(user_id),
            await self._invitation_rows(user_id),
        )

    async def find_limited_by_access_token(
        self, token: AccessToken
    ) -> Optional[InvitedIdentity]:
        """Find the limited user holding an invitation with this token.

        Uses the unique index on case_invitations.access_token.

        Args:
            token: Invitation access token

        Returns:
            Minimal projection of the user, None if no limited user matches
        """
        stmt = (
            select(users_table.c.id)
            .join(
                case_invitations_table,
                case_invitations_table.c.user_id == users_table.c.id,
            )
            .where(
                and_(
                    users_table.c.is_limited.is_(True),
                    case_invitations_table.c.access_token == token.root,
                )
            )
        )
        result = await self.session.execute(stmt)
        user_id = result.scalar()
        if user_id is None:
            return None

        user_id = UserId(user_id)
        email_rows = await self._email_rows(user_id)
        if not email_rows:
            return None

        return InvitedIdentity(
            user_id=user_id,
            email=email_rows[0]["address"],
            invited_to_cases=[
                row_to_case_invitation(r) for r in await self._invitation_rows(user_id)
            ],
        )

    async def increment_accessed_count(
        self, user_id: UserId, token: AccessToken
    ) -> None:
        """Atomically increment the counter of the invitation with this token.

        Args:
            user_id: Owner of the invitation
            token: Access token of the invitation
        """
        stmt = (
            update(case_invitations_table)
            .where(
                and_(
                    case_invitations_table.c.user_id == user_id,
                    case_invitations_table.c.access_token == token.root,
                )
            )
            .values(accessed_count=case_invitations_table.c.accessed_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def replace_credential(self, user_id: UserId, credential_hash: str) -> int:
        """Store a new credential hash and bump the session version.

        The row lock taken by the UPDATE is held until the request's
        transaction ends, which serializes reissues across workers.

        Args:
            user_id: User ID
            credential_hash: Hash of the new credential

        Returns:
            New session version

        Raises:
            NotFoundError: If the user does not exist
        """
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(
                credential_hash=credential_hash,
                session_version=users_table.c.session_version + 1,
                updated_at=func.now(),
            )
            .returning(users_table.c.session_version)
        )
        result = await self.session.execute(stmt)
        session_version = result.scalar()
        if session_version is None:
            raise NotFoundError("User", str(user_id))

        await self.session.flush()
        return session_version

    async def find_credential_hash(self, user_id: UserId) -> Optional[str]:
        """Get the stored credential hash.

        Args:
            user_id: User ID

        Returns:
            The hash, None if the user has no credential
        """
        stmt = select(users_table.c.credential_hash).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar()

    async def update_name(self, user_id: UserId, name: str) -> None:
        """Overwrite the user's display name.

        Args:
            user_id: User ID
            name: New display name
        """
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(name=name, updated_at=datetime.now(timezone.utc))
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def save(self, user: User) -> User:
        """Save a user with its emails and case invitations.

        Child rows are replaced wholesale so positions always match the
        order of the domain lists.

        Args:
            user: User to save

        Returns:
            Saved user
        """
        user_dict = user_to_dict(user)
        stmt = (
            pg_insert(users_table)
            .values(**user_dict)
            .on_conflict_do_update(
                index_elements=[users_table.c.id],
                set_={k: v for k, v in user_dict.items() if k != "id"},
            )
        )
        await self.session.execute(stmt)

        await self.session.execute(
            delete(user_emails_table).where(user_emails_table.c.user_id == user.id)
        )
        await self.session.execute(
            delete(case_invitations_table).where(
                case_invitations_table.c.user_id == user.id
            )
        )

        email_rows = user_emails_to_dicts(user)
        if email_rows:
            await self.session.execute(insert(user_emails_table), email_rows)

        invitation_rows = case_invitations_to_dicts(user)
        if invitation_rows:
            await self.session.execute(insert(case_invitations_table), invitation_rows)

        await self.session.flush()
        return user
