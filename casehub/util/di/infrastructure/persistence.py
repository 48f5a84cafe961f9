"""Persistence infrastructure providers."""

from collections.abc import AsyncGenerator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from casehub.config import Settings
from casehub.domain.repository import (
    AccessInvitationRepository,
    PendingInvitationRepository,
    UserRepository,
)
from casehub.persistence.database import create_engine, create_session_factory
from casehub.persistence.repository import (
    PostgresAccessInvitationRepository,
    PostgresPendingInvitationRepository,
    PostgresUserRepository,
)
from casehub.util.di.base import ProviderBase
from casehub.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncGenerator[AsyncSession, BaseException | None]:
        """Provide database session for request scope.

        dishka sends the exception that ended the request scope (or None)
        back into this generator when the scope closes. The session is
        committed only when the scope ended cleanly and rolled back
        otherwise, so every write made while handling one request lands
        together or not at all.
        """
        async with session_factory() as session:
            exc = yield session
            if exc is not None:
                logfire.warn(
                    "Session rollback", error=str(exc), error_type=type(exc).__name__
                )
                await session.rollback()
            else:
                await session.commit()
                logfire.info("Session committed")

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_access_invitation_repository(
        self, session: AsyncSession
    ) -> AccessInvitationRepository:
        """Provide AccessInvitation repository."""
        return PostgresAccessInvitationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_pending_invitation_repository(
        self, session: AsyncSession
    ) -> PendingInvitationRepository:
        """Provide PendingInvitation repository."""
        return PostgresPendingInvitationRepository(session)
