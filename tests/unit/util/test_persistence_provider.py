"""Unit tests for the request-scoped database session."""

import pytest
from dishka import Provider, Scope, make_async_container, provide
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from casehub.domain.error import MissingInviterRecordError
from casehub.util.di import ProdConfigProvider, ProdPersistenceProvider


class RecordingSession:
    """Stands in for AsyncSession and records how it was finished."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    async def commit(self) -> None:
        self.calls.append("commit")

    async def rollback(self) -> None:
        self.calls.append("rollback")

    async def close(self) -> None:
        self.calls.append("close")

    async def __aenter__(self) -> "RecordingSession":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()


class RecordingSessionFactory:
    """Stands in for async_sessionmaker; keeps every session it made."""

    def __init__(self) -> None:
        self.sessions: list[RecordingSession] = []

    def __call__(self) -> RecordingSession:
        session = RecordingSession()
        self.sessions.append(session)
        return session


class RecordingSessionFactoryProvider(Provider):
    """Replaces the real session factory; no database is touched."""

    def __init__(self, factory: RecordingSessionFactory) -> None:
        super().__init__()
        self.factory = factory

    @provide(scope=Scope.APP)
    def get_session_factory(self) -> async_sessionmaker[AsyncSession]:
        return self.factory  # type: ignore[return-value]


def _container(factory: RecordingSessionFactory):
    return make_async_container(
        ProdConfigProvider(),
        ProdPersistenceProvider(),
        RecordingSessionFactoryProvider(factory),
    )


class TestRequestSession:
    """Tests for ProdPersistenceProvider.get_session()."""

    @pytest.mark.asyncio
    async def test_clean_request_commits(self):
        """Should commit when the request scope ends normally."""
        # Arrange
        factory = RecordingSessionFactory()
        container = _container(factory)

        # Act
        async with container() as request_container:
            await request_container.get(AsyncSession)

        # Assert
        assert factory.sessions[0].calls == ["commit", "close"]
        await container.close()

    @pytest.mark.asyncio
    async def test_failed_request_rolls_back(self):
        """Should roll back, and never commit, when the request scope fails."""
        # Arrange
        factory = RecordingSessionFactory()
        container = _container(factory)

        # Act
        with pytest.raises(MissingInviterRecordError):
            async with container() as request_container:
                await request_container.get(AsyncSession)
                raise MissingInviterRecordError("inviter-id")

        # Assert
        assert factory.sessions[0].calls == ["rollback", "close"]
        await container.close()
