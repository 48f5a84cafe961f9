"""Mock persistence providers for testing."""

from collections.abc import AsyncGenerator

from dishka import Scope, provide

from casehub.domain.repository import (
    AccessInvitationRepository,
    PendingInvitationRepository,
    UserRepository,
)
from casehub.persistence.repository.inmemory import (
    InMemoryAccessInvitationRepository,
    InMemoryPendingInvitationRepository,
    InMemoryTransaction,
    InMemoryUserRepository,
)
from casehub.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Stores are APP-scoped so data written in one request is visible to the
    next one served by the same container. Every test builds its own
    container, which keeps tests isolated. A REQUEST-scoped transaction
    rolls the stores back when the request scope ends with an exception,
    like the database session does.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_store(self) -> InMemoryUserRepository:
        """Provide in-memory user store."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_access_invitation_store(self) -> InMemoryAccessInvitationRepository:
        """Provide in-memory access invitation store."""
        return InMemoryAccessInvitationRepository()

    @provide(scope=Scope.APP)
    def get_pending_invitation_store(self) -> InMemoryPendingInvitationRepository:
        """Provide in-memory pending invitation store."""
        return InMemoryPendingInvitationRepository()

    @provide(scope=Scope.REQUEST)
    async def get_transaction(
        self,
        users: InMemoryUserRepository,
        access_invitations: InMemoryAccessInvitationRepository,
        pending_invitations: InMemoryPendingInvitationRepository,
    ) -> AsyncGenerator[InMemoryTransaction, BaseException | None]:
        """Provide request transaction, rolled back if the scope fails."""
        transaction = InMemoryTransaction(
            [users, access_invitations, pending_invitations]
        )
        exc = yield transaction
        if exc is not None:
            transaction.rollback()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(
        self, transaction: InMemoryTransaction, users: InMemoryUserRepository
    ) -> UserRepository:
        """Provide in-memory user repository."""
        return users

    @provide(scope=Scope.REQUEST)
    def get_access_invitation_repository(
        self,
        transaction: InMemoryTransaction,
        access_invitations: InMemoryAccessInvitationRepository,
    ) -> AccessInvitationRepository:
        """Provide in-memory access invitation repository."""
        return access_invitations

    @provide(scope=Scope.REQUEST)
    def get_pending_invitation_repository(
        self,
        transaction: InMemoryTransaction,
        pending_invitations: InMemoryPendingInvitationRepository,
    ) -> PendingInvitationRepository:
        """Provide in-memory pending invitation repository."""
        return pending_invitations
