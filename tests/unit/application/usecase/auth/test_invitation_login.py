"""Unit tests for InvitationLoginUseCase."""

import pytest

from casehub.application.usecase.auth import (
    InvitationLoginRequest,
    InvitationLoginUseCase,
)
from casehub.domain.error import (
    AlreadyAuthenticatedError,
    InvalidOrExpiredCodeError,
    MissingInviterRecordError,
)
from casehub.domain.model import User
from casehub.domain.repository import AccessInvitationRepository, UserRepository
from casehub.domain.service import CredentialService, SessionService
from casehub.domain.value import UnitId, UserId
from tests.conftest import make_invitation, make_invited_user, make_inviter
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestInvitationLoginUseCase:
    """Tests for InvitationLoginUseCase."""

    async def _seed(
        self, user_repo: UserRepository, tokens: list[tuple[str, str, str]] | None = None
    ) -> tuple[User, User]:
        """Save Alice and an invited user holding (token, unit, case) invitations."""
        inviter = await user_repo.save(make_inviter(email="alice@x.com", name="Alice"))
        invitations = [
            make_invitation(token, inviter.id, unit_id=unit, case_id=case)
            for token, unit, case in (tokens or [("abc123", "U1", "C1")])
        ]
        invited = await user_repo.save(make_invited_user(invitations, email="a@x.com"))
        return inviter, invited

    async def _accessed_count(
        self, user_repo: UserRepository, user_id: UserId, token: str
    ) -> int:
        user = await user_repo.find_by_id(user_id)
        assert user is not None
        return next(
            inv.accessed_count
            for inv in user.invited_to_cases
            if inv.access_token.root == token
        )

    @pytest.mark.asyncio
    async def test_successful_redemption(self, unit_env):
        """Should return login details and record the access."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        audit_repo = await unit_env.get(AccessInvitationRepository)
        credential_service = await unit_env.get(CredentialService)
        use_case = await unit_env.get(InvitationLoginUseCase)
        _, invited = await self._seed(user_repo)

        # Act
        response = await use_case.execute(InvitationLoginRequest(code="abc123"))

        # Assert
        assert response.email == "a@x.com"
        assert response.case_id == "C1"
        assert response.invited_by_details.email == "alice@x.com"
        assert response.invited_by_details.name == "Alice"
        assert len(response.temporary_password) == 12
        assert response.temporary_password.isalnum()

        record = await audit_repo.find_by_user_and_unit(invited.id, UnitId("U1"))
        assert record is not None
        assert len(record.dates) == 1
        assert await self._accessed_count(user_repo, invited.id, "abc123") == 1
        assert await credential_service.verify(invited.id, response.temporary_password)

    @pytest.mark.asyncio
    async def test_second_entry_selected_by_token(self, unit_env):
        """Should use the unit and case of the invitation matching the code."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        audit_repo = await unit_env.get(AccessInvitationRepository)
        use_case = await unit_env.get(InvitationLoginUseCase)
        _, invited = await self._seed(
            user_repo, [("tok-one", "U1", "C1"), ("tok-two", "U2", "C2")]
        )

        # Act
        response = await use_case.execute(InvitationLoginRequest(code="tok-two"))

        # Assert
        assert response.case_id == "C2"
        assert await audit_repo.find_by_user_and_unit(invited.id, UnitId("U1")) is None
        assert await audit_repo.find_by_user_and_unit(invited.id, UnitId("U2"))
        assert await self._accessed_count(user_repo, invited.id, "tok-one") == 0
        assert await self._accessed_count(user_repo, invited.id, "tok-two") == 1

    @pytest.mark.asyncio
    async def test_repeated_redemptions(self, unit_env):
        """Should keep one audit record and count every redemption."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        audit_repo = await unit_env.get(AccessInvitationRepository)
        credential_service = await unit_env.get(CredentialService)
        use_case = await unit_env.get(InvitationLoginUseCase)
        _, invited = await self._seed(user_repo)

        # Act
        responses = [
            await use_case.execute(InvitationLoginRequest(code="abc123"))
            for _ in range(3)
        ]

        # Assert
        record = await audit_repo.find_by_user_and_unit(invited.id, UnitId("U1"))
        assert record is not None
        assert len(record.dates) == 3
        assert await self._accessed_count(user_repo, invited.id, "abc123") == 3

        passwords = [r.temporary_password for r in responses]
        assert len(set(passwords)) == 3
        assert not await credential_service.verify(invited.id, passwords[0])
        assert not await credential_service.verify(invited.id, passwords[1])
        assert await credential_service.verify(invited.id, passwords[2])

    @pytest.mark.asyncio
    async def test_redemption_ends_existing_sessions(self, unit_env):
        """Should invalidate sessions the invited user held before."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        session_service = await unit_env.get(SessionService)
        use_case = await unit_env.get(InvitationLoginUseCase)
        _, invited = await self._seed(user_repo)
        old_token = session_service.create_token(invited)

        # Act
        await use_case.execute(InvitationLoginRequest(code="abc123"))

        # Assert
        assert await session_service.resolve_active_user_id(old_token) is None

    @pytest.mark.asyncio
    async def test_active_session_is_rejected_before_any_write(self, unit_env):
        """Should refuse logged-in callers without touching any record."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        audit_repo = await unit_env.get(AccessInvitationRepository)
        session_service = await unit_env.get(SessionService)
        use_case = await unit_env.get(InvitationLoginUseCase)
        inviter, invited = await self._seed(user_repo)
        session_token = session_service.create_token(inviter)

        # Act & Assert
        with pytest.raises(AlreadyAuthenticatedError) as exc_info:
            await use_case.execute(
                InvitationLoginRequest(code="abc123", session_token=session_token)
            )
        assert str(exc_info.value) == "Not allowed for an existing user"

        assert await audit_repo.find_by_user_and_unit(invited.id, UnitId("U1")) is None
        assert await self._accessed_count(user_repo, invited.id, "abc123") == 0
        assert await user_repo.find_credential_hash(invited.id) is None

    @pytest.mark.asyncio
    async def test_stale_session_does_not_block(self, unit_env):
        """Should let a caller with an invalid session cookie through."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(InvitationLoginUseCase)
        await self._seed(user_repo)

        # Act
        response = await use_case.execute(
            InvitationLoginRequest(code="abc123", session_token="garbage")
        )

        # Assert
        assert response.email == "a@x.com"

    @pytest.mark.asyncio
    async def test_unknown_code(self, unit_env):
        """Should raise InvalidOrExpiredCodeError for a code nobody holds."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(InvitationLoginUseCase)
        await self._seed(user_repo)

        # Act & Assert
        with pytest.raises(InvalidOrExpiredCodeError) as exc_info:
            await use_case.execute(InvitationLoginRequest(code="does-not-exist"))
        assert str(exc_info.value) == "The code is invalid or login is required first"

    @pytest.mark.asyncio
    async def test_empty_code(self, unit_env):
        """Should treat an empty code as invalid."""
        # Arrange
        use_case = await unit_env.get(InvitationLoginUseCase)

        # Act & Assert
        with pytest.raises(InvalidOrExpiredCodeError):
            await use_case.execute(InvitationLoginRequest(code=""))

    @pytest.mark.asyncio
    async def test_onboarded_user_cannot_use_link(self, unit_env):
        """Should reject links of users who are no longer limited."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(InvitationLoginUseCase)
        inviter = await user_repo.save(make_inviter())
        await user_repo.save(
            make_invited_user(
                [make_invitation("abc123", inviter.id)], is_limited=False
            )
        )

        # Act & Assert
        with pytest.raises(InvalidOrExpiredCodeError):
            await use_case.execute(InvitationLoginRequest(code="abc123"))

    @pytest.mark.asyncio
    async def test_missing_inviter(self, unit_env):
        """Should raise MissingInviterRecordError when the inviter is gone."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(InvitationLoginUseCase)
        ghost = make_inviter()  # never saved
        await user_repo.save(make_invited_user([make_invitation("abc123", ghost.id)]))

        # Act & Assert
        with pytest.raises(MissingInviterRecordError):
            await use_case.execute(InvitationLoginRequest(code="abc123"))
