"""Unit tests for GetMyTrackerLoginUseCase."""

import pytest

from casehub.application.usecase.user import GetMyTrackerLoginUseCase
from casehub.application.usecase.user.get_my_tracker_login import (
    GetMyTrackerLoginRequest,
)
from casehub.domain.error import AuthenticationRequiredError
from casehub.domain.repository import UserRepository
from casehub.domain.service import SessionService
from tests.conftest import make_invitation, make_invited_user, make_inviter
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetMyTrackerLoginUseCase:
    """Tests for GetMyTrackerLoginUseCase."""

    @pytest.mark.asyncio
    async def test_returns_only_tracker_login(self, unit_env):
        """Should return the session user's tracker login and nothing more."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        session_service = await unit_env.get(SessionService)
        use_case = await unit_env.get(GetMyTrackerLoginUseCase)
        inviter = await user_repo.save(make_inviter())
        user = await user_repo.save(
            make_invited_user(
                [make_invitation("abc123", inviter.id)], tracker_login="tenant-42"
            )
        )

        # Act
        response = await use_case.execute(
            GetMyTrackerLoginRequest(session_token=session_service.create_token(user))
        )

        # Assert
        assert response.model_dump() == {"tracker_login": "tenant-42"}

    @pytest.mark.asyncio
    async def test_requires_session(self, unit_env):
        """Should raise AuthenticationRequiredError without a session."""
        # Arrange
        use_case = await unit_env.get(GetMyTrackerLoginUseCase)

        # Act & Assert
        with pytest.raises(AuthenticationRequiredError) as exc_info:
            await use_case.execute(GetMyTrackerLoginRequest())
        assert str(exc_info.value) == "Authentication required"

    @pytest.mark.asyncio
    async def test_superseded_session_rejected(self, unit_env):
        """Should refuse a session issued before the last credential reissue."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        session_service = await unit_env.get(SessionService)
        use_case = await unit_env.get(GetMyTrackerLoginUseCase)
        user = await user_repo.save(make_inviter())
        token = session_service.create_token(user)
        await user_repo.replace_credential(user.id, "rotated")

        # Act & Assert
        with pytest.raises(AuthenticationRequiredError):
            await use_case.execute(GetMyTrackerLoginRequest(session_token=token))
