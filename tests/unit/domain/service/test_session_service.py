"""Unit tests for SessionService."""

from uuid import uuid4

import pytest

from casehub.config import AuthSettings
from casehub.domain.service import SessionService
from casehub.domain.value import UserId
from casehub.persistence.repository.inmemory import InMemoryUserRepository
from casehub.util.jwt import JWTError, create_token
from tests.conftest import make_inviter


class TestResolveActiveUserId:
    """Tests for SessionService.resolve_active_user_id()."""

    @pytest.mark.asyncio
    async def test_valid_session(self):
        """Should return the user behind a current session token."""
        # Arrange
        user_repo = InMemoryUserRepository()
        service = SessionService(AuthSettings(), user_repo)
        user = await user_repo.save(make_inviter())
        token = service.create_token(user)

        # Act
        user_id = await service.resolve_active_user_id(token)

        # Assert
        assert user_id == user.id

    @pytest.mark.asyncio
    async def test_missing_token(self):
        """Should treat a missing token as no session."""
        # Arrange
        service = SessionService(AuthSettings(), InMemoryUserRepository())

        # Act & Assert
        assert await service.resolve_active_user_id(None) is None
        assert await service.resolve_active_user_id("") is None

    @pytest.mark.asyncio
    async def test_garbage_token(self):
        """Should treat an unverifiable token as no session."""
        # Arrange
        service = SessionService(AuthSettings(), InMemoryUserRepository())

        # Act & Assert
        assert await service.resolve_active_user_id("invalid-token") is None

    @pytest.mark.asyncio
    async def test_token_signed_with_other_secret(self):
        """Should reject tokens signed with a different secret."""
        # Arrange
        user_repo = InMemoryUserRepository()
        service = SessionService(AuthSettings(jwt_secret="right"), user_repo)
        user = await user_repo.save(make_inviter())
        token = create_token(
            str(user.id), "alice@example.com", 0, AuthSettings(jwt_secret="wrong")
        )

        # Act & Assert
        assert await service.resolve_active_user_id(token) is None

    @pytest.mark.asyncio
    async def test_token_for_deleted_user(self):
        """Should treat a token for an unknown user as no session."""
        # Arrange
        settings = AuthSettings()
        service = SessionService(settings, InMemoryUserRepository())
        token = create_token(str(UserId(uuid4())), "ghost@example.com", 0, settings)

        # Act & Assert
        assert await service.resolve_active_user_id(token) is None

    @pytest.mark.asyncio
    async def test_superseded_session(self):
        """Should reject tokens issued before the latest credential reissue."""
        # Arrange
        user_repo = InMemoryUserRepository()
        service = SessionService(AuthSettings(), user_repo)
        user = await user_repo.save(make_inviter())
        token = service.create_token(user)

        # Act
        await user_repo.replace_credential(user.id, "new-hash")

        # Assert
        assert await service.resolve_active_user_id(token) is None


class TestVerifyToken:
    """Tests for SessionService.verify_token()."""

    def test_payload_round_trip(self):
        """Should expose user id, email and session version."""
        # Arrange
        service = SessionService(AuthSettings(), InMemoryUserRepository())
        user = make_inviter(email="bob@example.com")

        # Act
        payload = service.verify_token(service.create_token(user))

        # Assert
        assert payload.user_id == str(user.id)
        assert payload.email == "bob@example.com"
        assert payload.session_version == 0

    def test_invalid_token_raises(self):
        """Should raise JWTError for a malformed token."""
        # Arrange
        service = SessionService(AuthSettings(), InMemoryUserRepository())

        # Act & Assert
        with pytest.raises(JWTError):
            service.verify_token("not.a.jwt")
