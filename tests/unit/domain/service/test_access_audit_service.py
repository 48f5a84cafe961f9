"""Unit tests for AccessAuditService."""

from uuid import uuid4

import pytest

from casehub.domain.service import AccessAuditService
from casehub.domain.value import UnitId, UserId
from casehub.persistence.repository.inmemory import InMemoryAccessInvitationRepository


class TestRecordAccess:
    """Tests for AccessAuditService.record_access()."""

    @pytest.mark.asyncio
    async def test_first_access_creates_record(self):
        """Should create a record with a single date on first access."""
        # Arrange
        repo = InMemoryAccessInvitationRepository()
        service = AccessAuditService(repo)
        user_id = UserId(uuid4())

        # Act
        record = await service.record_access(user_id, UnitId("U1"))

        # Assert
        assert record.user_id == user_id
        assert record.unit_id == "U1"
        assert len(record.dates) == 1
        assert record.dates[0].tzinfo is not None

    @pytest.mark.asyncio
    async def test_repeated_access_appends_to_same_record(self):
        """Should keep one record per (user, unit) and append every access."""
        # Arrange
        repo = InMemoryAccessInvitationRepository()
        service = AccessAuditService(repo)
        user_id = UserId(uuid4())

        # Act
        first = await service.record_access(user_id, UnitId("U1"))
        for _ in range(2):
            await service.record_access(user_id, UnitId("U1"))

        # Assert
        record = await repo.find_by_user_and_unit(user_id, UnitId("U1"))
        assert record is not None
        assert record.id == first.id
        assert len(record.dates) == 3
        assert record.dates == sorted(record.dates)
        assert repo.count() == 1

    @pytest.mark.asyncio
    async def test_different_units_get_separate_records(self):
        """Should key records by unit as well as user."""
        # Arrange
        repo = InMemoryAccessInvitationRepository()
        service = AccessAuditService(repo)
        user_id = UserId(uuid4())

        # Act
        await service.record_access(user_id, UnitId("U1"))
        await service.record_access(user_id, UnitId("U2"))

        # Assert
        assert repo.count() == 2
