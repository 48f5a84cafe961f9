"""In-memory access invitation repository for testing."""

from datetime import datetime
from uuid import uuid4

from casehub.domain.model import AccessInvitation
from casehub.domain.repository.access_invitation import AccessInvitationRepository
from casehub.domain.value import AccessInvitationId, UnitId, UserId


class InMemoryAccessInvitationRepository(AccessInvitationRepository):
    """In-memory implementation of AccessInvitationRepository for testing."""

    def __init__(self) -> None:
        self._records: dict[tuple[UserId, UnitId], AccessInvitation] = {}

    async def append_access(
        self, user_id: UserId, unit_id: UnitId, accessed_at: datetime
    ) -> AccessInvitation:
        """Append a timestamp, creating the record on first access."""
        key = (user_id, unit_id)
        existing = self._records.get(key)
        if existing is None:
            record = AccessInvitation(
                id=AccessInvitationId(uuid4()),
                user_id=user_id,
                unit_id=unit_id,
                dates=[accessed_at],
            )
        else:
            record = existing.model_copy(
                update={"dates": [*existing.dates, accessed_at]}
            )
        self._records[key] = record
        return record

    async def find_by_user_and_unit(
        self, user_id: UserId, unit_id: UnitId
    ) -> AccessInvitation | None:
        """Find the record for a (user, unit) pair."""
        return self._records.get((user_id, unit_id))

    def count(self) -> int:
        """Number of records stored."""
        return len(self._records)

    def snapshot(self) -> dict[tuple[UserId, UnitId], AccessInvitation]:
        """Copy of the stored records, for rolling back a request."""
        return dict(self._records)

    def restore(self, state: dict[tuple[UserId, UnitId], AccessInvitation]) -> None:
        """Put back records taken with `snapshot()`."""
        self._records = dict(state)
