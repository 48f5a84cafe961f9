"""Strongly typed identifiers for casehub domain entities.

Units and cases live in the external case tracker, so their
identifiers are opaque strings rather than UUIDs.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
AccessInvitationId = NewType("AccessInvitationId", UUID)
PendingInvitationId = NewType("PendingInvitationId", UUID)

# References into the case tracker
UnitId = NewType("UnitId", str)
CaseId = NewType("CaseId", str)
