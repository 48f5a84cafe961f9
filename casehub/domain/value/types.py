"""Domain value objects for casehub.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

import hashlib

from pydantic import field_validator

from casehub.domain.value.common import RootValueObject, ValueObject


class AccessToken(RootValueObject[str]):
    """Invite redemption token embedded in an invitation link."""

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is not empty."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Token must be 1-255 characters")
        return v

    def redacted(self) -> str:
        """Digest of the token, safe to put in logs.

        No characters of the token itself appear in the result.
        """
        digest = hashlib.sha256(self.root.encode()).hexdigest()
        return f"sha256:{digest[:12]}"


class InviterDetails(ValueObject):
    """Display details of the user who created an invitation."""

    email: str
    name: str | None = None
