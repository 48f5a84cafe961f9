"""Credential domain service."""

import asyncio
import secrets
import string

import logfire
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

from casehub.config import AuthSettings
from casehub.domain.repository import UserRepository
from casehub.domain.value import UserId

from .base import Service

PASSWORD_ALPHABET = string.ascii_letters + string.digits


class CredentialService(Service):
    """Issues and checks user credentials.

    Only argon2 hashes are stored. Plaintext passwords are returned
    to the caller once and never logged. Hashing runs in a worker thread
    so it does not stall the event loop.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        auth_settings: AuthSettings,
        password_hasher: PasswordHasher | None = None,
    ) -> None:
        """Initialize credential service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings
            password_hasher: argon2 hasher (default parameters if omitted)
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings
        self.password_hasher = password_hasher or PasswordHasher()

    def generate_password(self) -> str:
        """Generate a random alphanumeric one-time password."""
        length = self.auth_settings.temporary_password_length
        return "".join(secrets.choice(PASSWORD_ALPHABET) for _ in range(length))

    async def reissue(self, user_id: UserId) -> str:
        """Replace the user's credential and log out all their sessions.

        The store writes hash and session version in one UPDATE, whose
        row lock serializes overlapping reissues for the same user until
        the request's transaction ends. The reissue that commits last
        holds the valid credential.

        Args:
            user_id: User whose credential is replaced

        Returns:
            The new plaintext password

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span("credential_service.reissue", user_id=str(user_id)):
            password = self.generate_password()
            credential_hash = await asyncio.to_thread(
                self.password_hasher.hash, password
            )

            session_version = await self.user_repository.replace_credential(
                user_id, credential_hash
            )

            logfire.info(
                "Credential reissued",
                user_id=str(user_id),
                session_version=session_version,
            )
            return password

    async def verify(self, user_id: UserId, password: str) -> bool:
        """Check a password against the user's stored credential.

        Args:
            user_id: User ID
            password: Candidate plaintext password

        Returns:
            True if the password matches the current credential
        """
        with logfire.span("credential_service.verify", user_id=str(user_id)):
            credential_hash = await self.user_repository.find_credential_hash(user_id)
            if credential_hash is None:
                return False

            try:
                return await asyncio.to_thread(
                    self.password_hasher.verify, credential_hash, password
                )
            except (VerificationError, InvalidHashError):
                return False
