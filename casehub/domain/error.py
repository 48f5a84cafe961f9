"""Domain layer errors.

Everything except MissingInviterRecordError carries a message that is
safe to show to the caller verbatim.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AlreadyAuthenticatedError(DomainError):
    """Raised when a caller with an active session tries invitation login."""

    def __init__(self) -> None:
        super().__init__("Not allowed for an existing user")


class InvalidOrExpiredCodeError(DomainError):
    """Raised when no limited user holds the presented access token."""

    def __init__(self) -> None:
        super().__init__("The code is invalid or login is required first")


class MissingInviterRecordError(DomainError):
    """Raised when an invitation points at a user that does not exist.

    Internal consistency failure, not actionable by the caller.
    """

    def __init__(self, inviter_id: str):
        self.inviter_id = inviter_id
        super().__init__(f"Inviter not found: {inviter_id}")


class AuthenticationRequiredError(DomainError):
    """Raised when an operation needs an active session and there is none."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class UnauthorizedError(DomainError):
    """Raised when a static access token does not match."""

    def __init__(self) -> None:
        super().__init__("Unauthorized")
