"""Session token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from casehub.config import AuthSettings


class TokenPayload(BaseModel):
    """Session token payload.

    `session_version` is compared with the user's stored version;
    reissuing a credential bumps the stored version and so ends
    every session issued before it.
    """

    user_id: str
    email: str
    session_version: int
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: str, email: str, session_version: int, settings: AuthSettings
) -> str:
    """Create a session token for the user.

    Args:
        user_id: User ID
        email: Primary email address
        session_version: User's current session version
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "user_id": user_id,
        "email": email,
        "session_version": session_version,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a session token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except (jwt.InvalidTokenError, ValidationError):
        raise JWTError("Invalid token")
