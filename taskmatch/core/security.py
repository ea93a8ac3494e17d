"""
Session token utilities.

A token only names a session; the identity itself lives in the session
storage, so logging out (clearing that storage) invalidates the token
even before it expires.
"""
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional, Any
from jose import JWTError, jwt

from taskmatch.core.config import settings


def new_session_id() -> str:
    """Opaque, URL-safe session identifier."""
    return secrets.token_urlsafe(16)


def create_access_token(
    user_id: str,
    session_id: str,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Create a JWT access token bound to a session.

    Args:
        user_id: Identity the session was opened for
        session_id: Key of the persisted session identity
        expires_delta: Custom expiration time

    Returns:
        Encoded JWT token string
    """
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(
            minutes=settings.access_token_expire_minutes
        )

    to_encode = {"sub": user_id, "sid": session_id, "exp": expire, "type": "access"}
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_token(token: str) -> Optional[dict[str, Any]]:
    """
    Decode and validate a JWT token.

    Returns:
        Decoded payload or None if invalid
    """
    try:
        return jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.algorithm],
        )
    except JWTError:
        return None


def verify_token_type(payload: dict[str, Any], expected_type: str) -> bool:
    """Verify that a token is of the expected type."""
    return payload.get("type") == expected_type
