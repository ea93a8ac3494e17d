"""
Authentication service - opens, resolves and closes HTTP sessions.

Every login or signup gets a fresh session id. The bearer token carries
that id; the identity itself is read back from the session store on
each request.
"""
from typing import Optional

from taskmatch.core.config import settings
from taskmatch.core.exceptions import InvalidTokenException
from taskmatch.core.security import (
    create_access_token,
    decode_token,
    new_session_id,
    verify_token_type,
)
from taskmatch.core.storage import KeyValueStore
from taskmatch.core.store import MarketplaceStore
from taskmatch.models.user import User, UserRole
from taskmatch.schemas.auth import SessionResponse
from taskmatch.services.session_service import SessionStore


class AuthService:
    """Handles all authentication business logic."""

    async def login(
        self,
        store: MarketplaceStore,
        kv: KeyValueStore,
        *,
        email: str,
        password: str,
    ) -> SessionResponse:
        """
        Log in and return a session token.

        Raises:
            InvalidCredentialsException: If no identity uses this email.
        """
        session = SessionStore(store, kv, new_session_id())
        user = await session.login(email, password)
        return self._issue(session, user)

    async def signup(
        self,
        store: MarketplaceStore,
        kv: KeyValueStore,
        *,
        email: str,
        password: str,
        name: str,
        role: UserRole,
    ) -> SessionResponse:
        """Register a new identity and return a session token."""
        session = SessionStore(store, kv, new_session_id())
        user = await session.signup(email, password, name, role)
        return self._issue(session, user)

    async def resolve(
        self,
        store: MarketplaceStore,
        kv: KeyValueStore,
        token: str,
    ) -> SessionStore:
        """
        Restore the session a token points at.

        Raises:
            InvalidTokenException: If the token is malformed, expired, or
                its session has been logged out.
        """
        payload = decode_token(token)
        if not payload or not verify_token_type(payload, "access"):
            raise InvalidTokenException()

        session_id: Optional[str] = payload.get("sid")
        if not session_id:
            raise InvalidTokenException()

        session = SessionStore(store, kv, session_id)
        user = await session.restore()
        if not user or user.id != payload.get("sub"):
            raise InvalidTokenException()

        return session

    def _issue(self, session: SessionStore, user: User) -> SessionResponse:
        return SessionResponse(
            access_token=create_access_token(user.id, session.session_id),
            expires_in=settings.access_token_expire_minutes * 60,
            user=user,
        )
