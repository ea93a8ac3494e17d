"""
API dependencies for dependency injection.
"""
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from taskmatch.core.exceptions import (
    InvalidTokenException,
    RoleRequiredException,
    UnauthorizedException,
)
from taskmatch.core.logging import bind_identity
from taskmatch.core.storage import KeyValueStore
from taskmatch.core.store import MarketplaceStore, get_store
from taskmatch.models.user import ROLE_CUSTOMER, ROLE_FREELANCER, User
from taskmatch.services.auth_service import AuthService
from taskmatch.services.session_service import SessionStore


# Security scheme
security = HTTPBearer(auto_error=False)

auth_service = AuthService()


def get_kv_store(request: Request) -> KeyValueStore:
    """The session key-value store opened by the app lifespan."""
    return request.app.state.kv


async def get_current_session(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    store: MarketplaceStore = Depends(get_store),
    kv: KeyValueStore = Depends(get_kv_store),
) -> SessionStore:
    """
    Restore the session behind the bearer token.

    Raises:
        UnauthorizedException: If no token provided
        InvalidTokenException: If the token is invalid, expired or logged out
    """
    if not credentials:
        raise UnauthorizedException("Authentication required")

    return await auth_service.resolve(store, kv, credentials.credentials)


async def get_current_user(
    session: SessionStore = Depends(get_current_session),
) -> User:
    """Get the current authenticated user."""
    user = session.current_user
    if not user:
        raise InvalidTokenException()

    bind_identity(user.id, user.role)
    return user


async def require_customer(
    current_user: User = Depends(get_current_user),
) -> User:
    """
    Raises:
        RoleRequiredException: If the user is a freelancer
    """
    if not current_user.is_customer:
        raise RoleRequiredException(ROLE_CUSTOMER)
    return current_user


async def require_freelancer(
    current_user: User = Depends(get_current_user),
) -> User:
    """
    Raises:
        RoleRequiredException: If the user is a customer
    """
    if not current_user.is_freelancer:
        raise RoleRequiredException(ROLE_FREELANCER)
    return current_user


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    store: MarketplaceStore = Depends(get_store),
    kv: KeyValueStore = Depends(get_kv_store),
) -> Optional[User]:
    """
    Get the current user if authenticated, None otherwise.
    Useful for endpoints that work with or without authentication.
    """
    if not credentials:
        return None

    try:
        session = await auth_service.resolve(store, kv, credentials.credentials)
    except UnauthorizedException:
        return None
    return session.current_user
