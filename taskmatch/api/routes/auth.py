"""
Authentication routes.

Passwords are collected but never verified; a session is opened for whoever
owns the email.
"""
from fastapi import APIRouter, Depends, Request, status

from taskmatch.api.deps import get_current_session, get_kv_store
from taskmatch.core.rate_limit import RATE_AUTH, limiter
from taskmatch.core.storage import KeyValueStore
from taskmatch.core.store import MarketplaceStore, get_store
from taskmatch.schemas.auth import LoginRequest, SessionResponse, SignupRequest
from taskmatch.schemas.base import MessageResponse
from taskmatch.services.auth_service import AuthService
from taskmatch.services.session_service import SessionStore

router = APIRouter(prefix="/auth", tags=["auth"])

auth_service = AuthService()


@router.post("/signup", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(RATE_AUTH)
async def signup(
    request: Request,
    payload: SignupRequest,
    store: MarketplaceStore = Depends(get_store),
    kv: KeyValueStore = Depends(get_kv_store),
):
    """
    Register a new customer or freelancer.

    Returns a bearer token for the new session.
    """
    return await auth_service.signup(
        store,
        kv,
        email=payload.email,
        password=payload.password,
        name=payload.name,
        role=payload.role,
    )


@router.post("/login", response_model=SessionResponse)
@limiter.limit(RATE_AUTH)
async def login(
    request: Request,
    payload: LoginRequest,
    store: MarketplaceStore = Depends(get_store),
    kv: KeyValueStore = Depends(get_kv_store),
):
    """Log in by email. Returns a bearer token for the new session."""
    return await auth_service.login(store, kv, email=payload.email, password=payload.password)


@router.post("/logout", response_model=MessageResponse)
async def logout(session: SessionStore = Depends(get_current_session)):
    """
    End the current session.

    The token stops working immediately because its session no longer
    holds an identity.
    """
    await session.logout()
    return MessageResponse(message="Logged out successfully")
