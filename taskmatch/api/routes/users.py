"""
User routes - the signed-in user's own profile.
"""
from fastapi import APIRouter, Depends

from taskmatch.api.deps import get_current_session, get_current_user
from taskmatch.models.user import User
from taskmatch.schemas.user import ProfileUpdate
from taskmatch.services.session_service import SessionStore

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=User)
async def get_current_user_profile(current_user: User = Depends(get_current_user)):
    """Get the current user's profile."""
    return current_user


@router.patch("/me", response_model=User)
async def update_current_user(
    payload: ProfileUpdate,
    session: SessionStore = Depends(get_current_session),
):
    """Update name, bio, skills or avatar. Omitted fields are left unchanged."""
    return await session.update_profile(payload.model_dump(exclude_unset=True))
