"""
Navigation route - tells the web client where a path leads.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from taskmatch.api.navigation import resolve
from taskmatch.api.deps import get_optional_user
from taskmatch.models.user import User
from taskmatch.schemas.navigation import RouteDecision

router = APIRouter(prefix="/navigation", tags=["navigation"])


@router.get("/resolve", response_model=RouteDecision)
async def resolve_path(
    path: str = Query(..., min_length=1),
    current_user: Optional[User] = Depends(get_optional_user),
):
    return resolve(path, current_user)
