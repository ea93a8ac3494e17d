"""
Freelancer routes - public profiles, the service catalog and work history.
"""
from typing import List

from fastapi import APIRouter, Depends, Query, status

from taskmatch.api.deps import require_freelancer
from taskmatch.core.store import MarketplaceStore, get_store
from taskmatch.models.experience import Experience
from taskmatch.models.user import User
from taskmatch.schemas.profile import (
    ExperienceCreate,
    FreelancerProfileResponse,
    ServiceCreate,
    ServiceResponse,
)
from taskmatch.services.profile_service import ProfileService, ReviewSort, format_rate

router = APIRouter(prefix="/freelancers", tags=["freelancers"])

profile_service = ProfileService()


@router.post("/me/services", response_model=ServiceResponse, status_code=status.HTTP_201_CREATED)
async def create_service(
    payload: ServiceCreate,
    current_user: User = Depends(require_freelancer),
    store: MarketplaceStore = Depends(get_store),
):
    """Add a service to the current freelancer's catalog."""
    service = await profile_service.create_service(store, current_user, payload)
    return ServiceResponse(service=service, display_rate=format_rate(service.rate, service.rate_unit))


@router.get("/me/experience", response_model=List[Experience])
async def list_experience(
    current_user: User = Depends(require_freelancer),
    store: MarketplaceStore = Depends(get_store),
):
    return profile_service.experiences_for_freelancer(store, current_user.id)


@router.post("/me/experience", response_model=Experience, status_code=status.HTTP_201_CREATED)
async def add_experience(
    payload: ExperienceCreate,
    current_user: User = Depends(require_freelancer),
    store: MarketplaceStore = Depends(get_store),
):
    """Add a position to the top of the current freelancer's timeline."""
    return await profile_service.add_experience(store, current_user, payload)


@router.get("/{freelancer_id}", response_model=FreelancerProfileResponse)
async def get_freelancer_profile(
    freelancer_id: str,
    sort: ReviewSort = Query("newest", description="Review order"),
    store: MarketplaceStore = Depends(get_store),
):
    """
    Public profile: bio, skills, services with display rates, and reviews.

    No authentication required.
    """
    return profile_service.public_profile(store, freelancer_id, sort)
