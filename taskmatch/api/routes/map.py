"""
Map routes.
"""
from fastapi import APIRouter, Depends, Query

from taskmatch.api.deps import get_current_user
from taskmatch.core.store import MarketplaceStore, get_store
from taskmatch.models.user import User
from taskmatch.schemas.map import MapResponse
from taskmatch.services.job_service import JobService
from taskmatch.services.map_service import get_geocoder, job_map

router = APIRouter(prefix="/map", tags=["map"])

job_service = JobService()


@router.get("/markers", response_model=MapResponse)
async def get_job_markers(
    search: str = Query("", max_length=200),
    current_user: User = Depends(get_current_user),
    store: MarketplaceStore = Depends(get_store),
):
    """Markers for open jobs that have a street address."""
    jobs = job_service.open_jobs_for_freelancers(store)
    return await job_map(jobs, search, get_geocoder())
