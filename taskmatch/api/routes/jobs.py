"""
Job routes.

Thin controllers - all business logic lives in JobService / ApplicationService.
"""
from typing import List

from fastapi import APIRouter, Depends, Query, status

from taskmatch.api.deps import get_current_user, require_customer, require_freelancer
from taskmatch.core.exceptions import ForbiddenException
from taskmatch.core.store import MarketplaceStore, get_store
from taskmatch.models.application import JobApplication
from taskmatch.models.job import Job
from taskmatch.models.user import User
from taskmatch.schemas.application import ApplicationCreate
from taskmatch.schemas.job import JobCreate
from taskmatch.services.application_service import ApplicationService
from taskmatch.services.job_service import JobService, search_jobs

router = APIRouter(prefix="/jobs", tags=["jobs"])

job_service = JobService()
application_service = ApplicationService()


@router.post("", response_model=Job, status_code=status.HTTP_201_CREATED)
async def create_job(
    payload: JobCreate,
    current_user: User = Depends(require_customer),
    store: MarketplaceStore = Depends(get_store),
):
    """Post a new job. It starts `open`."""
    return await job_service.create_job(store, current_user, payload)


@router.get("/mine", response_model=List[Job])
async def list_my_jobs(
    current_user: User = Depends(require_customer),
    store: MarketplaceStore = Depends(get_store),
):
    """Jobs the current customer posted."""
    return job_service.jobs_by_customer(store, current_user.id)


@router.get("/open", response_model=List[Job])
async def list_open_jobs(
    search: str = Query("", max_length=200, description="Title, description, skill, city or state"),
    current_user: User = Depends(require_freelancer),
    store: MarketplaceStore = Depends(get_store),
):
    """Jobs still taking applications, optionally filtered by a search term."""
    return search_jobs(job_service.open_jobs_for_freelancers(store), search)


@router.get("/{job_id}", response_model=Job)
async def get_job(
    job_id: str,
    current_user: User = Depends(get_current_user),
    store: MarketplaceStore = Depends(get_store),
):
    """Get job details."""
    return job_service.get_job(store, job_id)


@router.get("/{job_id}/applications", response_model=List[JobApplication])
async def list_job_applications(
    job_id: str,
    current_user: User = Depends(require_customer),
    store: MarketplaceStore = Depends(get_store),
):
    """Applications received for one of the current customer's jobs."""
    job = job_service.get_job(store, job_id)
    if job.customer_id != current_user.id:
        raise ForbiddenException("You can only view applications for your own jobs")
    return application_service.applications_for_job(store, job_id)


@router.post(
    "/{job_id}/applications",
    response_model=JobApplication,
    status_code=status.HTTP_201_CREATED,
)
async def apply_to_job(
    job_id: str,
    payload: ApplicationCreate,
    current_user: User = Depends(require_freelancer),
    store: MarketplaceStore = Depends(get_store),
):
    """Apply to an open job, optionally proposing a date and time slot."""
    return await application_service.submit_application(store, current_user, job_id, payload)
