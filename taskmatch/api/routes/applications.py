"""
Application routes.
"""
from fastapi import APIRouter, Depends

from taskmatch.api.deps import require_customer, require_freelancer
from taskmatch.core.exceptions import ApplicationNotFoundException, ForbiddenException
from taskmatch.core.store import MarketplaceStore, get_store
from taskmatch.models.application import (
    APPLICATION_STATUS_ACCEPTED,
    APPLICATION_STATUS_REJECTED,
    ApplicationDecision,
    JobApplication,
)
from taskmatch.models.user import User
from taskmatch.schemas.application import ApplicationsByStatus
from taskmatch.services.application_service import ApplicationService
from taskmatch.services.job_service import JobService

router = APIRouter(prefix="/applications", tags=["applications"])

application_service = ApplicationService()
job_service = JobService()


@router.get("/mine", response_model=ApplicationsByStatus)
async def list_my_applications(
    current_user: User = Depends(require_freelancer),
    store: MarketplaceStore = Depends(get_store),
):
    """The current freelancer's applications, grouped by status."""
    return application_service.applications_by_status(store, current_user.id)


@router.post("/{application_id}/accept", response_model=JobApplication)
async def accept_application(
    application_id: str,
    current_user: User = Depends(require_customer),
    store: MarketplaceStore = Depends(get_store),
):
    """
    Accept an application.

    The job becomes `assigned`; a proposed date and slot becomes a booking.
    """
    return await _decide(store, current_user, application_id, APPLICATION_STATUS_ACCEPTED)


@router.post("/{application_id}/reject", response_model=JobApplication)
async def reject_application(
    application_id: str,
    current_user: User = Depends(require_customer),
    store: MarketplaceStore = Depends(get_store),
):
    """Reject an application."""
    return await _decide(store, current_user, application_id, APPLICATION_STATUS_REJECTED)


async def _decide(
    store: MarketplaceStore,
    customer: User,
    application_id: str,
    decision: ApplicationDecision,
) -> JobApplication:
    application = application_service.get_application(store, application_id)
    if application:
        job = job_service.get_job(store, application.job_id)
        if job.customer_id != customer.id:
            raise ForbiddenException("You can only decide applications for your own jobs")

    updated = await application_service.set_application_status(store, application_id, decision)
    if updated is None:
        raise ApplicationNotFoundException()
    return updated
