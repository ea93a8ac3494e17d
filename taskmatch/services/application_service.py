"""
Application service - all application business logic lives here.

Business rules
──────────────
• Applications go to open jobs only
• One application per freelancer per job
• A proposed date/slot must be free in the freelancer's own calendar
• pending → accepted | rejected, and both outcomes are final
• Accepting assigns the job and, when a slot was proposed, books it
"""
from typing import List, Optional

from taskmatch.core.exceptions import (
    ApplicationAlreadyDecidedException,
    DuplicateApplicationException,
    JobNotFoundException,
    JobNotOpenException,
    ScheduleConflictException,
)
from taskmatch.core.logging import get_logger
from taskmatch.core.store import MarketplaceStore
from taskmatch.models.application import (
    APPLICATION_STATUS_ACCEPTED,
    APPLICATION_STATUS_PENDING,
    APPLICATION_STATUS_REJECTED,
    ApplicationDecision,
    JobApplication,
)
from taskmatch.models.booking import BOOKING_STATUS_SCHEDULED
from taskmatch.models.job import JOB_STATUS_ASSIGNED
from taskmatch.models.user import User
from taskmatch.repositories.application_repository import ApplicationRepository
from taskmatch.repositories.booking_repository import BookingRepository
from taskmatch.repositories.job_repository import JobRepository
from taskmatch.schemas.application import ApplicationCreate, ApplicationsByStatus
from taskmatch.services.booking_service import BookingService

logger = get_logger(__name__)


class ApplicationService:

    def __init__(self):
        self.application_repo = ApplicationRepository()
        self.job_repo = JobRepository()
        self.booking_repo = BookingRepository()
        self.booking_service = BookingService()

    # ── Submit ───────────────────────────────────────────────────────────────

    async def submit_application(
        self,
        store: MarketplaceStore,
        freelancer: User,
        job_id: str,
        data: ApplicationCreate,
    ) -> JobApplication:
        """
        Record a freelancer's bid on a job as `pending`.

        Raises:
            JobNotFoundException: If the job doesn't exist.
            JobNotOpenException: If the job was already assigned or completed.
            DuplicateApplicationException: If this freelancer already applied.
            ScheduleConflictException: If the proposed slot is already booked
                for this freelancer.
        """
        await store.simulate_latency()

        job = self.job_repo.get_by_id(store, job_id)
        if not job:
            raise JobNotFoundException()
        if not job.is_open:
            raise JobNotOpenException()

        if self.has_applied(store, freelancer.id, job_id):
            raise DuplicateApplicationException()

        if data.proposed_date is not None and not self.booking_service.is_freelancer_available(
            store, freelancer.id, data.proposed_date, data.proposed_time_slot
        ):
            raise ScheduleConflictException()

        application = self.application_repo.create(
            store,
            job_id=job_id,
            freelancer_id=freelancer.id,
            freelancer_name=freelancer.name,
            cover_letter=data.cover_letter,
            proposed_date=data.proposed_date,
            proposed_time_slot=data.proposed_time_slot,
            status=APPLICATION_STATUS_PENDING,
        )
        logger.info(
            "application_submitted",
            application_id=application.id,
            job_id=job_id,
            freelancer_id=freelancer.id,
            has_proposal=application.has_proposal,
        )
        return application

    # ── Decide ───────────────────────────────────────────────────────────────

    async def set_application_status(
        self,
        store: MarketplaceStore,
        application_id: str,
        status: ApplicationDecision,
    ) -> Optional[JobApplication]:
        """
        Accept or reject a pending application.

        An unknown id changes nothing and returns None; callers decide whether
        that is an error.

        Raises:
            ApplicationAlreadyDecidedException: If the application is no longer pending.
            JobNotOpenException: If accepting for a job that is already assigned.
            ScheduleConflictException: If accepting a proposal whose slot the
                freelancer has been booked for since applying.
        """
        await store.simulate_latency()

        application = self.application_repo.get_by_id(store, application_id)
        if not application:
            logger.warning("application_not_found", application_id=application_id)
            return None

        if application.is_decided:
            raise ApplicationAlreadyDecidedException(application.status)

        if status == APPLICATION_STATUS_ACCEPTED:
            job = self.job_repo.get_by_id(store, application.job_id)
            if job is not None and not job.is_open:
                raise JobNotOpenException()
            if application.has_proposal and not self.booking_service.is_freelancer_available(
                store, application.freelancer_id, application.proposed_date, application.proposed_time_slot
            ):
                logger.info(
                    "accept_blocked_by_booking",
                    application_id=application.id,
                    freelancer_id=application.freelancer_id,
                )
                raise ScheduleConflictException()

            application = self.application_repo.update(store, application, status=status)
            if job is not None:
                self.job_repo.update(store, job, status=JOB_STATUS_ASSIGNED)

            if application.has_proposal:
                booking = self.booking_repo.create(
                    store,
                    freelancer_id=application.freelancer_id,
                    job_id=application.job_id,
                    application_id=application.id,
                    date=application.proposed_date,
                    time_slot=application.proposed_time_slot,
                    status=BOOKING_STATUS_SCHEDULED,
                )
                logger.info(
                    "booking_created",
                    booking_id=booking.id,
                    freelancer_id=booking.freelancer_id,
                    date=booking.date.isoformat(),
                    time_slot=booking.time_slot,
                )
        else:
            application = self.application_repo.update(store, application, status=APPLICATION_STATUS_REJECTED)

        logger.info(
            "application_status_changed",
            application_id=application.id,
            job_id=application.job_id,
            status=application.status,
        )
        return application

    # ── Queries ──────────────────────────────────────────────────────────────

    def get_application(self, store: MarketplaceStore, application_id: str) -> Optional[JobApplication]:
        return self.application_repo.get_by_id(store, application_id)

    def has_applied(self, store: MarketplaceStore, freelancer_id: str, job_id: str) -> bool:
        return self.application_repo.find_for_freelancer_and_job(store, freelancer_id, job_id) is not None

    def applications_for_freelancer(self, store: MarketplaceStore, freelancer_id: str) -> List[JobApplication]:
        return self.application_repo.find_by_freelancer(store, freelancer_id)

    def applications_for_job(self, store: MarketplaceStore, job_id: str) -> List[JobApplication]:
        return self.application_repo.find_by_job(store, job_id)

    def applications_by_status(self, store: MarketplaceStore, freelancer_id: str) -> ApplicationsByStatus:
        grouped = ApplicationsByStatus()
        for application in self.applications_for_freelancer(store, freelancer_id):
            getattr(grouped, application.status).append(application)
        return grouped
