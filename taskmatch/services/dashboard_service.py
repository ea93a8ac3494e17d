"""
Dashboard service - the landing view, shaped by the caller's role.
"""
import datetime as dt
from typing import Optional, Union

from taskmatch.core.store import MarketplaceStore
from taskmatch.models.application import APPLICATION_STATUS_PENDING
from taskmatch.models.job import JOB_STATUS_ASSIGNED, JOB_STATUS_COMPLETED, JOB_STATUS_OPEN
from taskmatch.models.user import User
from taskmatch.schemas.dashboard import (
    CustomerDashboard,
    CustomerJobSummary,
    FreelancerDashboard,
)
from taskmatch.services.application_service import ApplicationService
from taskmatch.services.booking_service import BookingService
from taskmatch.services.job_service import JobService
from taskmatch.services.profile_service import ProfileService
from taskmatch.services.resume_service import ResumeService


class DashboardService:

    def __init__(self):
        self.job_service = JobService()
        self.application_service = ApplicationService()
        self.booking_service = BookingService()
        self.resume_service = ResumeService()
        self.profile_service = ProfileService()

    def dashboard_for(
        self,
        store: MarketplaceStore,
        user: User,
        today: Optional[dt.date] = None,
    ) -> Union[CustomerDashboard, FreelancerDashboard]:
        if user.is_customer:
            return self.customer_dashboard(store, user)
        return self.freelancer_dashboard(store, user, today or dt.date.today())

    def customer_dashboard(self, store: MarketplaceStore, customer: User) -> CustomerDashboard:
        """The customer's own jobs with application counts."""
        totals = {JOB_STATUS_OPEN: 0, JOB_STATUS_ASSIGNED: 0, JOB_STATUS_COMPLETED: 0}
        summaries = []
        for job in self.job_service.jobs_by_customer(store, customer.id):
            applications = self.application_service.applications_for_job(store, job.id)
            summaries.append(
                CustomerJobSummary(
                    job=job,
                    application_count=len(applications),
                    pending_count=sum(1 for a in applications if a.status == APPLICATION_STATUS_PENDING),
                )
            )
            totals[job.status] += 1

        return CustomerDashboard(user=customer, jobs=summaries, status_totals=totals)

    def freelancer_dashboard(
        self,
        store: MarketplaceStore,
        freelancer: User,
        today: dt.date,
    ) -> FreelancerDashboard:
        return FreelancerDashboard(
            user=freelancer,
            open_jobs=self.job_service.open_jobs_for_freelancers(store),
            applications=self.application_service.applications_by_status(store, freelancer.id),
            upcoming_bookings=self.booking_service.upcoming_bookings(store, freelancer.id, today),
            active_resume=self.resume_service.active_resume(store, freelancer.id),
            experiences=self.profile_service.experiences_for_freelancer(store, freelancer.id),
        )
