"""
Dashboard schemas.
"""
from typing import Dict, List, Literal, Optional

from taskmatch.models.booking import Booking
from taskmatch.models.experience import Experience
from taskmatch.models.job import Job
from taskmatch.models.resume import Resume
from taskmatch.models.user import User
from taskmatch.schemas.application import ApplicationsByStatus
from taskmatch.schemas.base import BaseSchema


class CustomerJobSummary(BaseSchema):
    job: Job
    application_count: int
    pending_count: int


class CustomerDashboard(BaseSchema):
    role: Literal["customer"] = "customer"
    user: User
    jobs: List[CustomerJobSummary]
    status_totals: Dict[str, int]


class FreelancerDashboard(BaseSchema):
    role: Literal["freelancer"] = "freelancer"
    user: User
    open_jobs: List[Job]
    applications: ApplicationsByStatus
    upcoming_bookings: List[Booking]
    active_resume: Optional[Resume] = None
    experiences: List[Experience] = []
