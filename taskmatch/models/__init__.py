"""
Domain models.

Plain pydantic records held by the MarketplaceStore.
"""
from taskmatch.models.base import Entity
from taskmatch.models.user import User, ROLE_CUSTOMER, ROLE_FREELANCER
from taskmatch.models.job import (
    Address,
    FlexibleSchedule,
    Job,
    Schedule,
    SpecificSchedule,
)
from taskmatch.models.application import JobApplication
from taskmatch.models.booking import Booking
from taskmatch.models.service_offering import ServiceOffering
from taskmatch.models.review import Review
from taskmatch.models.resume import Resume
from taskmatch.models.experience import Experience

__all__ = [
    "Entity",
    "User",
    "ROLE_CUSTOMER",
    "ROLE_FREELANCER",
    "Address",
    "FlexibleSchedule",
    "Job",
    "Schedule",
    "SpecificSchedule",
    "JobApplication",
    "Booking",
    "ServiceOffering",
    "Review",
    "Resume",
    "Experience",
]
