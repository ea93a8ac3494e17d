"""
Repository layer - data access.

Repositories read and replace MarketplaceStore collections.
They contain NO business logic - that belongs in services.
"""
from taskmatch.repositories.base import BaseRepository
from taskmatch.repositories.user_repository import UserRepository
from taskmatch.repositories.job_repository import JobRepository
from taskmatch.repositories.application_repository import ApplicationRepository
from taskmatch.repositories.booking_repository import BookingRepository
from taskmatch.repositories.profile_repository import (
    ExperienceRepository,
    ReviewRepository,
    ServiceOfferingRepository,
)
from taskmatch.repositories.resume_repository import ResumeRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "JobRepository",
    "ApplicationRepository",
    "BookingRepository",
    "ExperienceRepository",
    "ReviewRepository",
    "ServiceOfferingRepository",
    "ResumeRepository",
]
