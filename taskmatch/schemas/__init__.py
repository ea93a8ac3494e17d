"""
Pydantic schemas for API validation and serialization.
"""
from taskmatch.schemas.base import (
    BaseSchema,
    MessageResponse,
    ErrorResponse,
)
from taskmatch.schemas.auth import (
    LoginRequest,
    SignupRequest,
    SessionResponse,
)
from taskmatch.schemas.user import ProfileUpdate
from taskmatch.schemas.job import JobCreate
from taskmatch.schemas.application import ApplicationCreate, ApplicationsByStatus
from taskmatch.schemas.booking import AvailabilityResponse
from taskmatch.schemas.resume import ResumeUpload
from taskmatch.schemas.profile import (
    ServiceCreate,
    ServiceResponse,
    RatingSummary,
    FreelancerProfileResponse,
    ExperienceCreate,
)
from taskmatch.schemas.map import Coordinates, JobMarker, MapResponse
from taskmatch.schemas.dashboard import (
    CustomerJobSummary,
    CustomerDashboard,
    FreelancerDashboard,
)
from taskmatch.schemas.navigation import RouteDecision

__all__ = [
    # Base
    "BaseSchema",
    "MessageResponse",
    "ErrorResponse",
    # Auth
    "LoginRequest",
    "SignupRequest",
    "SessionResponse",
    # Users
    "ProfileUpdate",
    # Jobs and applications
    "JobCreate",
    "ApplicationCreate",
    "ApplicationsByStatus",
    "AvailabilityResponse",
    # Resumes
    "ResumeUpload",
    # Profiles
    "ServiceCreate",
    "ServiceResponse",
    "RatingSummary",
    "FreelancerProfileResponse",
    "ExperienceCreate",
    # Map
    "Coordinates",
    "JobMarker",
    "MapResponse",
    # Dashboard
    "CustomerJobSummary",
    "CustomerDashboard",
    "FreelancerDashboard",
    # Navigation
    "RouteDecision",
]
