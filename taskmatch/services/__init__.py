"""
Service layer - business logic and orchestration.

Services hold the marketplace rules, coordinate repositories, and log
domain events. Every mutating method awaits the store's simulated latency
before touching state.

RULE: Routes call services. Services call repositories. Never the reverse.
"""
from taskmatch.services.application_service import ApplicationService
from taskmatch.services.auth_service import AuthService
from taskmatch.services.booking_service import BookingService
from taskmatch.services.dashboard_service import DashboardService
from taskmatch.services.job_service import JobService
from taskmatch.services.profile_service import ProfileService
from taskmatch.services.resume_service import ResumeService
from taskmatch.services.session_service import SessionStore

__all__ = [
    "ApplicationService",
    "AuthService",
    "BookingService",
    "DashboardService",
    "JobService",
    "ProfileService",
    "ResumeService",
    "SessionStore",
]
