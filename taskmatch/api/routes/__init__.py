"""
API Routes package.
"""
from fastapi import APIRouter

from taskmatch.api.routes.auth import router as auth_router
from taskmatch.api.routes.health import router as health_router
from taskmatch.api.routes.users import router as users_router
from taskmatch.api.routes.dashboard import router as dashboard_router
from taskmatch.api.routes.jobs import router as jobs_router
from taskmatch.api.routes.applications import router as applications_router
from taskmatch.api.routes.bookings import router as bookings_router
from taskmatch.api.routes.resumes import router as resumes_router
from taskmatch.api.routes.freelancers import router as freelancers_router
from taskmatch.api.routes.map import router as map_router
from taskmatch.api.routes.navigation import router as navigation_router

# Main API router
api_router = APIRouter()

# Include all routers
api_router.include_router(health_router)
api_router.include_router(auth_router)
api_router.include_router(users_router)
api_router.include_router(dashboard_router)
api_router.include_router(jobs_router)
api_router.include_router(applications_router)
api_router.include_router(bookings_router)
api_router.include_router(resumes_router)
api_router.include_router(freelancers_router)
api_router.include_router(map_router)
api_router.include_router(navigation_router)

__all__ = [
    "api_router",
    "auth_router",
    "health_router",
    "users_router",
    "dashboard_router",
    "jobs_router",
    "applications_router",
    "bookings_router",
    "resumes_router",
    "freelancers_router",
    "map_router",
    "navigation_router",
]
