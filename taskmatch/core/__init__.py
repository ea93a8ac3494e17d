"""Core module exports."""
from taskmatch.core.config import settings, get_settings
from taskmatch.core.store import MarketplaceStore, create_store, get_store
from taskmatch.core.storage import KeyValueStore, create_kv_store
from taskmatch.core.security import (
    create_access_token,
    decode_token,
    new_session_id,
    verify_token_type,
)
from taskmatch.core.exceptions import (
    APIException,
    BadRequestException,
    UnauthorizedException,
    ForbiddenException,
    NotFoundException,
    ConflictException,
    InvalidCredentialsException,
    InvalidTokenException,
    RoleRequiredException,
    FreelancerNotFoundException,
    JobNotFoundException,
    ApplicationNotFoundException,
    ResumeNotFoundException,
    JobNotOpenException,
    DuplicateApplicationException,
    ApplicationAlreadyDecidedException,
    ScheduleConflictException,
    ResumeLimitException,
    NoResumesException,
)

__all__ = [
    # Config
    "settings",
    "get_settings",
    # Store
    "MarketplaceStore",
    "create_store",
    "get_store",
    "KeyValueStore",
    "create_kv_store",
    # Security
    "create_access_token",
    "decode_token",
    "new_session_id",
    "verify_token_type",
    # Exceptions
    "APIException",
    "BadRequestException",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    "ConflictException",
    "InvalidCredentialsException",
    "InvalidTokenException",
    "RoleRequiredException",
    "FreelancerNotFoundException",
    "JobNotFoundException",
    "ApplicationNotFoundException",
    "ResumeNotFoundException",
    "JobNotOpenException",
    "DuplicateApplicationException",
    "ApplicationAlreadyDecidedException",
    "ScheduleConflictException",
    "ResumeLimitException",
    "NoResumesException",
]
