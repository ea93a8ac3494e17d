"""
Custom exceptions for the application.
All API exceptions should inherit from APIException for consistent error handling.
"""
from typing import Optional, Any


class APIException(Exception):
    """
    Base exception for all API errors.
    Provides consistent error response format.
    """

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: Optional[Any] = None,
    ):
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details
        super().__init__(self.message)


class BadRequestException(APIException):
    """400 Bad Request"""

    def __init__(self, message: str = "Bad request", code: str = "BAD_REQUEST"):
        super().__init__(400, code, message)


class UnauthorizedException(APIException):
    """401 Unauthorized"""

    def __init__(self, message: str = "Unauthorized", code: str = "UNAUTHORIZED"):
        super().__init__(401, code, message)


class ForbiddenException(APIException):
    """403 Forbidden"""

    def __init__(self, message: str = "Forbidden", code: str = "FORBIDDEN"):
        super().__init__(403, code, message)


class NotFoundException(APIException):
    """404 Not Found"""

    def __init__(self, message: str = "Resource not found", code: str = "NOT_FOUND"):
        super().__init__(404, code, message)


class ConflictException(APIException):
    """409 Conflict"""

    def __init__(self, message: str = "Resource conflict", code: str = "CONFLICT"):
        super().__init__(409, code, message)


# Authentication specific exceptions
class InvalidCredentialsException(UnauthorizedException):
    """No identity registered under the given email"""

    def __init__(self):
        super().__init__(
            message="Invalid credentials",
            code="INVALID_CREDENTIALS",
        )


class InvalidTokenException(UnauthorizedException):
    """Token is invalid, expired, or its session has ended"""

    def __init__(self):
        super().__init__(
            message="Invalid token",
            code="INVALID_TOKEN",
        )


class RoleRequiredException(ForbiddenException):
    """Authenticated, but the route belongs to the other side of the marketplace"""

    def __init__(self, role: str):
        super().__init__(
            message=f"This action is only available to {role}s",
            code="ROLE_REQUIRED",
        )


# Resource specific exceptions
class FreelancerNotFoundException(NotFoundException):
    """Freelancer not found"""

    def __init__(self):
        super().__init__(message="Freelancer not found", code="FREELANCER_NOT_FOUND")


class JobNotFoundException(NotFoundException):
    """Job not found"""

    def __init__(self):
        super().__init__(message="Job not found", code="JOB_NOT_FOUND")


class ApplicationNotFoundException(NotFoundException):
    """Application not found"""

    def __init__(self):
        super().__init__(message="Application not found", code="APPLICATION_NOT_FOUND")


class ResumeNotFoundException(NotFoundException):
    """Resume not found in the user's list"""

    def __init__(self):
        super().__init__(message="Resume not found", code="RESUME_NOT_FOUND")


# Marketplace rule violations
class JobNotOpenException(ConflictException):
    """Job no longer accepts applications or acceptances"""

    def __init__(self):
        super().__init__(
            message="This job is no longer open",
            code="JOB_NOT_OPEN",
        )


class DuplicateApplicationException(ConflictException):
    """Freelancer already applied to this job"""

    def __init__(self):
        super().__init__(
            message="You have already applied to this job",
            code="DUPLICATE_APPLICATION",
        )


class ApplicationAlreadyDecidedException(ConflictException):
    """Accepted and rejected applications are terminal"""

    def __init__(self, status: str):
        super().__init__(
            message=f"Application has already been {status}",
            code="APPLICATION_ALREADY_DECIDED",
        )


class ScheduleConflictException(ConflictException):
    """Freelancer already has a scheduled booking in that slot"""

    def __init__(self):
        super().__init__(
            message="You already have a booking for this date and time slot",
            code="SCHEDULE_CONFLICT",
        )


class ResumeLimitException(ConflictException):
    """Resume capacity reached"""

    def __init__(self, limit: int):
        super().__init__(
            message=f"Resume limit reached. You can keep at most {limit} resumes. "
                    "Delete an existing one before uploading a new one.",
            code="RESUME_LIMIT_REACHED",
        )


class NoResumesException(BadRequestException):
    """Setting an active resume requires at least one resume"""

    def __init__(self):
        super().__init__(
            message="You have no resumes uploaded",
            code="NO_RESUMES",
        )
