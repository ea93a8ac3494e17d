"""
Rate limiting configuration using slowapi.

Limits live in process memory by default; point RATE_LIMIT_STORAGE_URI at
Redis to share them across workers.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address

from taskmatch.core.config import settings


limiter = Limiter(
    key_func=get_remote_address,
    storage_uri=settings.rate_limit_storage_uri,
    strategy="fixed-window",
    enabled=settings.rate_limit_enabled,
)

# Pre-defined rate limit strings for use in route decorators:
#   @limiter.limit(RATE_AUTH)
RATE_AUTH = "5/minute"           # login, signup
RATE_RESUME_UPLOAD = "10/hour"
