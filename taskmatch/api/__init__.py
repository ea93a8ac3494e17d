"""
API package.
"""
from taskmatch.api.routes import api_router
from taskmatch.api.deps import (
    get_current_user,
    get_optional_user,
    require_customer,
    require_freelancer,
)

__all__ = [
    "api_router",
    "get_current_user",
    "get_optional_user",
    "require_customer",
    "require_freelancer",
]
