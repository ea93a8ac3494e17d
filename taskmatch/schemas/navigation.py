"""
Navigation schemas.
"""
from typing import Dict, Optional

from taskmatch.schemas.base import BaseSchema


class RouteDecision(BaseSchema):
    """Outcome of guarding a client-side path."""

    path: str
    route: str
    params: Dict[str, str] = {}
    allowed: bool
    redirect_to: Optional[str] = None
