"""
User schemas.
"""
from typing import List, Optional

from pydantic import Field

from taskmatch.schemas.base import BaseSchema


class ProfileUpdate(BaseSchema):
    """Partial profile edit. Identity fields (id, email, role) are not editable."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    bio: Optional[str] = Field(None, max_length=2000)
    skills: Optional[List[str]] = None
    avatar: Optional[str] = None
