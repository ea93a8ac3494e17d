"""
Job schemas.
"""
from typing import List, Optional

from pydantic import Field, field_validator

from taskmatch.models.job import Address, Schedule
from taskmatch.schemas.base import BaseSchema


class JobCreate(BaseSchema):
    """Body of a job posting. Customer identity comes from the session."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    budget: float = Field(..., gt=0)
    schedule: Schedule
    skills: List[str] = Field(..., min_length=1)
    address: Optional[Address] = None

    @field_validator("skills")
    @classmethod
    def clean_skills(cls, v: List[str]) -> List[str]:
        cleaned = [skill.strip() for skill in v if skill.strip()]
        if not cleaned:
            raise ValueError("At least one skill is required")
        return cleaned
