"""
Freelancer profile schemas.
"""
import datetime as dt
from typing import List, Optional

from pydantic import Field, field_validator, model_validator

from taskmatch.models.experience import Experience
from taskmatch.models.review import Review
from taskmatch.models.service_offering import RateUnit, ServiceOffering
from taskmatch.models.user import User
from taskmatch.schemas.base import BaseSchema


class ServiceCreate(BaseSchema):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    rate: float = Field(..., gt=0)
    rate_unit: RateUnit


class ServiceResponse(BaseSchema):
    """Catalog entry with its display price."""

    service: ServiceOffering
    display_rate: str


class RatingSummary(BaseSchema):
    """Aggregate of a freelancer's reviews. `counts[0]` is 1-star, `counts[4]` is 5-star."""

    total: int
    average: Optional[float] = None
    counts: List[int] = [0, 0, 0, 0, 0]


class FreelancerProfileResponse(BaseSchema):
    freelancer: User
    services: List[ServiceResponse]
    reviews: List[Review]
    rating: RatingSummary
    experiences: List[Experience] = []


class ExperienceCreate(BaseSchema):
    """A work history entry. Title, company and start date are required."""

    title: str = Field(..., max_length=200)
    company: str = Field(..., max_length=200)
    location: str = Field("", max_length=200)
    start_date: dt.date
    end_date: Optional[dt.date] = None
    description: str = ""
    current: bool = False

    @field_validator("title", "company")
    @classmethod
    def required_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("This field is required")
        return v

    @model_validator(mode="after")
    def check_dates(self) -> "ExperienceCreate":
        if self.current:
            self.end_date = None
        elif self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("End date cannot be before the start date")
        return self
