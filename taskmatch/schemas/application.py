"""
Application schemas.
"""
import datetime as dt
from typing import List, Optional

from pydantic import Field, model_validator

from taskmatch.models.application import JobApplication
from taskmatch.models.job import TimeSlot
from taskmatch.schemas.base import BaseSchema

MIN_COVER_LETTER_LENGTH = 10


class ApplicationCreate(BaseSchema):
    """A freelancer's bid. Date and slot are proposed together or not at all."""

    cover_letter: str = Field(..., min_length=1)
    proposed_date: Optional[dt.date] = None
    proposed_time_slot: Optional[TimeSlot] = None

    @model_validator(mode="after")
    def check_letter_and_proposal(self) -> "ApplicationCreate":
        if len(self.cover_letter.strip()) < MIN_COVER_LETTER_LENGTH:
            raise ValueError("Please write a proper cover letter")
        if (self.proposed_date is None) != (self.proposed_time_slot is None):
            raise ValueError("proposed_date and proposed_time_slot must be given together")
        return self


class ApplicationsByStatus(BaseSchema):
    """A freelancer's applications grouped the way the applications page shows them."""

    pending: List[JobApplication] = []
    accepted: List[JobApplication] = []
    rejected: List[JobApplication] = []
