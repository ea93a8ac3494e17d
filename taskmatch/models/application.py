"""
JobApplication model - a freelancer's bid on a job.

Status state machine:
  pending → accepted   (terminal)
  pending → rejected   (terminal)
"""
import datetime as dt
from typing import Literal, Optional

from taskmatch.models.base import Entity, TimestampMixin
from taskmatch.models.job import TimeSlot

APPLICATION_STATUS_PENDING = "pending"
APPLICATION_STATUS_ACCEPTED = "accepted"
APPLICATION_STATUS_REJECTED = "rejected"

ApplicationStatus = Literal["pending", "accepted", "rejected"]
ApplicationDecision = Literal["accepted", "rejected"]


class JobApplication(Entity, TimestampMixin):
    """
    Application entity.

    A proposed date and slot travel together; accepting an application that
    carries them books the freelancer for that slot.
    """

    job_id: str
    freelancer_id: str
    freelancer_name: str
    cover_letter: str
    proposed_date: Optional[dt.date] = None
    proposed_time_slot: Optional[TimeSlot] = None
    status: ApplicationStatus = APPLICATION_STATUS_PENDING

    @property
    def has_proposal(self) -> bool:
        return self.proposed_date is not None and self.proposed_time_slot is not None

    @property
    def is_decided(self) -> bool:
        return self.status != APPLICATION_STATUS_PENDING
