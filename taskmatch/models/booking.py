"""
Booking model - a freelancer's confirmed date and slot for a job.
"""
import datetime as dt
from typing import Literal

from taskmatch.models.base import Entity, TimestampMixin
from taskmatch.models.job import TimeSlot

BOOKING_STATUS_SCHEDULED = "scheduled"
BOOKING_STATUS_COMPLETED = "completed"
BOOKING_STATUS_CANCELLED = "cancelled"

BookingStatus = Literal["scheduled", "completed", "cancelled"]


class Booking(Entity, TimestampMixin):
    """Created when an application with a proposed schedule is accepted."""

    freelancer_id: str
    job_id: str
    application_id: str
    date: dt.date
    time_slot: TimeSlot
    status: BookingStatus = BOOKING_STATUS_SCHEDULED
