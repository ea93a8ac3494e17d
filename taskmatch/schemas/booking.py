"""
Booking schemas.
"""
import datetime as dt

from taskmatch.schemas.base import BaseSchema


class AvailabilityResponse(BaseSchema):
    freelancer_id: str
    date: dt.date
    time_slot: str
    available: bool
