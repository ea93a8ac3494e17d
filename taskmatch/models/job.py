"""
Job model.

Status state machine:
  open → assigned → completed

`assigned` is reached only by accepting an application. Nothing moves a job
to `completed` yet; that status exists for seeded data.
"""
import datetime as dt
from typing import Annotated, FrozenSet, List, Literal, Optional, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from taskmatch.models.base import Entity, TimestampMixin

JOB_STATUS_OPEN = "open"
JOB_STATUS_ASSIGNED = "assigned"
JOB_STATUS_COMPLETED = "completed"

JobStatus = Literal["open", "assigned", "completed"]

# Offered by the scheduling form; bookings and proposals use the same labels.
TIME_SLOTS = (
    "8:00 AM - 10:00 AM",
    "10:00 AM - 12:00 PM",
    "1:00 PM - 3:00 PM",
    "3:00 PM - 5:00 PM",
    "5:00 PM - 7:00 PM",
)

WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

Weekday = Literal["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def check_time_slot(value: str) -> str:
    if value not in TIME_SLOTS:
        raise ValueError(f"Unknown time slot '{value}'. Expected one of: {', '.join(TIME_SLOTS)}")
    return value


TimeSlot = Annotated[str, AfterValidator(check_time_slot)]


class Address(BaseModel):
    """Where the work happens. Every part is optional; no address means remote."""

    model_config = ConfigDict(frozen=True)

    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None


class SpecificSchedule(BaseModel):
    """Work booked for one date and slot."""

    model_config = ConfigDict(frozen=True)

    type: Literal["specific"] = "specific"
    date: dt.date
    time_slot: TimeSlot


class FlexibleSchedule(BaseModel):
    """Any of the given weekdays, with a free-text time preference."""

    model_config = ConfigDict(frozen=True)

    type: Literal["flexible"] = "flexible"
    days: FrozenSet[Weekday] = Field(..., min_length=1)
    timeframe: str = ""

    def ordered_days(self) -> List[str]:
        return [day for day in WEEKDAYS if day in self.days]


Schedule = Annotated[Union[SpecificSchedule, FlexibleSchedule], Field(discriminator="type")]


class Job(Entity, TimestampMixin):
    """A unit of work posted by a customer. Only `status` changes after creation."""

    customer_id: str
    customer_name: str
    title: str
    description: str
    budget: float
    schedule: Schedule
    skills: List[str] = []
    address: Optional[Address] = None
    status: JobStatus = JOB_STATUS_OPEN

    @property
    def is_open(self) -> bool:
        return self.status == JOB_STATUS_OPEN
