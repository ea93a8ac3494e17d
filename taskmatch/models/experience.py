"""
Experience model - one entry on a freelancer's work history timeline.
"""
import datetime as dt
from typing import Optional

from taskmatch.models.base import Entity, TimestampMixin


class Experience(Entity, TimestampMixin):
    """
    A past or current position.

    `current` entries never carry an `end_date`.
    """

    freelancer_id: str
    title: str
    company: str
    location: str = ""
    start_date: dt.date
    end_date: Optional[dt.date] = None
    description: str = ""
    current: bool = False
