"""
Review model - feedback a customer left for a freelancer.
"""
from pydantic import Field

from taskmatch.models.base import Entity, TimestampMixin


class Review(Entity, TimestampMixin):
    freelancer_id: str
    customer_id: str
    customer_name: str
    job_id: str
    job_title: str
    rating: int = Field(..., ge=1, le=5)
    comment: str
