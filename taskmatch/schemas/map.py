"""
Map schemas.
"""
from typing import List

from taskmatch.schemas.base import BaseSchema


class Coordinates(BaseSchema):
    longitude: float
    latitude: float


class JobMarker(BaseSchema):
    """One pin on the job map, with the data its popup shows."""

    job_id: str
    title: str
    budget: float
    status: str
    customer_name: str
    location_label: str
    schedule_label: str
    skills: List[str]
    coordinates: Coordinates


class MapResponse(BaseSchema):
    center: Coordinates
    markers: List[JobMarker]
