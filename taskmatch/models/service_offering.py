"""
ServiceOffering model - a freelancer's catalog entry.
"""
from typing import Literal

from taskmatch.models.base import Entity

RateUnit = Literal["hour", "day", "word", "project"]


class ServiceOffering(Entity):
    freelancer_id: str
    title: str
    description: str
    rate: float
    rate_unit: RateUnit
