"""
Base model with common fields and utilities.
"""
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Entity(BaseModel):
    """
    Base for every stored record.

    Records are frozen: the store replaces them with updated copies
    instead of mutating them, so a reader never sees a half-applied change.
    """

    model_config = ConfigDict(frozen=True)

    id: str


class TimestampMixin(BaseModel):
    """Mixin that adds a creation timestamp."""

    created_at: datetime = Field(default_factory=utcnow)
