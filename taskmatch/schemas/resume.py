"""
Resume schemas.
"""
from pydantic import Field, field_validator

from taskmatch.core.config import settings
from taskmatch.models.resume import ALLOWED_CONTENT_TYPES
from taskmatch.schemas.base import BaseSchema


class ResumeUpload(BaseSchema):
    """File metadata for a simulated upload. No bytes are sent."""

    name: str = Field(..., min_length=1, max_length=255)
    size_bytes: int = Field(..., gt=0)
    content_type: str

    @field_validator("content_type")
    @classmethod
    def must_be_pdf_or_word(cls, v: str) -> str:
        if v not in ALLOWED_CONTENT_TYPES:
            raise ValueError("Please upload a PDF or Word document")
        return v

    @field_validator("size_bytes")
    @classmethod
    def must_fit_size_limit(cls, v: int) -> int:
        if v > settings.max_resume_size_bytes:
            raise ValueError(f"File size should be less than {settings.max_resume_size_mb}MB")
        return v
