"""
Resume model - metadata of a freelancer's uploaded CV.

No bytes are kept; downloads are rendered from the metadata.

Invariants per user:
  - at most `max_resumes_per_user` records
  - exactly one active record whenever the user has any
"""
from datetime import datetime

from pydantic import Field

from taskmatch.models.base import Entity, utcnow

CONTENT_TYPE_PDF = "application/pdf"
CONTENT_TYPE_DOC = "application/msword"
CONTENT_TYPE_DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

ALLOWED_CONTENT_TYPES = (CONTENT_TYPE_PDF, CONTENT_TYPE_DOC, CONTENT_TYPE_DOCX)


class Resume(Entity):
    user_id: str
    name: str
    size_bytes: int
    content_type: str
    uploaded_at: datetime = Field(default_factory=utcnow)
    is_active: bool = False
