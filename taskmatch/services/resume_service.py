"""
Resume service - all resume business logic lives here.

Business rules
──────────────
• Max `max_resumes_per_user` resumes per user (5)
• PDF or Word only, max 5 MB (validated by the upload schema)
• Exactly one active resume whenever the user has any:
  the first upload becomes active, and deleting the active resume
  promotes the first remaining one
• A user can only activate or delete resumes from their own list
"""
from typing import List, Optional

from taskmatch.core.config import settings
from taskmatch.core.exceptions import (
    NoResumesException,
    ResumeLimitException,
    ResumeNotFoundException,
)
from taskmatch.core.logging import get_logger
from taskmatch.core.store import MarketplaceStore
from taskmatch.models.resume import Resume
from taskmatch.repositories.resume_repository import ResumeRepository
from taskmatch.schemas.resume import ResumeUpload

logger = get_logger(__name__)


class ResumeService:

    def __init__(self, max_per_user: Optional[int] = None):
        self.resume_repo = ResumeRepository()
        if max_per_user is None:
            max_per_user = settings.max_resumes_per_user
        self.max_per_user = max_per_user

    # ── Upload ───────────────────────────────────────────────────────────────

    async def add_resume(
        self,
        store: MarketplaceStore,
        user_id: str,
        file_meta: ResumeUpload,
    ) -> Resume:
        """
        Record an uploaded resume. The user's first resume becomes active.

        Raises:
            ResumeLimitException: If the user already holds the maximum.
        """
        await store.simulate_latency()

        existing = self.resume_repo.find_by_user(store, user_id)
        if len(existing) >= self.max_per_user:
            logger.info("resume_limit_reached", user_id=user_id, limit=self.max_per_user)
            raise ResumeLimitException(self.max_per_user)

        resume = self.resume_repo.create(
            store,
            user_id=user_id,
            name=file_meta.name,
            size_bytes=file_meta.size_bytes,
            content_type=file_meta.content_type,
            is_active=not existing,
        )
        logger.info("resume_added", user_id=user_id, resume_id=resume.id, is_active=resume.is_active)
        return resume

    # ── Activate ─────────────────────────────────────────────────────────────

    async def set_active_resume(
        self,
        store: MarketplaceStore,
        user_id: str,
        resume_id: str,
    ) -> Resume:
        """
        Make one resume active and every sibling inactive.

        Raises:
            NoResumesException: If the user has no resumes at all.
            ResumeNotFoundException: If the resume is not in the user's list.
        """
        await store.simulate_latency()

        resumes = self.resume_repo.find_by_user(store, user_id)
        if not resumes:
            raise NoResumesException()
        if not any(resume.id == resume_id for resume in resumes):
            raise ResumeNotFoundException()

        updated = [
            resume.model_copy(update={"is_active": resume.id == resume_id})
            for resume in resumes
        ]
        self.resume_repo.replace_many(store, updated)
        logger.info("active_resume_changed", user_id=user_id, resume_id=resume_id)
        return next(resume for resume in updated if resume.is_active)

    # ── Delete ───────────────────────────────────────────────────────────────

    async def delete_resume(
        self,
        store: MarketplaceStore,
        user_id: str,
        resume_id: str,
    ) -> None:
        """
        Remove a resume. If it was active, the first remaining resume takes over.

        Raises:
            ResumeNotFoundException: If the resume is not in the user's list.
        """
        await store.simulate_latency()

        resume = self._get_owned(store, user_id, resume_id)
        self.resume_repo.delete(store, resume.id)

        if resume.is_active:
            remaining = self.resume_repo.find_by_user(store, user_id)
            if remaining:
                promoted = self.resume_repo.update(store, remaining[0], is_active=True)
                logger.info("active_resume_promoted", user_id=user_id, resume_id=promoted.id)

        logger.info("resume_deleted", user_id=user_id, resume_id=resume_id, was_active=resume.is_active)

    # ── Queries ──────────────────────────────────────────────────────────────

    def resumes_for_user(self, store: MarketplaceStore, user_id: str) -> List[Resume]:
        return self.resume_repo.find_by_user(store, user_id)

    def active_resume(self, store: MarketplaceStore, user_id: str) -> Optional[Resume]:
        for resume in self.resume_repo.find_by_user(store, user_id):
            if resume.is_active:
                return resume
        return None

    def get_resume(self, store: MarketplaceStore, user_id: str, resume_id: str) -> Resume:
        """
        Raises:
            ResumeNotFoundException: If the resume is not in the user's list.
        """
        return self._get_owned(store, user_id, resume_id)

    @staticmethod
    def render_download(resume: Resume) -> bytes:
        """
        Body served for a resume download.

        Only metadata is stored, so the file is a placeholder describing it.
        """
        lines = [
            f"Resume: {resume.name}",
            f"Type: {resume.content_type}",
            f"Size: {resume.size_bytes} bytes",
            f"Uploaded: {resume.uploaded_at.isoformat()}",
            "",
            "File content is not stored by TaskMatch.",
        ]
        return "\n".join(lines).encode("utf-8")

    # ── Helpers ──────────────────────────────────────────────────────────────

    def _get_owned(self, store: MarketplaceStore, user_id: str, resume_id: str) -> Resume:
        resume = self.resume_repo.get_by_id(store, resume_id)
        if not resume or resume.user_id != user_id:
            raise ResumeNotFoundException()
        return resume
