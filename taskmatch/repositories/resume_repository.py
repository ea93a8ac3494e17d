"""
Resume repository - data access for Resume entity.
"""
from typing import List

from taskmatch.core.store import MarketplaceStore
from taskmatch.models.resume import Resume
from taskmatch.repositories.base import BaseRepository


class ResumeRepository(BaseRepository[Resume]):
    def __init__(self):
        super().__init__(Resume, "resumes")

    def find_by_user(self, store: MarketplaceStore, user_id: str) -> List[Resume]:
        return self.find(store, lambda resume: resume.user_id == user_id)
