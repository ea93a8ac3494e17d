"""
Application repository - data access for JobApplication entity.
"""
from typing import List, Optional

from taskmatch.core.store import MarketplaceStore
from taskmatch.models.application import JobApplication
from taskmatch.repositories.base import BaseRepository


class ApplicationRepository(BaseRepository[JobApplication]):
    def __init__(self):
        super().__init__(JobApplication, "applications")

    def find_by_freelancer(self, store: MarketplaceStore, freelancer_id: str) -> List[JobApplication]:
        return self.find(store, lambda app: app.freelancer_id == freelancer_id)

    def find_by_job(self, store: MarketplaceStore, job_id: str) -> List[JobApplication]:
        return self.find(store, lambda app: app.job_id == job_id)

    def find_for_freelancer_and_job(
        self,
        store: MarketplaceStore,
        freelancer_id: str,
        job_id: str,
    ) -> Optional[JobApplication]:
        matches = self.find(
            store,
            lambda app: app.freelancer_id == freelancer_id and app.job_id == job_id,
        )
        return matches[0] if matches else None
