"""
Job repository - data access for Job entity.
"""
from typing import List

from taskmatch.core.store import MarketplaceStore
from taskmatch.models.job import Job, JOB_STATUS_OPEN
from taskmatch.repositories.base import BaseRepository


class JobRepository(BaseRepository[Job]):
    def __init__(self):
        super().__init__(Job, "jobs")

    def find_by_customer(self, store: MarketplaceStore, customer_id: str) -> List[Job]:
        return self.find(store, lambda job: job.customer_id == customer_id)

    def find_open(self, store: MarketplaceStore) -> List[Job]:
        return self.find(store, lambda job: job.status == JOB_STATUS_OPEN)
