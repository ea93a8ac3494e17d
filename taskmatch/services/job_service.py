"""
Job service - posting, listing and searching jobs.
"""
from typing import Iterable, List

from taskmatch.core.exceptions import JobNotFoundException
from taskmatch.core.logging import get_logger
from taskmatch.core.store import MarketplaceStore
from taskmatch.models.job import Job, JOB_STATUS_OPEN
from taskmatch.models.user import User
from taskmatch.repositories.job_repository import JobRepository
from taskmatch.schemas.job import JobCreate

logger = get_logger(__name__)


class JobService:
    """Handles job creation and the job listings each role sees."""

    def __init__(self):
        self.job_repo = JobRepository()

    async def create_job(
        self,
        store: MarketplaceStore,
        customer: User,
        data: JobCreate,
    ) -> Job:
        """
        Post a job for a customer.

        The request schema has already validated the fields; the job starts
        `open` and is appended after existing jobs.
        """
        await store.simulate_latency()

        job = self.job_repo.create(
            store,
            customer_id=customer.id,
            customer_name=customer.name,
            title=data.title,
            description=data.description,
            budget=data.budget,
            schedule=data.schedule,
            skills=data.skills,
            address=data.address,
            status=JOB_STATUS_OPEN,
        )
        logger.info("job_created", job_id=job.id, customer_id=customer.id, budget=job.budget)
        return job

    def jobs_by_customer(self, store: MarketplaceStore, customer_id: str) -> List[Job]:
        """Jobs a customer posted, oldest first."""
        return self.job_repo.find_by_customer(store, customer_id)

    def open_jobs_for_freelancers(self, store: MarketplaceStore) -> List[Job]:
        """Jobs still taking applications."""
        return self.job_repo.find_open(store)

    def get_job(self, store: MarketplaceStore, job_id: str) -> Job:
        """
        Raises:
            JobNotFoundException: If job doesn't exist.
        """
        job = self.job_repo.get_by_id(store, job_id)
        if not job:
            raise JobNotFoundException()
        return job


def search_jobs(jobs: Iterable[Job], term: str) -> List[Job]:
    """
    Case-insensitive match on title, description, skills, city or state.

    An empty term keeps every job.
    """
    needle = term.strip().lower()
    if not needle:
        return list(jobs)

    def matches(job: Job) -> bool:
        if needle in job.title.lower() or needle in job.description.lower():
            return True
        if any(needle in skill.lower() for skill in job.skills):
            return True
        if job.address:
            for part in (job.address.city, job.address.state):
                if part and needle in part.lower():
                    return True
        return False

    return [job for job in jobs if matches(job)]
