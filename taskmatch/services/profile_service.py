"""
Profile service - a freelancer's public page: services offered, reviews
received and work history.
"""
from typing import Iterable, List, Literal

from taskmatch.core.exceptions import FreelancerNotFoundException
from taskmatch.core.logging import get_logger
from taskmatch.core.store import MarketplaceStore
from taskmatch.models.experience import Experience
from taskmatch.models.review import Review
from taskmatch.models.service_offering import RateUnit, ServiceOffering
from taskmatch.models.user import User
from taskmatch.repositories.profile_repository import (
    ExperienceRepository,
    ReviewRepository,
    ServiceOfferingRepository,
)
from taskmatch.repositories.user_repository import UserRepository
from taskmatch.schemas.profile import (
    ExperienceCreate,
    FreelancerProfileResponse,
    RatingSummary,
    ServiceCreate,
    ServiceResponse,
)

logger = get_logger(__name__)

ReviewSort = Literal["newest", "highest", "lowest"]

RATE_SUFFIXES = {
    "hour": "/hr",
    "day": "/day",
    "word": "/word",
    "project": "",
}


def format_rate(rate: float, unit: RateUnit) -> str:
    """`$40.00/hr`, `$250.00/day`, `$0.10/word`; a project rate is the bare amount."""
    return f"${rate:.2f}{RATE_SUFFIXES[unit]}"


def rating_summary(reviews: Iterable[Review]) -> RatingSummary:
    counts = [0, 0, 0, 0, 0]
    total = 0
    points = 0
    for review in reviews:
        counts[review.rating - 1] += 1
        total += 1
        points += review.rating

    average = round(points / total, 1) if total else None
    return RatingSummary(total=total, average=average, counts=counts)


class ProfileService:

    def __init__(self):
        self.user_repo = UserRepository()
        self.service_repo = ServiceOfferingRepository()
        self.review_repo = ReviewRepository()
        self.experience_repo = ExperienceRepository()

    # ── Services ─────────────────────────────────────────────────────────────

    def services_for_freelancer(self, store: MarketplaceStore, freelancer_id: str) -> List[ServiceOffering]:
        return self.service_repo.find_by_freelancer(store, freelancer_id)

    async def create_service(
        self,
        store: MarketplaceStore,
        freelancer: User,
        data: ServiceCreate,
    ) -> ServiceOffering:
        await store.simulate_latency()

        service = self.service_repo.create(
            store,
            freelancer_id=freelancer.id,
            title=data.title,
            description=data.description,
            rate=data.rate,
            rate_unit=data.rate_unit,
        )
        logger.info("service_created", service_id=service.id, freelancer_id=freelancer.id)
        return service

    # ── Reviews ──────────────────────────────────────────────────────────────

    def reviews_for_freelancer(
        self,
        store: MarketplaceStore,
        freelancer_id: str,
        sort: ReviewSort = "newest",
    ) -> List[Review]:
        """
        Reviews left for a freelancer.

        Ties in `highest`/`lowest` keep the newest review first.
        """
        reviews = self.review_repo.find_by_freelancer(store, freelancer_id)
        reviews.sort(key=lambda review: review.created_at, reverse=True)
        if sort == "highest":
            reviews.sort(key=lambda review: review.rating, reverse=True)
        elif sort == "lowest":
            reviews.sort(key=lambda review: review.rating)
        return reviews

    # ── Work experience ──────────────────────────────────────────────────────

    def experiences_for_freelancer(self, store: MarketplaceStore, freelancer_id: str) -> List[Experience]:
        """Timeline entries, most recently added first."""
        return self.experience_repo.find_by_freelancer(store, freelancer_id)[::-1]

    async def add_experience(
        self,
        store: MarketplaceStore,
        freelancer: User,
        data: ExperienceCreate,
    ) -> Experience:
        await store.simulate_latency()

        entry = self.experience_repo.create(
            store,
            freelancer_id=freelancer.id,
            title=data.title,
            company=data.company,
            location=data.location,
            start_date=data.start_date,
            end_date=None if data.current else data.end_date,
            description=data.description,
            current=data.current,
        )
        logger.info("experience_added", experience_id=entry.id, freelancer_id=freelancer.id, current=entry.current)
        return entry

    # ── Public profile ───────────────────────────────────────────────────────

    def public_profile(
        self,
        store: MarketplaceStore,
        freelancer_id: str,
        sort: ReviewSort = "newest",
    ) -> FreelancerProfileResponse:
        """
        Raises:
            FreelancerNotFoundException: If the id is unknown or not a freelancer.
        """
        freelancer = self.user_repo.get_by_id(store, freelancer_id)
        if not freelancer or not freelancer.is_freelancer:
            raise FreelancerNotFoundException()

        reviews = self.reviews_for_freelancer(store, freelancer_id, sort)
        services = [
            ServiceResponse(service=service, display_rate=format_rate(service.rate, service.rate_unit))
            for service in self.services_for_freelancer(store, freelancer_id)
        ]
        return FreelancerProfileResponse(
            freelancer=freelancer,
            services=services,
            reviews=reviews,
            rating=rating_summary(reviews),
            experiences=self.experiences_for_freelancer(store, freelancer_id),
        )
