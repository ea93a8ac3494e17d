"""
Profile repositories - freelancer service catalog, reviews and work history.
"""
from typing import List

from taskmatch.core.store import MarketplaceStore
from taskmatch.models.experience import Experience
from taskmatch.models.review import Review
from taskmatch.models.service_offering import ServiceOffering
from taskmatch.repositories.base import BaseRepository


class ServiceOfferingRepository(BaseRepository[ServiceOffering]):
    def __init__(self):
        super().__init__(ServiceOffering, "services")

    def find_by_freelancer(self, store: MarketplaceStore, freelancer_id: str) -> List[ServiceOffering]:
        return self.find(store, lambda service: service.freelancer_id == freelancer_id)


class ReviewRepository(BaseRepository[Review]):
    def __init__(self):
        super().__init__(Review, "reviews")

    def find_by_freelancer(self, store: MarketplaceStore, freelancer_id: str) -> List[Review]:
        return self.find(store, lambda review: review.freelancer_id == freelancer_id)


class ExperienceRepository(BaseRepository[Experience]):
    def __init__(self):
        super().__init__(Experience, "experiences")

    def find_by_freelancer(self, store: MarketplaceStore, freelancer_id: str) -> List[Experience]:
        return self.find(store, lambda entry: entry.freelancer_id == freelancer_id)
