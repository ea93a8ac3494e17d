"""
Booking repository - data access for Booking entity.
"""
from typing import List

from taskmatch.core.store import MarketplaceStore
from taskmatch.models.booking import Booking
from taskmatch.repositories.base import BaseRepository


class BookingRepository(BaseRepository[Booking]):
    def __init__(self):
        super().__init__(Booking, "bookings")

    def find_by_freelancer(self, store: MarketplaceStore, freelancer_id: str) -> List[Booking]:
        return self.find(store, lambda booking: booking.freelancer_id == freelancer_id)
