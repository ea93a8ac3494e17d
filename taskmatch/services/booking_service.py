"""
Booking service - freelancer schedules and availability.
"""
import datetime as dt
from typing import List

from taskmatch.core.store import MarketplaceStore
from taskmatch.models.booking import Booking, BOOKING_STATUS_SCHEDULED
from taskmatch.repositories.booking_repository import BookingRepository

# Number of bookings the calendar lists as "upcoming"
UPCOMING_LIMIT = 6


class BookingService:
    """Read side of bookings. Bookings are written by ApplicationService."""

    def __init__(self):
        self.booking_repo = BookingRepository()

    def is_freelancer_available(
        self,
        store: MarketplaceStore,
        freelancer_id: str,
        date: dt.date,
        time_slot: str,
    ) -> bool:
        """
        False only when this freelancer already has a scheduled booking for
        exactly this date and slot. Other freelancers' bookings never count.
        """
        return not any(
            booking.date == date
            and booking.time_slot == time_slot
            and booking.status == BOOKING_STATUS_SCHEDULED
            for booking in self.booking_repo.find_by_freelancer(store, freelancer_id)
        )

    def bookings_for_freelancer(self, store: MarketplaceStore, freelancer_id: str) -> List[Booking]:
        return self.booking_repo.find_by_freelancer(store, freelancer_id)

    def bookings_on(
        self,
        store: MarketplaceStore,
        freelancer_id: str,
        date: dt.date,
    ) -> List[Booking]:
        """Bookings shown for one calendar day."""
        return [
            booking
            for booking in self.booking_repo.find_by_freelancer(store, freelancer_id)
            if booking.date == date
        ]

    def upcoming_bookings(
        self,
        store: MarketplaceStore,
        freelancer_id: str,
        today: dt.date,
        limit: int = UPCOMING_LIMIT,
    ) -> List[Booking]:
        """Bookings from today on, soonest first."""
        upcoming = [
            booking
            for booking in self.booking_repo.find_by_freelancer(store, freelancer_id)
            if booking.date >= today
        ]
        upcoming.sort(key=lambda booking: booking.date)
        return upcoming[:limit]
