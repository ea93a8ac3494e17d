"""Tests for freelancer availability and the booking calendar."""

import datetime as dt

from taskmatch.models.booking import BOOKING_STATUS_CANCELLED
from taskmatch.repositories import BookingRepository
from taskmatch.services.booking_service import BookingService
from tests.conftest import SLOT_AFTERNOON, SLOT_MORNING

DAY = dt.date(2030, 6, 15)


def book(store, freelancer_id, date=DAY, slot=SLOT_MORNING, **extra):
    return BookingRepository().create(
        store,
        freelancer_id=freelancer_id,
        job_id="job",
        application_id="application",
        date=date,
        time_slot=slot,
        **extra,
    )


class TestAvailability:
    """Test is_freelancer_available."""

    def test_free_calendar(self, store, freelancer):
        """Test a freelancer without bookings is available."""
        assert BookingService().is_freelancer_available(store, freelancer.id, DAY, SLOT_MORNING)

    def test_exact_slot_taken(self, store, freelancer):
        """Test only the exact date and slot are blocked."""
        book(store, freelancer.id)
        service = BookingService()

        assert not service.is_freelancer_available(store, freelancer.id, DAY, SLOT_MORNING)
        assert service.is_freelancer_available(store, freelancer.id, DAY, SLOT_AFTERNOON)
        assert service.is_freelancer_available(store, freelancer.id, DAY + dt.timedelta(days=1), SLOT_MORNING)

    def test_scoped_per_freelancer(self, store, freelancer, other_freelancer):
        """Test another freelancer's booking doesn't block this one."""
        book(store, other_freelancer.id)
        assert BookingService().is_freelancer_available(store, freelancer.id, DAY, SLOT_MORNING)

    def test_cancelled_booking_frees_slot(self, store, freelancer):
        """Test cancelled bookings don't count."""
        book(store, freelancer.id, status=BOOKING_STATUS_CANCELLED)
        assert BookingService().is_freelancer_available(store, freelancer.id, DAY, SLOT_MORNING)


class TestCalendar:
    """Test calendar queries."""

    def test_bookings_on_day(self, store, freelancer):
        """Test bookings_on returns only that day's bookings."""
        morning = book(store, freelancer.id)
        book(store, freelancer.id, date=DAY + dt.timedelta(days=2))

        assert BookingService().bookings_on(store, freelancer.id, DAY) == [morning]

    def test_upcoming_sorted_and_limited(self, store, freelancer):
        """Test upcoming bookings skip the past, sort by date and cap the list."""
        book(store, freelancer.id, date=DAY - dt.timedelta(days=1))
        later = book(store, freelancer.id, date=DAY + dt.timedelta(days=3))
        sooner = book(store, freelancer.id, date=DAY)

        service = BookingService()
        assert service.upcoming_bookings(store, freelancer.id, DAY) == [sooner, later]
        assert service.upcoming_bookings(store, freelancer.id, DAY, limit=1) == [sooner]
