"""
Booking routes - the freelancer's calendar.
"""
import datetime as dt
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from taskmatch.api.deps import require_freelancer
from taskmatch.core.store import MarketplaceStore, get_store
from taskmatch.models.booking import Booking
from taskmatch.models.job import TimeSlot
from taskmatch.models.user import User
from taskmatch.schemas.booking import AvailabilityResponse
from taskmatch.services.booking_service import BookingService

router = APIRouter(prefix="/bookings", tags=["bookings"])

booking_service = BookingService()


@router.get("/mine", response_model=List[Booking])
async def list_my_bookings(
    date: Optional[dt.date] = Query(None, description="Only bookings on this day"),
    current_user: User = Depends(require_freelancer),
    store: MarketplaceStore = Depends(get_store),
):
    """The current freelancer's bookings, optionally for a single day."""
    if date is not None:
        return booking_service.bookings_on(store, current_user.id, date)
    return booking_service.bookings_for_freelancer(store, current_user.id)


@router.get("/availability", response_model=AvailabilityResponse)
async def check_availability(
    date: dt.date,
    time_slot: TimeSlot,
    current_user: User = Depends(require_freelancer),
    store: MarketplaceStore = Depends(get_store),
):
    """Whether the current freelancer is free for a date and slot."""
    return AvailabilityResponse(
        freelancer_id=current_user.id,
        date=date,
        time_slot=time_slot,
        available=booking_service.is_freelancer_available(store, current_user.id, date, time_slot),
    )
