"""Tests for applying to jobs and deciding applications."""

import datetime as dt

import pytest
from pydantic import ValidationError

from taskmatch.core.exceptions import (
    ApplicationAlreadyDecidedException,
    DuplicateApplicationException,
    JobNotFoundException,
    JobNotOpenException,
    ScheduleConflictException,
)
from taskmatch.models.job import JOB_STATUS_ASSIGNED
from taskmatch.repositories import JobRepository
from taskmatch.schemas.application import ApplicationCreate
from taskmatch.services.application_service import ApplicationService
from taskmatch.services.booking_service import BookingService
from taskmatch.services.job_service import JobService
from tests.conftest import SLOT_AFTERNOON, SLOT_MORNING, make_job_create

LETTER = "I have fixed dozens of sinks like this one."
PROPOSED_DATE = dt.date(2030, 6, 15)


def bid(**overrides) -> ApplicationCreate:
    data = {"cover_letter": LETTER}
    data.update(overrides)
    return ApplicationCreate.model_validate(data)


def bid_with_slot(date=PROPOSED_DATE, slot=SLOT_MORNING) -> ApplicationCreate:
    return bid(proposed_date=date.isoformat(), proposed_time_slot=slot)


class TestSubmitApplication:
    """Test ApplicationService.submit_application."""

    @pytest.mark.asyncio
    async def test_application_starts_pending(self, store, freelancer, open_job):
        """Test a new application is pending and linked to the freelancer."""
        service = ApplicationService()
        application = await service.submit_application(store, freelancer, open_job.id, bid())

        assert application.status == "pending"
        assert application.freelancer_id == freelancer.id
        assert application.freelancer_name == freelancer.name
        assert application.has_proposal is False
        assert service.has_applied(store, freelancer.id, open_job.id) is True
        assert service.applications_for_job(store, open_job.id) == [application]

    @pytest.mark.asyncio
    async def test_unknown_job(self, store, freelancer):
        """Test applying to a missing job raises 404."""
        with pytest.raises(JobNotFoundException):
            await ApplicationService().submit_application(store, freelancer, "missing", bid())

    @pytest.mark.asyncio
    async def test_job_must_be_open(self, store, freelancer, open_job):
        """Test assigned jobs take no more applications."""
        JobRepository().update(store, open_job, status=JOB_STATUS_ASSIGNED)

        with pytest.raises(JobNotOpenException):
            await ApplicationService().submit_application(store, freelancer, open_job.id, bid())

    @pytest.mark.asyncio
    async def test_second_application_rejected(self, store, freelancer, open_job):
        """Test a freelancer can't apply twice to the same job."""
        service = ApplicationService()
        await service.submit_application(store, freelancer, open_job.id, bid())

        with pytest.raises(DuplicateApplicationException):
            await service.submit_application(store, freelancer, open_job.id, bid())
        assert len(store.snapshot("applications")) == 1

    @pytest.mark.asyncio
    async def test_proposed_slot_must_be_free(self, store, customer, freelancer, open_job):
        """Test proposing a slot the freelancer already booked is refused."""
        service = ApplicationService()
        first = await service.submit_application(store, freelancer, open_job.id, bid_with_slot())
        await service.set_application_status(store, first.id, "accepted")

        second_job = JobRepository().create(
            store,
            customer_id=customer.id,
            customer_name=customer.name,
            title="Hang shelves",
            description="Three shelves",
            budget=60,
            schedule=open_job.schedule,
        )
        with pytest.raises(ScheduleConflictException):
            await service.submit_application(store, freelancer, second_job.id, bid_with_slot())

        other_slot = await service.submit_application(
            store, freelancer, second_job.id, bid_with_slot(slot=SLOT_AFTERNOON)
        )
        assert other_slot.proposed_time_slot == SLOT_AFTERNOON


class TestApplicationValidation:
    """Test the application schema."""

    def test_short_cover_letter(self):
        """Test cover letters under ten characters are rejected."""
        with pytest.raises(ValidationError):
            bid(cover_letter="  hire me ")

    def test_proposal_is_all_or_nothing(self):
        """Test a date without a slot is rejected."""
        with pytest.raises(ValidationError):
            bid(proposed_date="2030-06-15")


class TestSetApplicationStatus:
    """Test accepting and rejecting applications."""

    @pytest.mark.asyncio
    async def test_accept_with_proposal_books_slot(self, store, freelancer, open_job):
        """Test accepting assigns the job and creates exactly one booking."""
        service = ApplicationService()
        application = await service.submit_application(store, freelancer, open_job.id, bid_with_slot())

        accepted = await service.set_application_status(store, application.id, "accepted")

        assert accepted.status == "accepted"
        assert JobRepository().get_by_id(store, open_job.id).status == JOB_STATUS_ASSIGNED
        bookings = store.snapshot("bookings")
        assert len(bookings) == 1
        booking = bookings[0]
        assert booking.freelancer_id == freelancer.id
        assert booking.job_id == open_job.id
        assert booking.application_id == application.id
        assert booking.date == PROPOSED_DATE
        assert booking.time_slot == SLOT_MORNING
        assert booking.status == "scheduled"
        assert not BookingService().is_freelancer_available(store, freelancer.id, PROPOSED_DATE, SLOT_MORNING)

    @pytest.mark.asyncio
    async def test_accept_without_proposal_books_nothing(self, store, freelancer, open_job):
        """Test accepting a bid with no slot only assigns the job."""
        service = ApplicationService()
        application = await service.submit_application(store, freelancer, open_job.id, bid())

        await service.set_application_status(store, application.id, "accepted")

        assert JobRepository().get_by_id(store, open_job.id).status == JOB_STATUS_ASSIGNED
        assert store.snapshot("bookings") == ()

    @pytest.mark.asyncio
    async def test_reject_leaves_job_open(self, store, freelancer, open_job):
        """Test rejecting changes only the application."""
        service = ApplicationService()
        application = await service.submit_application(store, freelancer, open_job.id, bid_with_slot())

        rejected = await service.set_application_status(store, application.id, "rejected")

        assert rejected.status == "rejected"
        assert JobRepository().get_by_id(store, open_job.id).is_open
        assert store.snapshot("bookings") == ()

    @pytest.mark.asyncio
    async def test_unknown_application_is_a_no_op(self, store, freelancer, open_job):
        """Test an unknown id returns None and changes nothing."""
        service = ApplicationService()
        await service.submit_application(store, freelancer, open_job.id, bid())
        before = store.counts(), store.snapshot("applications"), store.snapshot("jobs")

        assert await service.set_application_status(store, "missing", "accepted") is None
        assert (store.counts(), store.snapshot("applications"), store.snapshot("jobs")) == before

    @pytest.mark.asyncio
    async def test_decisions_are_final(self, store, freelancer, open_job):
        """Test a decided application can't be decided again."""
        service = ApplicationService()
        application = await service.submit_application(store, freelancer, open_job.id, bid())
        await service.set_application_status(store, application.id, "rejected")

        with pytest.raises(ApplicationAlreadyDecidedException):
            await service.set_application_status(store, application.id, "accepted")
        assert service.get_application(store, application.id).status == "rejected"
        assert JobRepository().get_by_id(store, open_job.id).is_open

    @pytest.mark.asyncio
    async def test_second_accept_for_assigned_job(self, store, freelancer, other_freelancer, open_job):
        """Test only one application per job can be accepted."""
        service = ApplicationService()
        first = await service.submit_application(store, freelancer, open_job.id, bid())
        second = await service.submit_application(store, other_freelancer, open_job.id, bid())
        await service.set_application_status(store, first.id, "accepted")

        with pytest.raises(JobNotOpenException):
            await service.set_application_status(store, second.id, "accepted")

        rejected = await service.set_application_status(store, second.id, "rejected")
        assert rejected.status == "rejected"

    @pytest.mark.asyncio
    async def test_accept_refuses_slot_booked_since_submit(self, store, customer, other_customer, freelancer):
        """Test two pending bids for one slot can't both be booked."""
        jobs = JobService()
        first_job = await jobs.create_job(store, customer, make_job_create())
        second_job = await jobs.create_job(store, other_customer, make_job_create())
        service = ApplicationService()
        first = await service.submit_application(store, freelancer, first_job.id, bid_with_slot())
        second = await service.submit_application(store, freelancer, second_job.id, bid_with_slot())
        await service.set_application_status(store, first.id, "accepted")
        before = store.counts(), store.snapshot("applications"), store.snapshot("jobs")

        with pytest.raises(ScheduleConflictException):
            await service.set_application_status(store, second.id, "accepted")

        assert (store.counts(), store.snapshot("applications"), store.snapshot("jobs")) == before
        assert len(store.snapshot("bookings")) == 1
        assert service.get_application(store, second.id).status == "pending"
        assert JobRepository().get_by_id(store, second_job.id).is_open

    @pytest.mark.asyncio
    async def test_grouped_by_status(self, store, customer, freelancer, open_job):
        """Test applications_by_status buckets a freelancer's applications."""
        service = ApplicationService()
        jobs = JobRepository()
        other_job = jobs.create(
            store,
            customer_id=customer.id,
            customer_name=customer.name,
            title="Mow lawn",
            description="Front yard",
            budget=30,
            schedule=open_job.schedule,
        )
        pending = await service.submit_application(store, freelancer, open_job.id, bid())
        decided = await service.submit_application(store, freelancer, other_job.id, bid())
        await service.set_application_status(store, decided.id, "rejected")

        grouped = service.applications_by_status(store, freelancer.id)

        assert [a.id for a in grouped.pending] == [pending.id]
        assert grouped.accepted == []
        assert [a.id for a in grouped.rejected] == [decided.id]
