"""Tests for job posting, listing and search."""

import pytest
from pydantic import ValidationError

from taskmatch.core.exceptions import JobNotFoundException
from taskmatch.models.job import FlexibleSchedule, JOB_STATUS_OPEN
from taskmatch.services.job_service import JobService, search_jobs
from tests.conftest import make_job_create


class TestCreateJob:
    """Test JobService.create_job."""

    @pytest.mark.asyncio
    async def test_new_job_is_open_and_stamped(self, store, customer):
        """Test a posted job is open and carries the customer's identity."""
        job = await JobService().create_job(store, customer, make_job_create())

        assert job.status == JOB_STATUS_OPEN
        assert job.customer_id == customer.id
        assert job.customer_name == customer.name
        assert job.created_at is not None
        assert store.snapshot("jobs") == (job,)

    @pytest.mark.asyncio
    async def test_jobs_keep_insertion_order(self, store, customer, other_customer):
        """Test jobs_by_customer filters by owner in posting order."""
        service = JobService()
        first = await service.create_job(store, customer, make_job_create(title="First"))
        await service.create_job(store, other_customer, make_job_create(title="Other"))
        second = await service.create_job(store, customer, make_job_create(title="Second"))

        assert service.jobs_by_customer(store, customer.id) == [first, second]

    @pytest.mark.asyncio
    async def test_flexible_schedule(self, store, customer):
        """Test flexible schedules keep their weekdays."""
        data = make_job_create(
            schedule={"type": "flexible", "days": ["Friday", "Monday"], "timeframe": "Mornings"}
        )
        job = await JobService().create_job(store, customer, data)

        assert isinstance(job.schedule, FlexibleSchedule)
        assert job.schedule.ordered_days() == ["Monday", "Friday"]

    def test_get_job_unknown_raises(self, store):
        """Test looking up a missing job raises 404."""
        with pytest.raises(JobNotFoundException):
            JobService().get_job(store, "missing")


class TestJobValidation:
    """Test the job posting schema rejects bad input."""

    def test_budget_must_be_positive(self):
        """Test zero budget is rejected."""
        with pytest.raises(ValidationError):
            make_job_create(budget=0)

    def test_skills_required(self):
        """Test blank skills are rejected."""
        with pytest.raises(ValidationError):
            make_job_create(skills=["  "])

    def test_unknown_time_slot(self):
        """Test a slot outside the fixed list is rejected."""
        with pytest.raises(ValidationError):
            make_job_create(schedule={"type": "specific", "date": "2030-01-01", "time_slot": "midnight"})

    def test_flexible_needs_days(self):
        """Test a flexible schedule without days is rejected."""
        with pytest.raises(ValidationError):
            make_job_create(schedule={"type": "flexible", "days": []})


class TestSearchJobs:
    """Test search_jobs matching."""

    @pytest.mark.asyncio
    async def test_matches_fields_case_insensitively(self, store, customer):
        """Test title, skill and city all match regardless of case."""
        service = JobService()
        sink = await service.create_job(store, customer, make_job_create())
        logo = await service.create_job(
            store,
            customer,
            make_job_create(
                title="Logo design",
                description="Minimal mark for a tech startup.",
                skills=["Branding"],
                address=None,
            ),
        )
        jobs = service.open_jobs_for_freelancers(store)

        assert search_jobs(jobs, "SINK") == [sink]
        assert search_jobs(jobs, "branding") == [logo]
        assert search_jobs(jobs, "iloilo") == [sink]
        assert search_jobs(jobs, "") == [sink, logo]
        assert search_jobs(jobs, "welding") == []
