"""Tests for job map markers."""

import datetime as dt

import httpx
import pytest

from taskmatch.models.job import Address, FlexibleSchedule, Job, SpecificSchedule
from taskmatch.schemas.map import Coordinates
from taskmatch.services.map_service import (
    DEFAULT_CENTER,
    ILOILO_LANDMARKS,
    LandmarkGeocoder,
    MapboxGeocoder,
    job_map,
    job_markers,
    location_label,
    schedule_label,
)


def make_job(id="j1", title="Fix sink", address=None, schedule=None) -> Job:
    return Job(
        id=id,
        customer_id="c1",
        customer_name="John Doe",
        title=title,
        description="Drips",
        budget=100,
        schedule=schedule or SpecificSchedule(date=dt.date(2024, 6, 15), time_slot="8:00 AM - 10:00 AM"),
        skills=["Plumbing"],
        address=address,
    )


class TestLabels:
    """Test popup labels."""

    def test_location_label(self):
        """Test the label joins the parts that exist."""
        job = make_job(address=Address(street="x", city="Iloilo City", state="Iloilo", country="Philippines"))
        assert location_label(job) == "Iloilo City, Iloilo, Philippines"
        assert location_label(make_job(address=Address(city="Iloilo City"))) == "Iloilo City"

    def test_remote_label(self):
        """Test jobs without an address are remote."""
        assert location_label(make_job()) == "Remote"

    def test_schedule_labels(self):
        """Test specific dates and flexible weekdays."""
        assert schedule_label(make_job()) == "Jun 15, 2024"
        flexible = make_job(schedule=FlexibleSchedule(days={"Wednesday", "Monday"}))
        assert schedule_label(flexible) == "Monday, Wednesday"


class TestLandmarkGeocoder:
    """Test the offline geocoder."""

    @pytest.mark.asyncio
    async def test_landmark_match_is_near_landmark(self):
        """Test a known landmark lands within the jitter of its coordinates."""
        lng, lat = ILOILO_LANDMARKS["SM City Iloilo"]
        coords = await LandmarkGeocoder(seed=1).geocode(Address(street="Unit 4, SM City Iloilo"))

        assert abs(coords.longitude - lng) <= 0.001
        assert abs(coords.latitude - lat) <= 0.001

    @pytest.mark.asyncio
    async def test_unknown_street_falls_back_to_centre(self):
        """Test unmatched streets land near the city centre."""
        coords = await LandmarkGeocoder(seed=1).geocode(Address(street="12 Unknown Road"))

        assert abs(coords.longitude - DEFAULT_CENTER[0]) <= 0.005
        assert abs(coords.latitude - DEFAULT_CENTER[1]) <= 0.005

    @pytest.mark.asyncio
    async def test_no_street_no_coordinates(self):
        """Test jobs without a street can't be placed."""
        geocoder = LandmarkGeocoder(seed=1)
        assert await geocoder.geocode(None) is None
        assert await geocoder.geocode(Address(city="Iloilo City")) is None

    @pytest.mark.asyncio
    async def test_seed_makes_jitter_repeatable(self):
        """Test the same seed gives the same coordinates."""
        address = Address(street="Molo Church")
        assert await LandmarkGeocoder(seed=3).geocode(address) == await LandmarkGeocoder(seed=3).geocode(address)


class TestMapboxGeocoder:
    """Test the Mapbox geocoder against a mocked transport."""

    @pytest.mark.asyncio
    async def test_uses_first_feature(self):
        """Test the first feature's centre becomes the coordinates."""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["token"] = request.url.params["access_token"]
            return httpx.Response(200, json={"features": [{"center": [122.5, 10.7]}]})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            geocoder = MapboxGeocoder("tok", base_url="https://geo.test", client=client)
            coords = await geocoder.geocode(Address(street="Calle Real", city="Iloilo City"))

        assert coords == Coordinates(longitude=122.5, latitude=10.7)
        assert seen["token"] == "tok"

    @pytest.mark.asyncio
    async def test_http_error_means_no_marker(self):
        """Test a failed lookup yields None instead of raising."""
        transport = httpx.MockTransport(lambda request: httpx.Response(500))
        async with httpx.AsyncClient(transport=transport) as client:
            geocoder = MapboxGeocoder("tok", base_url="https://geo.test", client=client)
            assert await geocoder.geocode(Address(street="Calle Real")) is None

    @pytest.mark.asyncio
    async def test_street_is_one_path_segment(self):
        """Test slashes, question marks and hashes in a street stay in the query path."""
        seen = {}

        def handler(request):
            seen["raw_path"] = request.url.raw_path.split(b"?", 1)[0]
            seen["path"] = request.url.path
            seen["token"] = request.url.params["access_token"]
            return httpx.Response(200, json={"features": []})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            geocoder = MapboxGeocoder("tok", base_url="https://geo.test", client=client)
            await geocoder.geocode(Address(street="Lot 4/5 ? #2", city="Iloilo City"))

        assert b"%2F" in seen["raw_path"]
        assert seen["path"] == "/Lot 4/5 ? #2, Iloilo City.json"
        assert seen["token"] == "tok"

    @pytest.mark.asyncio
    async def test_non_json_body_means_no_marker(self):
        """Test a 200 that isn't JSON yields None."""
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>busy</html>"))
        async with httpx.AsyncClient(transport=transport) as client:
            geocoder = MapboxGeocoder("tok", base_url="https://geo.test", client=client)
            assert await geocoder.geocode(Address(street="Calle Real")) is None


class TestJobMarkers:
    """Test marker building."""

    @pytest.mark.asyncio
    async def test_skips_jobs_without_street_and_filters(self):
        """Test unplaceable jobs are skipped and search narrows the set."""
        placed = make_job(id="a", title="Fix sink", address=Address(street="Calle Real", city="Iloilo City"))
        remote = make_job(id="b", title="Logo design")
        other = make_job(id="c", title="Paint wall", address=Address(street="Esplanade"))
        geocoder = LandmarkGeocoder(seed=1)

        markers = await job_markers([placed, remote, other], geocoder=geocoder)
        assert [m.job_id for m in markers] == ["a", "c"]
        assert markers[0].location_label == "Iloilo City"
        assert markers[0].schedule_label == "Jun 15, 2024"

        searched = await job_markers([placed, remote, other], "paint", geocoder)
        assert [m.job_id for m in searched] == ["c"]

    @pytest.mark.asyncio
    async def test_job_map_centre(self):
        """Test the map is centred on Iloilo City."""
        response = await job_map([], geocoder=LandmarkGeocoder())
        assert (response.center.longitude, response.center.latitude) == DEFAULT_CENTER
        assert response.markers == []
