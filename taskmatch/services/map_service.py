"""
Map service - turns jobs into map markers.

Geocoding is pluggable:
  - LandmarkGeocoder: offline lookup of known Iloilo City landmarks
  - MapboxGeocoder: Mapbox forward geocoding, used when a token is configured
"""
import random
from typing import Iterable, List, Optional, Protocol, Tuple
from urllib.parse import quote

import httpx

from taskmatch.core.config import settings
from taskmatch.core.logging import get_logger
from taskmatch.models.job import Address, FlexibleSchedule, Job
from taskmatch.schemas.map import Coordinates, JobMarker, MapResponse
from taskmatch.services.job_service import search_jobs

logger = get_logger(__name__)

# Iloilo City centre, (longitude, latitude)
DEFAULT_CENTER: Tuple[float, float] = (122.5642, 10.7202)

LANDMARK_JITTER = 0.001
FALLBACK_JITTER = 0.005

ILOILO_LANDMARKS = {
    "SM City Iloilo": (122.5613, 10.7133),
    "Plazuela de Iloilo": (122.5530, 10.7208),
    "Iloilo Business Park": (122.5684, 10.7135),
    "Atria Park District": (122.5518, 10.7156),
    "Iloilo City Hall": (122.5647, 10.7063),
    "Smallville Complex": (122.5523, 10.7166),
    "Festive Walk Mall": (122.5670, 10.7156),
    "Esplanade": (122.5706, 10.6968),
    "GT Town Center": (122.5843, 10.7198),
    "Robinson's Place Iloilo": (122.5429, 10.6970),
    "University of San Agustin": (122.5664, 10.7011),
    "West Visayas State University": (122.5686, 10.7039),
    "Iloilo Provincial Capitol": (122.5640, 10.7015),
    "Iloilo Doctors' Hospital": (122.5603, 10.7040),
    "St. Paul's Hospital": (122.5630, 10.7072),
    "Molo Church": (122.5496, 10.6962),
    "Jaro Cathedral": (122.5664, 10.7235),
    "Central Philippine University": (122.5612, 10.7234),
    "La Paz Public Market": (122.5734, 10.7149),
    "Calle Real": (122.5658, 10.6960),
}


class Geocoder(Protocol):
    async def geocode(self, address: Optional[Address]) -> Optional[Coordinates]:
        ...


class LandmarkGeocoder:
    """
    Matches a known landmark name inside the street line.

    Coordinates are jittered so jobs at the same landmark don't stack.
    Streets without a known landmark land near the city centre.
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    async def geocode(self, address: Optional[Address]) -> Optional[Coordinates]:
        if not address or not address.street:
            return None

        for landmark, (lng, lat) in ILOILO_LANDMARKS.items():
            if landmark in address.street:
                return self._jitter(lng, lat, LANDMARK_JITTER)

        return self._jitter(*DEFAULT_CENTER, FALLBACK_JITTER)

    def _jitter(self, lng: float, lat: float, spread: float) -> Coordinates:
        return Coordinates(
            longitude=lng + self._rng.uniform(-spread, spread),
            latitude=lat + self._rng.uniform(-spread, spread),
        )


class MapboxGeocoder:
    """Mapbox forward geocoding. Failures are logged and yield no marker."""

    def __init__(
        self,
        token: str,
        base_url: str = settings.mapbox_geocoding_url,
        timeout: float = settings.geocoding_timeout_seconds,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client

    async def geocode(self, address: Optional[Address]) -> Optional[Coordinates]:
        if not address or not address.street:
            return None

        query = ", ".join(
            part for part in (address.street, address.city, address.state, address.country) if part
        )
        url = f"{self.base_url}/{quote(query, safe='')}.json"
        params = {"access_token": self.token, "limit": 1}

        try:
            if self._client is not None:
                response = await self._client.get(url, params=params)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.get(url, params=params)
            response.raise_for_status()
            features = response.json().get("features") or []
        except httpx.TimeoutException:
            logger.warning("geocoding_timeout", query=query)
            return None
        except httpx.HTTPError as e:
            logger.warning("geocoding_failed", query=query, error=str(e))
            return None
        except ValueError as e:
            logger.warning("geocoding_bad_response", query=query, error=str(e))
            return None

        if not features:
            logger.info("geocoding_no_match", query=query)
            return None

        lng, lat = features[0]["center"][:2]
        return Coordinates(longitude=lng, latitude=lat)


def get_geocoder() -> Geocoder:
    """Mapbox when a token is configured, otherwise the landmark table."""
    if settings.mapbox_token:
        return MapboxGeocoder(settings.mapbox_token)
    return LandmarkGeocoder(seed=settings.map_jitter_seed)


def location_label(job: Job) -> str:
    address = job.address
    if not address:
        return "Remote"
    parts = [part for part in (address.city, address.state, address.country) if part]
    return ", ".join(parts) if parts else "Remote"


def schedule_label(job: Job) -> str:
    schedule = job.schedule
    if isinstance(schedule, FlexibleSchedule):
        return ", ".join(schedule.ordered_days())
    date = schedule.date
    return f"{date:%b} {date.day}, {date.year}"


async def job_markers(
    jobs: Iterable[Job],
    search: str = "",
    geocoder: Optional[Geocoder] = None,
) -> List[JobMarker]:
    """Markers for the jobs matching `search`. Jobs that can't be placed are skipped."""
    geocoder = geocoder or get_geocoder()

    markers = []
    for job in search_jobs(jobs, search):
        coordinates = await geocoder.geocode(job.address)
        if coordinates is None:
            continue
        markers.append(
            JobMarker(
                job_id=job.id,
                title=job.title,
                budget=job.budget,
                status=job.status,
                customer_name=job.customer_name,
                location_label=location_label(job),
                schedule_label=schedule_label(job),
                skills=job.skills,
                coordinates=coordinates,
            )
        )
    return markers


async def job_map(
    jobs: Iterable[Job],
    search: str = "",
    geocoder: Optional[Geocoder] = None,
) -> MapResponse:
    markers = await job_markers(jobs, search, geocoder)
    return MapResponse(
        center=Coordinates(longitude=DEFAULT_CENTER[0], latitude=DEFAULT_CENTER[1]),
        markers=markers,
    )
