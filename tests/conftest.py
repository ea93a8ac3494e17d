"""Pytest configuration and fixtures."""

import os
import secrets

import pytest

# Settings are read at import time, so configure the environment first
os.environ.setdefault("SECRET_KEY", f"test-only-{secrets.token_urlsafe(32)}")
os.environ["ENVIRONMENT"] = "test"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["SESSION_STORAGE_URL"] = "memory://"
os.environ["SIMULATED_LATENCY_MS"] = "0"
os.environ["SEED_DEMO_DATA"] = "true"
os.environ["MAP_JITTER_SEED"] = "7"
os.environ.pop("MAPBOX_TOKEN", None)

from fastapi.testclient import TestClient  # noqa: E402

from taskmatch.core.storage import MemoryKeyValueStore  # noqa: E402
from taskmatch.core.store import MarketplaceStore  # noqa: E402
from taskmatch.main import app  # noqa: E402
from taskmatch.models.job import Address, SpecificSchedule  # noqa: E402
from taskmatch.models.user import ROLE_CUSTOMER, ROLE_FREELANCER  # noqa: E402
from taskmatch.repositories import JobRepository, UserRepository  # noqa: E402
from taskmatch.schemas.job import JobCreate  # noqa: E402

SLOT_MORNING = "8:00 AM - 10:00 AM"
SLOT_AFTERNOON = "1:00 PM - 3:00 PM"


@pytest.fixture
def store():
    """An empty marketplace store with no latency."""
    return MarketplaceStore()


@pytest.fixture
def kv():
    return MemoryKeyValueStore()


@pytest.fixture
def customer(store):
    return UserRepository().create(
        store, email="carla@example.com", name="Carla Customer", role=ROLE_CUSTOMER
    )


@pytest.fixture
def other_customer(store):
    return UserRepository().create(
        store, email="owen@example.com", name="Owen Owner", role=ROLE_CUSTOMER
    )


@pytest.fixture
def freelancer(store):
    return UserRepository().create(
        store,
        email="fay@example.com",
        name="Fay Freelancer",
        role=ROLE_FREELANCER,
        skills=["Plumbing"],
    )


@pytest.fixture
def other_freelancer(store):
    return UserRepository().create(
        store, email="gus@example.com", name="Gus Gig", role=ROLE_FREELANCER
    )


def make_job_create(**overrides) -> JobCreate:
    data = {
        "title": "Fix leaking sink",
        "description": "Kitchen sink drips constantly.",
        "budget": 120,
        "schedule": {"type": "specific", "date": "2030-06-15", "time_slot": SLOT_MORNING},
        "skills": ["Plumbing"],
        "address": {"street": "Calle Real 12", "city": "Iloilo City", "state": "Iloilo", "country": "Philippines"},
    }
    data.update(overrides)
    return JobCreate.model_validate(data)


@pytest.fixture
def open_job(store, customer):
    """An open job posted by `customer`."""
    return JobRepository().create(
        store,
        customer_id=customer.id,
        customer_name=customer.name,
        title="Fix leaking sink",
        description="Kitchen sink drips constantly.",
        budget=120,
        schedule=SpecificSchedule(date="2030-06-15", time_slot=SLOT_MORNING),
        skills=["Plumbing"],
        address=Address(street="Calle Real 12", city="Iloilo City", state="Iloilo"),
    )


@pytest.fixture
def client():
    """Test client with a freshly seeded store per test."""
    with TestClient(app) as test_client:
        yield test_client


def login(client, email: str) -> dict:
    """Log in as a seeded identity and return auth headers."""
    response = client.post("/api/v1/auth/login", json={"email": email, "password": "anything"})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def customer_headers(client):
    return login(client, "john@example.com")


@pytest.fixture
def freelancer_headers(client):
    return login(client, "jane@example.com")
