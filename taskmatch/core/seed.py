"""
Demo data - the identities and marketplace records a fresh store starts with.

Loaded by the app lifespan when `seed_demo_data` is on, so every developer
can log in as john@example.com (customer) or jane@example.com (freelancer)
straight away. Passwords are not checked; any value works.

Seeding is IDEMPOTENT - a store that already has users is left alone.
"""
import datetime as dt
from datetime import datetime, timezone

from taskmatch.core.logging import get_logger
from taskmatch.core.store import MarketplaceStore
from taskmatch.models.application import APPLICATION_STATUS_PENDING
from taskmatch.models.job import Address, FlexibleSchedule, SpecificSchedule
from taskmatch.models.user import ROLE_CUSTOMER, ROLE_FREELANCER
from taskmatch.repositories import (
    ApplicationRepository,
    ExperienceRepository,
    JobRepository,
    ReviewRepository,
    ServiceOfferingRepository,
    UserRepository,
)

logger = get_logger(__name__)


# ─── Identities ────────────────────────────────────────────────

CUSTOMER = {
    "email": "john@example.com",
    "name": "John Doe",
    "role": ROLE_CUSTOMER,
    "bio": "Small business owner in Iloilo City.",
    "skills": [],
}

FREELANCER = {
    "email": "jane@example.com",
    "name": "Jane Smith",
    "role": ROLE_FREELANCER,
    "bio": "Full-stack developer who also designs the interfaces she builds.",
    "skills": ["React", "Node.js", "UI/UX Design"],
}

ELECTRICIAN = {
    "email": "mike@electricpro.com",
    "name": "Mike Johnson",
    "role": ROLE_FREELANCER,
    "bio": (
        "Licensed electrician with over 15 years of experience in residential "
        "and commercial electrical services. Available 24/7 for emergency calls."
    ),
    "skills": [
        "Electrical Repairs",
        "Panel Upgrades",
        "Lighting Installation",
        "Home Inspections",
        "Code Compliance",
        "Emergency Services",
    ],
    "avatar": "https://images.unsplash.com/photo-1560250097-0b93528c311a?w=250&h=250&auto=format&fit=crop",
}


# ─── Jobs ──────────────────────────────────────────────────────

JOBS = [
    {
        "title": "Build a responsive website",
        "description": (
            "I need a responsive website for my small business. "
            "Should include about, services, and contact pages."
        ),
        "budget": 500,
        "skills": ["HTML", "CSS", "JavaScript"],
        "schedule": SpecificSchedule(date=dt.date(2024, 7, 1), time_slot="10:00 AM - 12:00 PM"),
        "address": Address(
            street="Iloilo Business Park, Mandurriao",
            city="Iloilo City",
            state="Iloilo",
            zip_code="5000",
            country="Philippines",
        ),
        "created_at": datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc),
    },
    {
        "title": "Logo design for tech startup",
        "description": "I need a modern, minimalist logo for my tech startup in the AI space.",
        "budget": 300,
        "skills": ["Graphic Design", "Branding"],
        "schedule": FlexibleSchedule(days={"Monday", "Wednesday", "Friday"}, timeframe="Afternoons"),
        "address": None,
        "created_at": datetime(2024, 5, 5, 14, 30, tzinfo=timezone.utc),
    },
]

COVER_LETTER = (
    "I'm an experienced web developer and I can build your website "
    "with the latest technologies."
)


# ─── Profile catalog ───────────────────────────────────────────

ELECTRICIAN_SERVICES = [
    {
        "title": "Electrical Repairs",
        "description": "Diagnosis and repair of faulty outlets, switches and wiring.",
        "rate": 85,
        "rate_unit": "hour",
    },
    {
        "title": "Panel Upgrades",
        "description": "Replacement of outdated electrical panels to current code.",
        "rate": 1200,
        "rate_unit": "project",
    },
    {
        "title": "Lighting Installation",
        "description": "Indoor and outdoor fixtures, recessed and landscape lighting.",
        "rate": 450,
        "rate_unit": "day",
    },
]

FREELANCER_SERVICES = [
    {
        "title": "Landing page build",
        "description": "A responsive single-page site with contact form.",
        "rate": 40,
        "rate_unit": "hour",
    },
]

ELECTRICIAN_REVIEWS = [
    {
        "job_title": "Kitchen lighting upgrade",
        "rating": 5,
        "comment": "Mike was punctual and the new lights look great.",
        "created_at": datetime(2024, 4, 12, 9, 0, tzinfo=timezone.utc),
    },
    {
        "job_title": "Breaker keeps tripping",
        "rating": 4,
        "comment": "Found the fault quickly. Left a bit of a mess.",
        "created_at": datetime(2024, 3, 2, 16, 0, tzinfo=timezone.utc),
    },
    {
        "job_title": "Outdoor outlet install",
        "rating": 5,
        "comment": "Clear quote and clean work.",
        "created_at": datetime(2024, 1, 20, 11, 30, tzinfo=timezone.utc),
    },
]

# Oldest first; the timeline lists the latest addition on top
ELECTRICIAN_EXPERIENCE = [
    {
        "title": "Apprentice Electrician",
        "company": "Johnson's Electric",
        "location": "Iloilo City, Iloilo",
        "start_date": dt.date(2011, 9, 1),
        "end_date": dt.date(2014, 3, 1),
        "description": "Assisted senior electricians on residential and commercial jobs through certification.",
    },
    {
        "title": "Electrician",
        "company": "Urban Electric Co.",
        "location": "Bacolod City, Negros Occidental",
        "start_date": dt.date(2014, 3, 15),
        "end_date": dt.date(2018, 5, 30),
        "description": "Residential installations and repairs, plus the company's 24/7 emergency calls.",
    },
    {
        "title": "Senior Electrician",
        "company": "PowerGrid Solutions",
        "location": "Iloilo City, Iloilo",
        "start_date": dt.date(2018, 6, 1),
        "end_date": None,
        "description": "Leads commercial and residential wiring projects and safety compliance checks.",
        "current": True,
    },
]


def seed_demo_data(store: MarketplaceStore) -> bool:
    """
    Populate an empty store.

    Returns:
        True if data was inserted, False if the store already had users.
    """
    users = UserRepository()
    if users.count(store):
        logger.info("seed_skipped", reason="store not empty")
        return False

    jobs = JobRepository()
    applications = ApplicationRepository()
    services = ServiceOfferingRepository()
    reviews = ReviewRepository()
    experiences = ExperienceRepository()

    customer = users.create(store, **CUSTOMER)
    freelancer = users.create(store, **FREELANCER)
    electrician = users.create(store, **ELECTRICIAN)

    created_jobs = [
        jobs.create(store, customer_id=customer.id, customer_name=customer.name, **job)
        for job in JOBS
    ]

    applications.create(
        store,
        job_id=created_jobs[0].id,
        freelancer_id=freelancer.id,
        freelancer_name=freelancer.name,
        cover_letter=COVER_LETTER,
        status=APPLICATION_STATUS_PENDING,
        created_at=datetime(2024, 5, 7, 9, 15, tzinfo=timezone.utc),
    )

    for service in ELECTRICIAN_SERVICES:
        services.create(store, freelancer_id=electrician.id, **service)
    for service in FREELANCER_SERVICES:
        services.create(store, freelancer_id=freelancer.id, **service)

    for review in ELECTRICIAN_REVIEWS:
        reviews.create(
            store,
            freelancer_id=electrician.id,
            customer_id=customer.id,
            customer_name=customer.name,
            job_id=store.new_id(),
            **review,
        )

    for entry in ELECTRICIAN_EXPERIENCE:
        experiences.create(store, freelancer_id=electrician.id, **entry)

    logger.info("seed_completed", **store.counts())
    return True
