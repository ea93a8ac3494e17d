"""
In-memory marketplace store.

The store plays the part a database session plays elsewhere: repositories
receive it as their first argument and read or replace its collections.

Collections are tuples. A write builds a new tuple and swaps it in with a
single assignment, so concurrent readers either see the old collection or
the new one, never a partially updated list.
"""
import asyncio
import uuid
from typing import Dict, Iterable, Tuple

from starlette.requests import Request

from taskmatch.core.config import settings
from taskmatch.models.base import Entity

COLLECTIONS = (
    "users",
    "jobs",
    "applications",
    "bookings",
    "services",
    "reviews",
    "resumes",
    "experiences",
)


class MarketplaceStore:
    """Owns every marketplace collection and the identifiers handed out for them."""

    def __init__(self, latency_seconds: float = 0.0):
        self.latency_seconds = latency_seconds
        self._collections: Dict[str, Tuple[Entity, ...]] = {
            name: () for name in COLLECTIONS
        }

    def new_id(self) -> str:
        return uuid.uuid4().hex

    def snapshot(self, name: str) -> Tuple[Entity, ...]:
        return self._collections[name]

    def replace(self, name: str, items: Iterable[Entity]) -> None:
        if name not in self._collections:
            raise KeyError(f"Unknown collection: {name}")
        self._collections[name] = tuple(items)

    async def simulate_latency(self) -> None:
        """Stand-in for a network round trip before a mutation lands."""
        if self.latency_seconds > 0:
            await asyncio.sleep(self.latency_seconds)

    def counts(self) -> Dict[str, int]:
        return {name: len(items) for name, items in self._collections.items()}

    def clear(self) -> None:
        for name in COLLECTIONS:
            self._collections[name] = ()


def create_store() -> MarketplaceStore:
    """Build a store configured from settings."""
    return MarketplaceStore(latency_seconds=settings.simulated_latency_seconds)


def get_store(request: Request) -> MarketplaceStore:
    """
    Dependency for getting the application's store.

    Usage:
        @router.get("/items")
        async def get_items(store: MarketplaceStore = Depends(get_store)):
            ...
    """
    return request.app.state.store
