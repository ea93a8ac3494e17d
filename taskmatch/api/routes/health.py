"""
Health check routes.
"""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from taskmatch.api.deps import get_kv_store
from taskmatch.core.storage import KeyValueStore
from taskmatch.core.store import MarketplaceStore, get_store
from taskmatch.schemas.base import BaseSchema

router = APIRouter(tags=["health"])


class HealthResponse(BaseSchema):
    """Health check response."""

    status: str
    timestamp: str
    checks: dict
    collections: dict


@router.get("/health", response_model=HealthResponse)
async def health_check(
    store: MarketplaceStore = Depends(get_store),
    kv: KeyValueStore = Depends(get_kv_store),
):
    """
    Health check endpoint for monitoring.

    Returns 200 with `degraded` status if the session storage is unreachable.
    """
    checks = {}

    try:
        checks["session_storage"] = "healthy" if await kv.ping() else "unhealthy"
    except Exception as e:
        checks["session_storage"] = f"unhealthy: {str(e)}"

    all_healthy = all(v == "healthy" for v in checks.values())

    return HealthResponse(
        status="healthy" if all_healthy else "degraded",
        timestamp=datetime.now(timezone.utc).isoformat(),
        checks=checks,
        collections=store.counts(),
    )
