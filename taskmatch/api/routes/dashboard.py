"""
Dashboard route.
"""
from typing import Union

from fastapi import APIRouter, Depends

from taskmatch.api.deps import get_current_user
from taskmatch.core.store import MarketplaceStore, get_store
from taskmatch.models.user import User
from taskmatch.schemas.dashboard import CustomerDashboard, FreelancerDashboard
from taskmatch.services.dashboard_service import DashboardService

router = APIRouter(tags=["dashboard"])

dashboard_service = DashboardService()


@router.get("/dashboard", response_model=Union[CustomerDashboard, FreelancerDashboard])
async def get_dashboard(
    current_user: User = Depends(get_current_user),
    store: MarketplaceStore = Depends(get_store),
):
    """Landing data for the current user; its shape depends on `role`."""
    return dashboard_service.dashboard_for(store, current_user)
