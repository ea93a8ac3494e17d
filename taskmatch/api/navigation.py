"""
Client route table and its access guard.

The web client asks where a path leads for the current user. Rules:
  - signed-out users hitting a protected page go to `/`
  - signed-in users hitting a page for the other role go to `/dashboard`
  - signed-in users on the landing page go to `/dashboard`
  - anything unmatched resolves to the not-found page
"""
from dataclasses import dataclass
from typing import Dict, List, Literal, Optional

from taskmatch.models.user import ROLE_CUSTOMER, ROLE_FREELANCER, User
from taskmatch.schemas.navigation import RouteDecision

Access = Literal["guest", "public", "authenticated", "customer", "freelancer"]

LANDING_PATH = "/"
DASHBOARD_PATH = "/dashboard"
NOT_FOUND_ROUTE = "not_found"


@dataclass(frozen=True)
class ClientRoute:
    name: str
    pattern: str
    access: Access

    def match(self, path: str) -> Optional[Dict[str, str]]:
        """Path parameters when `path` fits this pattern, else None."""
        expected = _segments(self.pattern)
        actual = _segments(path)
        if len(expected) != len(actual):
            return None

        params = {}
        for want, got in zip(expected, actual):
            if want.startswith(":"):
                if not got:
                    return None
                params[want[1:]] = got
            elif want != got:
                return None
        return params


ROUTES: List[ClientRoute] = [
    ClientRoute("landing", "/", "guest"),
    ClientRoute("dashboard", "/dashboard", "authenticated"),
    ClientRoute("customer_jobs", "/jobs", ROLE_CUSTOMER),
    ClientRoute("find_jobs", "/find-jobs", ROLE_FREELANCER),
    ClientRoute("post_job", "/post-job", ROLE_CUSTOMER),
    ClientRoute("job_detail", "/job/:id", "authenticated"),
    ClientRoute("applications", "/applications", ROLE_FREELANCER),
    ClientRoute("bookings", "/bookings", ROLE_FREELANCER),
    ClientRoute("profile", "/profile", "authenticated"),
    ClientRoute("freelancer_profile", "/freelancer/:id", "public"),
]


def _segments(path: str) -> List[str]:
    path = path.split("?", 1)[0].split("#", 1)[0]
    stripped = path.strip("/")
    return stripped.split("/") if stripped else []


def match_route(path: str):
    for route in ROUTES:
        params = route.match(path)
        if params is not None:
            return route, params
    return None, {}


def resolve(path: str, user: Optional[User]) -> RouteDecision:
    route, params = match_route(path)
    if route is None:
        return RouteDecision(path=path, route=NOT_FOUND_ROUTE, allowed=True)

    redirect_to = _redirect_for(route.access, user)
    return RouteDecision(
        path=path,
        route=route.name,
        params=params,
        allowed=redirect_to is None,
        redirect_to=redirect_to,
    )


def _redirect_for(access: Access, user: Optional[User]) -> Optional[str]:
    if access == "public":
        return None
    if access == "guest":
        return DASHBOARD_PATH if user else None
    if user is None:
        return LANDING_PATH
    if access in (ROLE_CUSTOMER, ROLE_FREELANCER) and user.role != access:
        return DASHBOARD_PATH
    return None
