"""Tests for the client route guard."""

import pytest

from taskmatch.api.navigation import NOT_FOUND_ROUTE, resolve
from taskmatch.models.user import User


@pytest.fixture
def john():
    return User(id="u1", email="john@example.com", name="John Doe", role="customer")


@pytest.fixture
def jane():
    return User(id="u2", email="jane@example.com", name="Jane Smith", role="freelancer")


class TestResolve:
    """Test navigation.resolve."""

    @pytest.mark.parametrize("path", ["/dashboard", "/jobs", "/find-jobs", "/job/7", "/profile", "/bookings"])
    def test_guest_sent_to_landing(self, path):
        """Test protected pages redirect signed-out users to the landing page."""
        decision = resolve(path, None)
        assert decision.allowed is False
        assert decision.redirect_to == "/"

    def test_landing_redirects_signed_in_users(self, john):
        """Test signed-in users skip the landing page."""
        assert resolve("/", john).redirect_to == "/dashboard"
        assert resolve("/", None).allowed is True

    def test_wrong_role_sent_to_dashboard(self, john, jane):
        """Test role-specific pages bounce the other role to the dashboard."""
        assert resolve("/find-jobs", john).redirect_to == "/dashboard"
        assert resolve("/post-job", jane).redirect_to == "/dashboard"
        assert resolve("/applications", john).redirect_to == "/dashboard"

    def test_right_role_allowed(self, john, jane):
        """Test each role reaches its own pages."""
        assert resolve("/jobs", john).allowed is True
        assert resolve("/bookings", jane).allowed is True
        assert resolve("/dashboard", jane).route == "dashboard"

    def test_path_params(self, jane):
        """Test `:id` segments are captured."""
        decision = resolve("/job/abc123", jane)
        assert decision.route == "job_detail"
        assert decision.params == {"id": "abc123"}

    def test_public_freelancer_profile(self):
        """Test freelancer profiles need no login."""
        decision = resolve("/freelancer/42", None)
        assert decision.allowed is True
        assert decision.params == {"id": "42"}

    def test_unknown_path(self, john):
        """Test unmatched paths resolve to not-found."""
        assert resolve("/nowhere", john).route == NOT_FOUND_ROUTE
        assert resolve("/job", None).route == NOT_FOUND_ROUTE
