"""Unit tests for the route guard."""

from museum_archive.kernel.models.user import User, UserRole
from museum_archive.kernel.permissions.route_guard import (
    HOME_PATH,
    LOGIN_PATH,
    GuardOutcome,
    RouteGuard,
)


def make_user(role: UserRole) -> User:
    return User(id="7", email="someone@museum.gov.bd", name="Someone", role=role)


class TestRouteGuard:
    
    def test_loading_defers_decision(self):
        decision = RouteGuard.evaluate(UserRole.ARCHIVIST, user=None, is_loading=True)
        assert decision.outcome == GuardOutcome.LOADING
        assert decision.redirect_to is None
    
    def test_loading_wins_even_with_a_user(self):
        decision = RouteGuard.evaluate(
            UserRole.PUBLIC, user=make_user(UserRole.SUPER_ADMIN), is_loading=True
        )
        assert decision.outcome == GuardOutcome.LOADING
    
    def test_anonymous_is_sent_to_login_with_return_location(self):
        decision = RouteGuard.evaluate(
            UserRole.ARCHIVIST, user=None, location="/admin/artifacts"
        )
        assert decision.outcome == GuardOutcome.REDIRECT_LOGIN
        assert decision.redirect_to == LOGIN_PATH
        assert decision.return_to == "/admin/artifacts"
        assert not decision.allowed
    
    def test_insufficient_role_is_denied_and_sent_home(self):
        decision = RouteGuard.evaluate(UserRole.ARCHIVIST, user=make_user(UserRole.CURATOR))
        assert decision.outcome == GuardOutcome.ACCESS_DENIED
        assert decision.redirect_to == HOME_PATH
        assert decision.message
    
    def test_sufficient_role_is_allowed(self):
        decision = RouteGuard.evaluate(UserRole.ARCHIVIST, user=make_user(UserRole.ARCHIVIST))
        assert decision.allowed
        assert decision.redirect_to is None
    
    def test_default_requirement_is_researcher(self):
        assert RouteGuard.evaluate(user=make_user(UserRole.RESEARCHER)).allowed
        denied = RouteGuard.evaluate(user=make_user(UserRole.PUBLIC))
        assert denied.outcome == GuardOutcome.ACCESS_DENIED
