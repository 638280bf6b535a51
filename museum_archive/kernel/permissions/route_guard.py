"""
Route guard for role-gated views.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from museum_archive.kernel.models.user import User, UserRole
from museum_archive.kernel.permissions.roles import has_role_at_least

LOGIN_PATH = "/login"
HOME_PATH = "/"


class GuardOutcome(str, Enum):
    """What to do with a navigation attempt."""
    LOADING = "loading"
    REDIRECT_LOGIN = "redirect_login"
    ACCESS_DENIED = "access_denied"
    ALLOW = "allow"


class GuardDecision(BaseModel):
    """Result of evaluating a guarded navigation."""
    
    outcome: GuardOutcome
    redirect_to: Optional[str] = None
    # Location to come back to after logging in (best effort)
    return_to: Optional[str] = None
    message: Optional[str] = None
    
    @property
    def allowed(self) -> bool:
        return self.outcome == GuardOutcome.ALLOW


class RouteGuard:
    """
    Decide whether a session may open a role-gated view.
    
    Usage:
        decision = RouteGuard.evaluate(
            UserRole.ARCHIVIST,
            user=auth.current_user,
            is_loading=auth.is_loading,
            location="/admin/artifacts",
        )
    """
    
    DEFAULT_REQUIRED_ROLE = UserRole.RESEARCHER
    
    @staticmethod
    def evaluate(
        required_role: Optional[UserRole] = None,
        *,
        user: Optional[User],
        is_loading: bool = False,
        location: Optional[str] = None,
    ) -> GuardDecision:
        required = required_role or RouteGuard.DEFAULT_REQUIRED_ROLE
        
        if is_loading:
            return GuardDecision(outcome=GuardOutcome.LOADING)
        
        if user is None:
            return GuardDecision(
                outcome=GuardOutcome.REDIRECT_LOGIN,
                redirect_to=LOGIN_PATH,
                return_to=location,
                message="Please log in to continue",
            )
        
        if not has_role_at_least(user.role, required):
            return GuardDecision(
                outcome=GuardOutcome.ACCESS_DENIED,
                redirect_to=HOME_PATH,
                message="You do not have permission to access this page",
            )
        
        return GuardDecision(outcome=GuardOutcome.ALLOW)
