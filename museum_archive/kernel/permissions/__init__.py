"""
Permission Core - role hierarchy and route guarding.
"""

from museum_archive.kernel.permissions.roles import (
    ROLE_HIERARCHY,
    role_rank,
    has_role_at_least,
    is_authorized,
)
from museum_archive.kernel.permissions.route_guard import (
    GuardDecision,
    GuardOutcome,
    RouteGuard,
)

__all__ = [
    "ROLE_HIERARCHY",
    "role_rank",
    "has_role_at_least",
    "is_authorized",
    "GuardDecision",
    "GuardOutcome",
    "RouteGuard",
]
