"""
Role hierarchy and the access-check primitive.
"""

from typing import Optional

from museum_archive.kernel.models.user import User, UserRole


# Role hierarchy - higher roles include everything lower roles may do
ROLE_HIERARCHY = {
    UserRole.PUBLIC: 0,
    UserRole.RESEARCHER: 1,
    UserRole.CURATOR: 2,
    UserRole.ARCHIVIST: 3,
    UserRole.SUPER_ADMIN: 4,
}

# Rank of an absent session; below every role, public included
ANONYMOUS_RANK = -1


def role_rank(role: Optional[UserRole]) -> int:
    if role is None:
        return ANONYMOUS_RANK
    return ROLE_HIERARCHY[UserRole(role)]


def has_role_at_least(role: Optional[UserRole], required_role: UserRole) -> bool:
    return role_rank(role) >= role_rank(required_role)


def is_authorized(user: Optional[User], required_role: UserRole) -> bool:
    """
    Check whether a session may access a resource requiring required_role.
    
    No session never passes, not even a public requirement.
    """
    if user is None:
        return False
    return has_role_at_least(user.role, required_role)
