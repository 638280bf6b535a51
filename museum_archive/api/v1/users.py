"""
Staff directory endpoints (super admin only).
"""

from typing import List

from fastapi import APIRouter, HTTPException, Query, status

from museum_archive.api.deps import Registry, SuperAdmin
from museum_archive.schemas.auth import UserResponse

router = APIRouter()


@router.get("", response_model=List[UserResponse])
async def list_users(
    registry: Registry,
    _: SuperAdmin,
    q: str = Query("", max_length=200),
    role: str = "all",
):
    """Staff identities matching a name/email substring and role."""
    return [UserResponse.from_user(u) for u in registry.search(q, role)]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, registry: Registry, _: SuperAdmin):
    user = registry.get_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return UserResponse.from_user(user)
