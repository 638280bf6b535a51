"""
Authentication endpoints.

The service hosts a single session: logging in replaces it, and only the
token issued by the latest login is accepted.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from museum_archive.api.deps import Auth, CurrentUser, OptionalUser
from museum_archive.kernel.models.user import UserRole
from museum_archive.kernel.permissions.route_guard import RouteGuard
from museum_archive.schemas.auth import (
    GuardResponse,
    LoginRequest,
    SessionResponse,
    TokenResponse,
    UserResponse,
)
from museum_archive.schemas.common import SuccessResponse

router = APIRouter()


@router.post("/login", response_model=TokenResponse)
async def login(data: LoginRequest, auth: Auth):
    """
    Authenticate a staff identity and start a new session.
    
    The error does not say whether the email or the password was wrong.
    """
    if not await auth.login(data.email, data.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )
    
    return TokenResponse(
        access_token=auth.access_token,
        expires_in=auth.jwt_manager.access_token_expire_minutes * 60,
        user=UserResponse.from_user(auth.current_user),
    )


@router.post("/logout", response_model=SuccessResponse)
async def logout(auth: Auth, user: OptionalUser):
    """
    End the current session.
    
    Idempotent: succeeds when nobody is logged in. An active session can
    only be ended by presenting its token.
    """
    if auth.current_user is not None and user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    await auth.logout()
    return SuccessResponse(message="Logged out successfully")


@router.get("/me", response_model=UserResponse)
async def get_current_user_profile(user: CurrentUser):
    """Get the session identity."""
    return UserResponse.from_user(user)


@router.get("/session", response_model=SessionResponse)
async def get_session(auth: Auth, user: OptionalUser):
    """Session state as seen by the caller's token."""
    return SessionResponse(
        authenticated=user is not None,
        is_loading=auth.is_loading,
        user=UserResponse.from_user(user) if user else None,
    )


@router.get("/guard", response_model=GuardResponse)
async def evaluate_guard(
    auth: Auth,
    user: OptionalUser,
    required_role: UserRole = RouteGuard.DEFAULT_REQUIRED_ROLE,
    location: Optional[str] = Query(None, max_length=2048),
):
    """
    Route guard decision for a client-side navigation.
    
    Lets a client router ask whether to render a gated view, send the
    user to login, or show access denied.
    """
    decision = RouteGuard.evaluate(
        required_role,
        user=user,
        is_loading=auth.is_loading,
        location=location,
    )
    return GuardResponse(required_role=required_role, location=location, decision=decision)
