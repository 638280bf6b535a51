"""
FastAPI dependencies for the archive store, the current session and role gating.
"""

from typing import Annotated, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from museum_archive.kernel.identity.auth_service import AuthService
from museum_archive.kernel.identity.registry import IdentityRegistry
from museum_archive.kernel.models.user import User, UserRole
from museum_archive.kernel.permissions.roles import has_role_at_least
from museum_archive.kernel.permissions.route_guard import GuardOutcome, RouteGuard
from museum_archive.kernel.store.archive_store import ArchiveStore
from museum_archive.logging_config import session_user_var

# Security scheme
security = HTTPBearer(auto_error=False)

# Seconds a client should wait while the session is still being restored
LOADING_RETRY_AFTER = "1"


def get_store(request: Request) -> ArchiveStore:
    """The archive store built at startup."""
    return request.app.state.store


def get_auth(request: Request) -> AuthService:
    """The session's authentication service."""
    return request.app.state.auth


def get_registry(auth: Annotated[AuthService, Depends(get_auth)]) -> IdentityRegistry:
    return auth.registry


Store = Annotated[ArchiveStore, Depends(get_store)]
Auth = Annotated[AuthService, Depends(get_auth)]
Registry = Annotated[IdentityRegistry, Depends(get_registry)]


async def get_current_user_optional(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)],
    auth: Auth,
) -> Optional[User]:
    """Session identity if the bearer token belongs to the current session, None otherwise."""
    if not credentials:
        return None
    user = auth.user_for_token(credentials.credentials)
    if user is not None:
        session_user_var.set(user.id)
    return user


OptionalUser = Annotated[Optional[User], Depends(get_current_user_optional)]


def get_request_id(request: Request) -> Optional[str]:
    """Get request correlation ID (set by RequestIdMiddleware)."""
    return getattr(request.state, "request_id", None)


def is_staff(user: Optional[User]) -> bool:
    """Staff may see unpublished records; the back office starts at archivist."""
    return user is not None and has_role_at_least(user.role, UserRole.ARCHIVIST)


class RoleGuard:
    """
    Dependency that runs the route guard for the request's identity.
    
    Guard outcomes map onto HTTP the way a client router would act on them:
    loading is 503 (retry shortly), redirect-to-login is 401 and
    access-denied is 403, each carrying where the client should go next.
    
    Usage:
        @router.post("")
        async def create_artifact(user: StaffUser, store: Store, data: ArtifactCreate):
            ...
    """
    
    def __init__(self, required_role: Optional[UserRole] = None):
        self.required_role = required_role
    
    async def __call__(
        self,
        request: Request,
        user: OptionalUser,
        auth: Auth,
    ) -> User:
        decision = RouteGuard.evaluate(
            self.required_role,
            user=user,
            is_loading=auth.is_loading,
            location=request.url.path,
        )
        
        if decision.outcome == GuardOutcome.LOADING:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Session is loading",
                headers={"Retry-After": LOADING_RETRY_AFTER},
            )
        
        if decision.outcome == GuardOutcome.REDIRECT_LOGIN:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail={
                    "message": decision.message,
                    "redirect_to": decision.redirect_to,
                    "return_to": decision.return_to,
                },
                headers={"WWW-Authenticate": "Bearer"},
            )
        
        if decision.outcome == GuardOutcome.ACCESS_DENIED:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail={
                    "message": decision.message,
                    "redirect_to": decision.redirect_to,
                },
            )
        
        return user


# Convenience role dependencies
CurrentUser = Annotated[User, Depends(RoleGuard(UserRole.PUBLIC))]
StaffUser = Annotated[User, Depends(RoleGuard(UserRole.ARCHIVIST))]
SuperAdmin = Annotated[User, Depends(RoleGuard(UserRole.SUPER_ADMIN))]
