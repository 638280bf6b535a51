"""
Authentication schemas.
"""

from typing import Optional

from pydantic import BaseModel, EmailStr

from museum_archive.kernel.models.user import User, UserRole
from museum_archive.kernel.permissions.route_guard import GuardDecision


class LoginRequest(BaseModel):
    """Staff login request."""
    
    email: EmailStr
    password: str


class UserResponse(BaseModel):
    """Session identity as returned to clients."""
    
    id: str
    email: str
    name: str
    role: UserRole
    avatar: Optional[str] = None
    
    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls.model_validate(user.model_dump())


class TokenResponse(BaseModel):
    """Access token for the newly started session."""
    
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    user: UserResponse


class SessionResponse(BaseModel):
    """Current session state."""
    
    authenticated: bool
    is_loading: bool
    user: Optional[UserResponse] = None


class GuardResponse(BaseModel):
    """Route guard decision for a client-side navigation."""
    
    required_role: UserRole
    location: Optional[str] = None
    decision: GuardDecision
