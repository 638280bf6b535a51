"""
User identity model.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class UserRole(str, Enum):
    """Roles in the system, lowest to highest."""
    PUBLIC = "public"
    RESEARCHER = "researcher"
    CURATOR = "curator"
    ARCHIVIST = "archivist"
    SUPER_ADMIN = "super_admin"


class User(BaseModel):
    """An authenticated identity. Users are referenced by id, never stored in the archive."""
    
    model_config = ConfigDict(frozen=True)
    
    id: str
    email: str
    name: str
    role: UserRole
    avatar: Optional[str] = None
    
    def __repr__(self) -> str:
        return f"<User {self.email}>"
