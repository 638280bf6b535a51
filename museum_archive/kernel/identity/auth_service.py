"""
Authentication service - the current session and its access checks.
"""

import asyncio
import secrets
from typing import Optional

from pydantic import BaseModel, ValidationError

from museum_archive.kernel.identity.jwt import JWTManager
from museum_archive.kernel.identity.registry import IdentityRegistry
from museum_archive.kernel.identity.storage import SessionStorage
from museum_archive.kernel.models.user import User, UserRole
from museum_archive.kernel.permissions.roles import is_authorized
from museum_archive.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_STORAGE_KEY = "museum_user"


class StoredSession(BaseModel):
    """Serialized form of the session kept in durable storage."""
    
    user: User
    access_token: str


class AuthService:
    """
    Holds the current session: anonymous, or authenticated as one identity.
    
    - login() replaces any existing session on success and leaves it
      untouched on failure
    - logout() clears it unconditionally
    - restore() loads the persisted record once at startup
    
    A later login completing after an earlier one wins; nothing serializes
    concurrent attempts.
    """
    
    def __init__(
        self,
        registry: IdentityRegistry,
        storage: SessionStorage,
        jwt_manager: Optional[JWTManager] = None,
        storage_key: str = DEFAULT_STORAGE_KEY,
        login_delay: float = 1.0,
    ):
        self.registry = registry
        self.storage = storage
        self.jwt_manager = jwt_manager or JWTManager()
        self.storage_key = storage_key
        self.login_delay = login_delay
        
        self._user: Optional[User] = None
        self._access_token: Optional[str] = None
        self._restored = False
        self._logins_in_flight = 0
    
    @property
    def current_user(self) -> Optional[User]:
        return self._user
    
    @property
    def access_token(self) -> Optional[str]:
        return self._access_token
    
    @property
    def is_loading(self) -> bool:
        """True until the persisted session is restored, and while a login is pending."""
        return not self._restored or self._logins_in_flight > 0
    
    async def restore(self) -> Optional[User]:
        """
        Restore the session persisted by a previous process.
        
        A corrupt record, or one whose token no longer verifies, is erased
        and the session starts anonymous.
        """
        try:
            raw = await self.storage.get(self.storage_key)
            if raw is None:
                return None
            
            try:
                record = StoredSession.model_validate_json(raw)
            except ValidationError:
                logger.warning("Discarding unreadable session record")
                await self.storage.delete(self.storage_key)
                return None
            
            payload = self.jwt_manager.verify_access_token(record.access_token)
            if payload is None or payload.sub != record.user.id:
                logger.info("Discarding expired session record", extra={"user_id": record.user.id})
                await self.storage.delete(self.storage_key)
                return None
            
            self._user = record.user
            self._access_token = record.access_token
            logger.info("Session restored", extra={"user_id": record.user.id})
            return self._user
        finally:
            self._restored = True
    
    async def login(self, email: str, password: str) -> bool:
        """
        Authenticate and start a new session.
        
        Returns:
            True on success; False for bad credentials, without saying which check failed
        """
        self._logins_in_flight += 1
        try:
            await asyncio.sleep(self.login_delay)
            
            user = self.registry.verify_credentials(email, password)
            if user is None:
                logger.info("Login failed")
                return False
            
            token, _, _ = self.jwt_manager.create_access_token(user)
            record = StoredSession(user=user, access_token=token)
            await self.storage.set(self.storage_key, record.model_dump_json())
            
            self._user = user
            self._access_token = token
            logger.info("User logged in", extra={"user_id": user.id, "role": user.role.value})
            return True
        finally:
            self._logins_in_flight -= 1
    
    async def logout(self) -> None:
        """End the session. Safe to call when already anonymous."""
        if self._user is not None:
            logger.info("User logged out", extra={"user_id": self._user.id})
        self._user = None
        self._access_token = None
        await self.storage.delete(self.storage_key)
    
    def is_authorized(self, required_role: UserRole) -> bool:
        """Whether the current session meets required_role."""
        return is_authorized(self._user, required_role)
    
    def user_for_token(self, token: Optional[str]) -> Optional[User]:
        """
        Resolve a bearer token to the session identity.
        
        Only the token issued by the current session is accepted; tokens
        from replaced or ended sessions resolve to None.
        """
        if not token or self._access_token is None or self._user is None:
            return None
        if not secrets.compare_digest(token, self._access_token):
            return None
        if self.jwt_manager.verify_access_token(token) is None:
            return None
        return self._user
