"""
Identity registry - the fixed set of known staff identities.
"""

from typing import Iterable, List, Optional

from pydantic import BaseModel

from museum_archive.kernel.identity.password import PasswordHasher
from museum_archive.kernel.models.user import User, UserRole


# (id, email, name, role) of the accounts every deployment starts with
SEED_STAFF = (
    ("1", "admin@museum.gov.bd", "Dr. Rahman Ahmed", UserRole.SUPER_ADMIN),
    ("2", "archivist@museum.gov.bd", "Fatima Khan", UserRole.ARCHIVIST),
    ("3", "curator@museum.gov.bd", "Mohammad Hassan", UserRole.CURATOR),
    ("4", "researcher@museum.gov.bd", "Nusrat Jahan", UserRole.RESEARCHER),
)


def normalize_email(email: str) -> str:
    return email.lower().strip()


class StaffAccount(BaseModel):
    """A registered identity with its credential hash."""
    
    user: User
    password_hash: str
    is_active: bool = True


class IdentityRegistry:
    """
    Lookup and credential verification over registered identities.
    
    Passwords are only ever held as bcrypt hashes.
    """
    
    def __init__(self, accounts: Iterable[StaffAccount], hasher: Optional[PasswordHasher] = None):
        self.hasher = hasher or PasswordHasher()
        self._by_email = {normalize_email(a.user.email): a for a in accounts}
    
    @classmethod
    def from_seed(cls, password: str, hasher: Optional[PasswordHasher] = None) -> "IdentityRegistry":
        """Build the registry of seeded staff, all sharing one initial password."""
        hasher = hasher or PasswordHasher()
        accounts = [
            StaffAccount(
                user=User(id=user_id, email=email, name=name, role=role),
                password_hash=hasher.hash(password),
            )
            for user_id, email, name, role in SEED_STAFF
        ]
        return cls(accounts, hasher)
    
    @property
    def users(self) -> List[User]:
        return [account.user for account in self._by_email.values()]
    
    def get_by_email(self, email: str) -> Optional[User]:
        account = self._by_email.get(normalize_email(email))
        return account.user if account else None
    
    def get_by_id(self, user_id: str) -> Optional[User]:
        for account in self._by_email.values():
            if account.user.id == user_id:
                return account.user
        return None
    
    def verify_credentials(self, email: str, password: str) -> Optional[User]:
        """
        Resolve an identity from email and password.
        
        Returns None for an unknown email, a wrong password or a disabled
        account alike, so callers cannot tell the cases apart.
        """
        account = self._by_email.get(normalize_email(email))
        if account is None or not account.is_active:
            return None
        if not self.hasher.verify(password, account.password_hash):
            return None
        return account.user
    
    def search(self, query: str = "", role: Optional[str] = None) -> List[User]:
        """
        Staff directory listing: name/email substring match plus role filter.
        
        role may be a UserRole value, or None / "all" for no constraint.
        """
        needle = query.strip().lower()
        results = []
        for user in self.users:
            if needle and needle not in user.name.lower() and needle not in user.email.lower():
                continue
            if role and role != "all" and user.role.value != role:
                continue
            results.append(user)
        return results
