"""
Identity Core - credentials, tokens and the current session.
"""

from museum_archive.kernel.identity.password import PasswordHasher, verify_password, hash_password
from museum_archive.kernel.identity.jwt import JWTManager, AccessTokenPayload
from museum_archive.kernel.identity.registry import IdentityRegistry, StaffAccount
from museum_archive.kernel.identity.storage import (
    SessionStorage,
    InMemorySessionStorage,
    SqlSessionStorage,
)
from museum_archive.kernel.identity.auth_service import AuthService, StoredSession

__all__ = [
    "PasswordHasher",
    "verify_password",
    "hash_password",
    "JWTManager",
    "AccessTokenPayload",
    "IdentityRegistry",
    "StaffAccount",
    "SessionStorage",
    "InMemorySessionStorage",
    "SqlSessionStorage",
    "AuthService",
    "StoredSession",
]
