"""
Kernel Layer

The foundational components every surface of the archive builds on:
- Domain models (artifacts, competitions, submissions, news, events, exhibitions)
- Identity Core (staff registry, credentials, the current session)
- Permission Core (role order, route guard)
- Archive Store (museum_archive.kernel.store, imported directly)

Architectural invariants:
- Entities are immutable; all mutation goes through the archive store
- Patch types never carry identity or creation-timestamp fields
- Only the session record is durable; collections live in memory
"""

from museum_archive.kernel.models import (
    User,
    UserRole,
    Artifact,
    Competition,
    CompetitionSubmission,
    NewsArticle,
    MuseumEvent,
    Exhibition,
)
from museum_archive.kernel.identity import AuthService, IdentityRegistry
from museum_archive.kernel.permissions import RouteGuard, is_authorized

__all__ = [
    "User",
    "UserRole",
    "Artifact",
    "Competition",
    "CompetitionSubmission",
    "NewsArticle",
    "MuseumEvent",
    "Exhibition",
    "AuthService",
    "IdentityRegistry",
    "RouteGuard",
    "is_authorized",
]
