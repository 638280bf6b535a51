"""
Kernel Data Models

Domain entities held by the archive store, their create/patch payloads,
and the SQLAlchemy table backing the durable session record.
"""

from museum_archive.kernel.models.base import (
    Base,
    EntityModel,
    PatchModel,
    generate_id,
    utcnow,
)
from museum_archive.kernel.models.user import User, UserRole
from museum_archive.kernel.models.session_record import SessionRecord
from museum_archive.kernel.models.artifact import Artifact, ArtifactCreate, ArtifactPatch
from museum_archive.kernel.models.competition import (
    Competition,
    CompetitionCreate,
    CompetitionPatch,
    CompetitionLevel,
    CompetitionStatus,
    CompetitionSubmission,
    SubmissionPatch,
    SubmissionStatus,
)
from museum_archive.kernel.models.news import NewsArticle, NewsCreate, NewsPatch
from museum_archive.kernel.models.event import MuseumEvent, EventCreate, EventPatch
from museum_archive.kernel.models.exhibition import Exhibition, ExhibitionCreate, ExhibitionPatch

__all__ = [
    # Base
    "Base",
    "EntityModel",
    "PatchModel",
    "generate_id",
    "utcnow",
    # Identity
    "User",
    "UserRole",
    "SessionRecord",
    # Artifacts
    "Artifact",
    "ArtifactCreate",
    "ArtifactPatch",
    # Competitions
    "Competition",
    "CompetitionCreate",
    "CompetitionPatch",
    "CompetitionLevel",
    "CompetitionStatus",
    "CompetitionSubmission",
    "SubmissionPatch",
    "SubmissionStatus",
    # News, events, exhibitions
    "NewsArticle",
    "NewsCreate",
    "NewsPatch",
    "MuseumEvent",
    "EventCreate",
    "EventPatch",
    "Exhibition",
    "ExhibitionCreate",
    "ExhibitionPatch",
]
