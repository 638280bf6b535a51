"""
Archive Store

The single in-memory holder of the archive's collections, plus the seed
records it starts with.
"""

from museum_archive.kernel.store.archive_store import ArchiveStore, ArtifactStats
from museum_archive.kernel.store.errors import (
    ArchiveError,
    CompetitionClosedError,
    CompetitionFullError,
    CompetitionNotFoundError,
    DuplicateSubmissionError,
)
from museum_archive.kernel.store.seed import build_seeded_store

__all__ = [
    "ArchiveStore",
    "ArtifactStats",
    "ArchiveError",
    "CompetitionClosedError",
    "CompetitionFullError",
    "CompetitionNotFoundError",
    "DuplicateSubmissionError",
    "build_seeded_store",
]
