"""
Citation strings for artifacts.
"""

from datetime import date
from enum import Enum
from typing import Optional

from museum_archive.kernel.models.artifact import Artifact

ARCHIVE_NAME = "Liberation War Digital Archive"
ARCHIVE_HOST = "lwarchive.gov.bd"


class CitationStyle(str, Enum):
    APA = "apa"
    MLA = "mla"
    CHICAGO = "chicago"


def artifact_url(artifact: Artifact) -> str:
    return f"https://{ARCHIVE_HOST}/artifact/{artifact.id}"


def format_citation(
    artifact: Artifact,
    style: CitationStyle = CitationStyle.APA,
    accessed: Optional[date] = None,
) -> str:
    year = artifact.collection_year or "n.d."
    style = CitationStyle(style)
    
    if style == CitationStyle.APA:
        return (
            f"{artifact.contributor_name}. ({year}). {artifact.object_head} "
            f"[{artifact.object_type}]. {ARCHIVE_NAME}. Retrieved from {artifact_url(artifact)}"
        )
    if style == CitationStyle.MLA:
        return (
            f'{artifact.contributor_name}. "{artifact.object_head}." {ARCHIVE_NAME}, '
            f"{year}, {ARCHIVE_HOST}/artifact/{artifact.id}."
        )
    accessed = accessed or date.today()
    return (
        f'{artifact.contributor_name}, "{artifact.object_head}," {ARCHIVE_NAME}, '
        f"accessed {accessed.strftime('%B')} {accessed.day}, {accessed.year}, {artifact_url(artifact)}."
    )
