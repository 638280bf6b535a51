"""
Artifact search: free-text query plus structured filters.

Results only ever contain public artifacts and keep collection order;
there is no relevance ranking.
"""

import re
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel

from museum_archive.kernel.models.artifact import Artifact
from museum_archive.logging_config import get_logger

logger = get_logger(__name__)

# Sentinel meaning "no constraint" for every select-style filter
ALL = "all"

# Named collection-date presets, as inclusive (first_year, last_year)
DATE_RANGE_PRESETS = {
    "1971": (1971, 1971),
    "1970-1971": (1970, 1971),
    "pre-1970": (None, 1969),
}

_YEAR_SPAN = re.compile(r"^(\d{4})\s*-\s*(\d{4})$")


class ArtifactFilters(BaseModel):
    """Structured search filters. Absent or "all" values impose no constraint."""
    
    object_type: Optional[str] = ALL
    date_range: Optional[str] = None
    location: Optional[str] = None


FiltersInput = Union[ArtifactFilters, Mapping[str, Any], None]


def _is_active(value: Optional[str]) -> bool:
    return bool(value) and value != ALL


def parse_date_range(value: Optional[str]) -> Optional[Tuple[Optional[int], Optional[int]]]:
    """
    Resolve a date-range filter to inclusive year bounds.
    
    Accepts the named presets and explicit "YYYY-YYYY" spans; anything
    else (including "all") means no constraint.
    """
    if not _is_active(value):
        return None
    value = value.strip()
    if value in DATE_RANGE_PRESETS:
        return DATE_RANGE_PRESETS[value]
    match = _YEAR_SPAN.match(value)
    if match:
        first, last = int(match.group(1)), int(match.group(2))
        return (min(first, last), max(first, last))
    if value.isdigit() and len(value) == 4:
        return (int(value), int(value))
    logger.debug("Ignoring unknown date range filter", extra={"date_range": value})
    return None


def matches_query(artifact: Artifact, query: str) -> bool:
    """Case-insensitive substring match on title, description, tags or contributor."""
    needle = query.lower()
    return (
        needle in artifact.object_head.lower()
        or needle in artifact.description.lower()
        or any(needle in tag.lower() for tag in artifact.tags)
        or needle in artifact.contributor_name.lower()
    )


def _in_year_range(artifact: Artifact, bounds: Tuple[Optional[int], Optional[int]]) -> bool:
    year = artifact.collection_year
    if year is None:
        return False
    first, last = bounds
    return (first is None or year >= first) and (last is None or year <= last)


def coerce_filters(filters: FiltersInput) -> ArtifactFilters:
    if filters is None:
        return ArtifactFilters()
    if isinstance(filters, ArtifactFilters):
        return filters
    return ArtifactFilters.model_validate(dict(filters))


def search_artifacts(
    artifacts: Iterable[Artifact],
    query: str = "",
    filters: FiltersInput = None,
) -> List[Artifact]:
    """
    Compute the public artifacts matching a query and filters.
    
    Args:
        artifacts: Collection in insertion order
        query: Free text; empty matches everything
        filters: ArtifactFilters or an equivalent mapping
        
    Returns:
        Matching public artifacts, in collection order
    """
    filters = coerce_filters(filters)
    query = query or ""
    year_bounds = parse_date_range(filters.date_range)
    location = filters.location.strip().lower() if _is_active(filters.location) else None
    
    results = []
    for artifact in artifacts:
        if not artifact.is_public:
            continue
        if query and not matches_query(artifact, query):
            continue
        if _is_active(filters.object_type) and artifact.object_type != filters.object_type:
            continue
        if year_bounds is not None and not _in_year_range(artifact, year_bounds):
            continue
        if location and location not in artifact.found_place.lower():
            continue
        results.append(artifact)
    return results
