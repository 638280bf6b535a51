"""
Search and filter engine over the archive's in-memory collections.
"""

from museum_archive.engines.search.artifact_search import (
    ArtifactFilters,
    DATE_RANGE_PRESETS,
    parse_date_range,
    search_artifacts,
)
from museum_archive.engines.search.competition_filter import (
    TimeCategory,
    filter_competitions,
    time_category,
)
from museum_archive.engines.search.event_filter import filter_events
from museum_archive.engines.search.citation import CitationStyle, format_citation

__all__ = [
    "ArtifactFilters",
    "DATE_RANGE_PRESETS",
    "parse_date_range",
    "search_artifacts",
    "TimeCategory",
    "filter_competitions",
    "time_category",
    "filter_events",
    "CitationStyle",
    "format_citation",
]
