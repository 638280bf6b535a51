"""
Virtual tour engine.
"""

from museum_archive.engines.tour.tour import (
    DEFAULT_STOPS,
    PANORAMA_SEARCH_RADIUS_M,
    TourPlayer,
    TourStop,
    TourView,
    ViewSource,
    resolve_view,
)

__all__ = [
    "DEFAULT_STOPS",
    "PANORAMA_SEARCH_RADIUS_M",
    "TourPlayer",
    "TourStop",
    "TourView",
    "ViewSource",
    "resolve_view",
]
