"""
Virtual tour schemas.
"""

from typing import List

from pydantic import BaseModel

from museum_archive.engines.tour.tour import TourStop


class TourResponse(BaseModel):
    stops: List[TourStop]
    autoplay_interval_ms: int
    panorama_search_radius_m: int


class TourStopResponse(BaseModel):
    """A stop with its neighbours, for next/previous navigation."""
    
    index: int
    stop: TourStop
    next_stop_id: str
    previous_stop_id: str
