"""
Virtual tour endpoints.

The panorama viewer runs client-side; these endpoints hand it the stops
and the next/previous stepping it autoplays through.
"""

from fastapi import APIRouter, HTTPException, status

from museum_archive.engines.tour.tour import (
    DEFAULT_STOPS,
    PANORAMA_SEARCH_RADIUS_M,
    TourPlayer,
)
from museum_archive.schemas.tour import TourResponse, TourStopResponse

router = APIRouter()


@router.get("/stops", response_model=TourResponse)
async def list_tour_stops():
    player = TourPlayer(DEFAULT_STOPS)
    return TourResponse(
        stops=player.stops,
        autoplay_interval_ms=player.interval_ms,
        panorama_search_radius_m=PANORAMA_SEARCH_RADIUS_M,
    )


@router.get("/stops/{stop_id}", response_model=TourStopResponse)
async def get_tour_stop(stop_id: str):
    player = TourPlayer(DEFAULT_STOPS)
    for index, stop in enumerate(player.stops):
        if stop.id == stop_id:
            player.jump(index)
            following = player.next().id
            player.jump(index)
            preceding = player.previous().id
            return TourStopResponse(
                index=index,
                stop=stop,
                next_stop_id=following,
                previous_stop_id=preceding,
            )
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tour stop not found")
