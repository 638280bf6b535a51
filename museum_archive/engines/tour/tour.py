"""
Virtual tour stops and the stepping contract the panorama viewer drives.

Panorama lookup itself belongs to the external viewer; this module only
decides which panorama to ask for and what to show when none is found.
"""

from enum import Enum
from typing import Callable, List, Optional, Sequence

from pydantic import BaseModel, Field

from museum_archive.logging_config import get_logger

logger = get_logger(__name__)

# Nearest-panorama search radius around a stop, in metres
PANORAMA_SEARCH_RADIUS_M = 100

# Autoplay never steps faster than this
MIN_AUTOPLAY_INTERVAL_MS = 2200
DEFAULT_AUTOPLAY_INTERVAL_MS = 6000


class TourStop(BaseModel):
    """One point of interest on the tour."""
    
    id: str
    title: str
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
    description: Optional[str] = None
    pano_id: Optional[str] = None  # forces an exact panorama when set
    heading: Optional[float] = None
    pitch: Optional[float] = None
    zoom: Optional[float] = None


DEFAULT_STOPS: List[TourStop] = [
    TourStop(
        id="lwm-main",
        title="Liberation War Museum (Main Entrance)",
        lat=23.775728,
        lng=90.369718,
        description=(
            "The primary campus at Sher-e-Bangla Nagar Civic Centre, Agargaon. "
            "Explore the grounds and galleries."
        ),
        heading=120,
        pitch=0,
        zoom=1,
    ),
    TourStop(
        id="lwm-gallery",
        title="Museum Gallery Area",
        lat=23.7755,
        lng=90.3695,
        description="Main exhibition halls showcasing artifacts and historical documents from the Liberation War.",
        heading=90,
        pitch=0,
        zoom=1,
    ),
    TourStop(
        id="lwm-garden",
        title="Memorial Garden",
        lat=23.7759,
        lng=90.3699,
        description="Peaceful memorial garden dedicated to the martyrs of the Liberation War.",
        heading=180,
        pitch=0,
        zoom=1,
    ),
    TourStop(
        id="lwm-library",
        title="Research Library",
        lat=23.7753,
        lng=90.3692,
        description="Collection of books, documents and research materials on Bangladesh's history.",
        heading=270,
        pitch=0,
        zoom=1,
    ),
]


class ViewSource(str, Enum):
    EXPLICIT = "explicit"   # stop named its panorama
    NEAREST = "nearest"     # viewer found one within the radius
    POSITION = "position"   # no panorama, centred on the raw coordinate


class TourView(BaseModel):
    """What the viewer should display for a stop."""
    
    stop_id: str
    source: ViewSource
    pano_id: Optional[str] = None
    lat: float
    lng: float
    heading: Optional[float] = None
    pitch: Optional[float] = None
    zoom: Optional[float] = None


# (lat, lng, radius_m) -> panorama id or None
PanoramaFinder = Callable[[float, float, int], Optional[str]]


def resolve_view(stop: TourStop, find_panorama: PanoramaFinder) -> TourView:
    """
    Decide which panorama to show for a stop.
    
    An explicit pano_id wins. Otherwise the viewer is asked for the nearest
    panorama within PANORAMA_SEARCH_RADIUS_M; when it has none, the view
    falls back to the stop's own coordinate so something is always shown.
    """
    framing = {"heading": stop.heading, "pitch": stop.pitch, "zoom": stop.zoom}
    
    if stop.pano_id:
        return TourView(
            stop_id=stop.id, source=ViewSource.EXPLICIT, pano_id=stop.pano_id,
            lat=stop.lat, lng=stop.lng, **framing,
        )
    
    pano_id = find_panorama(stop.lat, stop.lng, PANORAMA_SEARCH_RADIUS_M)
    if pano_id:
        return TourView(
            stop_id=stop.id, source=ViewSource.NEAREST, pano_id=pano_id,
            lat=stop.lat, lng=stop.lng, **framing,
        )
    
    logger.debug(
        "No panorama near tour stop, using position",
        extra={"stop_id": stop.id, "radius_m": PANORAMA_SEARCH_RADIUS_M},
    )
    return TourView(
        stop_id=stop.id, source=ViewSource.POSITION,
        lat=stop.lat, lng=stop.lng, **framing,
    )


class TourPlayer:
    """
    Position within an ordered list of stops, with autoplay state.
    
    next() and previous() wrap around. tick() is what an autoplay timer
    calls; it only advances while playing.
    """
    
    def __init__(
        self,
        stops: Sequence[TourStop] = tuple(DEFAULT_STOPS),
        interval_ms: int = DEFAULT_AUTOPLAY_INTERVAL_MS,
    ):
        if not stops:
            raise ValueError("A tour needs at least one stop")
        self.stops = list(stops)
        self.interval_ms = max(MIN_AUTOPLAY_INTERVAL_MS, interval_ms)
        self.index = 0
        self.is_playing = False
    
    @property
    def current(self) -> TourStop:
        return self.stops[self.index]
    
    def jump(self, index: int) -> TourStop:
        if not 0 <= index < len(self.stops):
            raise IndexError(f"Tour stop index {index} out of range")
        self.index = index
        return self.current
    
    def next(self) -> TourStop:
        return self.jump((self.index + 1) % len(self.stops))
    
    def previous(self) -> TourStop:
        return self.jump((self.index - 1) % len(self.stops))
    
    def play(self) -> None:
        self.is_playing = True
    
    def pause(self) -> None:
        self.is_playing = False
    
    def toggle(self) -> bool:
        self.is_playing = not self.is_playing
        return self.is_playing
    
    def tick(self) -> TourStop:
        if self.is_playing:
            return self.next()
        return self.current
