"""
Public competition listing filter.

Each competition is classified by time (upcoming / current / past) on
every evaluation; nothing is persisted. Within a filter dimension the
selected values are OR-ed, across dimensions they are AND-ed.
"""

from datetime import datetime
from enum import Enum
from typing import Collection, Iterable, List, Optional

from museum_archive.kernel.models.base import ensure_utc
from museum_archive.kernel.models.competition import (
    Competition,
    CompetitionLevel,
    HIDDEN_STATUSES,
)


class TimeCategory(str, Enum):
    UPCOMING = "upcoming"
    CURRENT = "current"
    PAST = "past"


def time_category(competition: Competition, now: datetime) -> TimeCategory:
    now = ensure_utc(now)
    if now < competition.start_date:
        return TimeCategory.UPCOMING
    if now <= competition.end_date:
        return TimeCategory.CURRENT
    return TimeCategory.PAST


def _selected(selection: Optional[Collection], value) -> bool:
    """An empty or absent selection lets everything through."""
    return not selection or value in selection


def filter_competitions(
    competitions: Iterable[Competition],
    now: datetime,
    time_categories: Optional[Collection[TimeCategory]] = None,
    types: Optional[Collection[str]] = None,
    levels: Optional[Collection[CompetitionLevel]] = None,
) -> List[Competition]:
    """
    Filter the competition list for public display.
    
    Draft and completed competitions are never listed.
    """
    time_selection = {TimeCategory(t) for t in time_categories or ()}
    level_selection = {CompetitionLevel(level) for level in levels or ()}
    type_selection = set(types or ())
    
    return [
        competition
        for competition in competitions
        if competition.status not in HIDDEN_STATUSES
        and _selected(time_selection, time_category(competition, now))
        and _selected(type_selection, competition.type)
        and _selected(level_selection, competition.level)
    ]
