"""
Event listing filter by month and event type.
"""

from typing import Collection, Iterable, List, Optional

from museum_archive.kernel.models.event import MuseumEvent


def filter_events(
    events: Iterable[MuseumEvent],
    months: Optional[Collection[str]] = None,
    types: Optional[Collection[str]] = None,
) -> List[MuseumEvent]:
    """Multi-select month names and types; OR within each, AND across."""
    month_selection = {m.lower() for m in months or ()}
    type_selection = set(types or ())
    return [
        event
        for event in events
        if (not month_selection or event.month_name.lower() in month_selection)
        and (not type_selection or event.type in type_selection)
    ]
