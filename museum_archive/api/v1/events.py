"""
Museum event endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from museum_archive.api.deps import StaffUser, Store
from museum_archive.engines.search.event_filter import filter_events
from museum_archive.kernel.models.event import EventCreate, EventPatch, MuseumEvent
from museum_archive.schemas.common import SuccessResponse

router = APIRouter()


def _event_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")


@router.get("", response_model=List[MuseumEvent])
async def list_events(
    store: Store,
    month: Optional[List[str]] = Query(None),
    type: Optional[List[str]] = Query(None),
):
    """Events filtered by month name and type; repeat a parameter to select several."""
    return filter_events(store.events, months=month, types=type)


@router.get("/{event_id}", response_model=MuseumEvent)
async def get_event(event_id: str, store: Store):
    event = store.get_event_by_id(event_id)
    if event is None:
        raise _event_not_found()
    return event


@router.post("", response_model=MuseumEvent, status_code=status.HTTP_201_CREATED)
async def create_event(data: EventCreate, store: Store, _: StaffUser):
    return store.add_event(data)


@router.patch("/{event_id}", response_model=MuseumEvent)
async def update_event(event_id: str, data: EventPatch, store: Store, _: StaffUser):
    event = store.update_event(event_id, data)
    if event is None:
        raise _event_not_found()
    return event


@router.delete("/{event_id}", response_model=SuccessResponse)
async def delete_event(event_id: str, store: Store, _: StaffUser):
    if not store.delete_event(event_id):
        raise _event_not_found()
    return SuccessResponse(message="Event deleted")
