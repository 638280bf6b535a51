"""
Museum event models.
"""

from datetime import date as calendar_date, datetime
from typing import Optional

from pydantic import BaseModel, Field

from museum_archive.kernel.models.base import EntityModel, PatchModel


class EventFields(BaseModel):
    title: str = Field(..., min_length=1)
    date: calendar_date
    time: str = ""  # display range, e.g. "10:00am – 2:00pm BST"
    location: str = ""
    type: str = ""
    description: str = ""
    image_url: Optional[str] = None


class EventCreate(EventFields):
    """Event creation payload."""


class MuseumEvent(EntityModel, EventFields):
    """A scheduled museum event."""
    
    id: str
    date_created: datetime
    
    @property
    def month_name(self) -> str:
        return self.date.strftime("%B")


class EventPatch(PatchModel):
    title: Optional[str] = Field(None, min_length=1)
    date: Optional[calendar_date] = None
    time: Optional[str] = None
    location: Optional[str] = None
    type: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
