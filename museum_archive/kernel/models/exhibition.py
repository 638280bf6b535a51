"""
Exhibition models.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from museum_archive.kernel.models.base import EntityModel, PatchModel


class ExhibitionFields(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = ""
    curator_note: str = ""
    featured_image: str = ""
    artifact_count: int = Field(0, ge=0)
    view_count: int = Field(0, ge=0)
    featured: bool = False


class ExhibitionCreate(ExhibitionFields):
    """Exhibition creation payload."""


class Exhibition(EntityModel, ExhibitionFields):
    """A curated exhibition."""
    
    id: str
    date_created: datetime


class ExhibitionPatch(PatchModel):
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    curator_note: Optional[str] = None
    featured_image: Optional[str] = None
    artifact_count: Optional[int] = Field(None, ge=0)
    view_count: Optional[int] = Field(None, ge=0)
    featured: Optional[bool] = None
