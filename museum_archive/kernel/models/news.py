"""
News article models.
"""

from datetime import date as calendar_date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from museum_archive.kernel.models.base import EntityModel, PatchModel


class NewsFields(BaseModel):
    title: str = Field(..., min_length=1)
    category: str = ""
    image_url: str = ""
    date: calendar_date
    author: str = ""
    summary: str = ""
    content: str = ""
    tags: List[str] = Field(default_factory=list)


class NewsCreate(NewsFields):
    """News article creation payload."""


class NewsArticle(EntityModel, NewsFields):
    """A published news item or notice."""
    
    id: str
    date_created: datetime


class NewsPatch(PatchModel):
    title: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = None
    image_url: Optional[str] = None
    date: Optional[calendar_date] = None
    author: Optional[str] = None
    summary: Optional[str] = None
    content: Optional[str] = None
    tags: Optional[List[str]] = None
