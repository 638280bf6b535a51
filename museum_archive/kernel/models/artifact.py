"""
Artifact models - cataloged historical items.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from museum_archive.kernel.models.base import EntityModel, PatchModel, ensure_utc


def _dedupe_tags(tags: List[str]) -> List[str]:
    """Drop blank and repeated tags, keeping first-seen order."""
    seen = set()
    result = []
    for tag in tags:
        tag = tag.strip()
        if tag and tag not in seen:
            seen.add(tag)
            result.append(tag)
    return result


class ArtifactFields(BaseModel):
    """Descriptive metadata shared by the create payload and the stored artifact."""
    
    collection_number: str = Field(..., min_length=1)
    accession_number: str = Field(..., min_length=1)
    collection_date: str = ""
    contributor_name: str = ""
    object_type: str = Field(..., min_length=1)
    object_head: str = Field(..., min_length=1)
    description: str = ""
    measurement: str = ""
    gallery_number: str = ""
    found_place: str = ""
    significance_comment: str = ""
    experiment_formula: Optional[str] = None
    correction: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    images: List[str] = Field(..., min_length=1)
    is_public: bool = False
    
    @field_validator("tags")
    @classmethod
    def normalize_tags(cls, v: List[str]) -> List[str]:
        return _dedupe_tags(v)


class ArtifactCreate(ArtifactFields):
    """Artifact creation payload; id and date_created are assigned by the store."""


class Artifact(EntityModel, ArtifactFields):
    """A cataloged artifact."""
    
    id: str
    date_created: datetime
    
    @field_validator("date_created")
    @classmethod
    def normalize_utc(cls, v: datetime) -> datetime:
        return ensure_utc(v)
    
    @property
    def collection_year(self) -> Optional[int]:
        """Year the item was collected, when the date string starts with one."""
        head = self.collection_date.strip()[:4]
        return int(head) if len(head) == 4 and head.isdigit() else None


class ArtifactPatch(PatchModel):
    """Partial artifact update."""
    
    collection_number: Optional[str] = Field(None, min_length=1)
    accession_number: Optional[str] = Field(None, min_length=1)
    collection_date: Optional[str] = None
    contributor_name: Optional[str] = None
    object_type: Optional[str] = Field(None, min_length=1)
    object_head: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    measurement: Optional[str] = None
    gallery_number: Optional[str] = None
    found_place: Optional[str] = None
    significance_comment: Optional[str] = None
    experiment_formula: Optional[str] = None
    correction: Optional[str] = None
    tags: Optional[List[str]] = None
    images: Optional[List[str]] = Field(None, min_length=1)
    is_public: Optional[bool] = None
