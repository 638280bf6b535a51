"""
Artifact API schemas.
"""

from pydantic import BaseModel

from museum_archive.engines.search.citation import CitationStyle


class CitationResponse(BaseModel):
    artifact_id: str
    style: CitationStyle
    citation: str
