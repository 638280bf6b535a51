"""
Artifact endpoints.

Search and detail views are public and only ever show published
artifacts; the back office (archivist and above) sees and edits all.
"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from museum_archive.api.deps import OptionalUser, StaffUser, Store, is_staff
from museum_archive.engines.search.artifact_search import ALL, ArtifactFilters
from museum_archive.engines.search.citation import CitationStyle, format_citation
from museum_archive.kernel.models.artifact import Artifact, ArtifactCreate, ArtifactPatch
from museum_archive.kernel.models.user import User
from museum_archive.kernel.store.archive_store import ArchiveStore, ArtifactStats
from museum_archive.schemas.artifact import CitationResponse
from museum_archive.schemas.common import ListResponse, SuccessResponse

router = APIRouter()


def _visible_artifact(store: ArchiveStore, artifact_id: str, user: Optional[User]) -> Artifact:
    """Artifact by id, treating unpublished ones as missing for non-staff."""
    artifact = store.get_artifact_by_id(artifact_id)
    if artifact is None or not (artifact.is_public or is_staff(user)):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Artifact not found",
        )
    return artifact


@router.get("/search", response_model=ListResponse[Artifact])
async def search_artifacts(
    store: Store,
    q: str = Query("", max_length=200),
    object_type: str = ALL,
    date_range: Optional[str] = None,
    location: Optional[str] = None,
):
    """Search published artifacts by text and filters, in catalog order."""
    filters = ArtifactFilters(object_type=object_type, date_range=date_range, location=location)
    return ListResponse[Artifact].of(store.search_artifacts(q, filters))


@router.get("", response_model=ListResponse[Artifact])
async def list_artifacts(store: Store, _: StaffUser):
    """All artifacts, published or not."""
    return ListResponse[Artifact].of(store.artifacts)


@router.get("/stats", response_model=ArtifactStats)
async def artifact_stats(store: Store, _: StaffUser):
    return store.artifact_stats()


@router.post("", response_model=Artifact, status_code=status.HTTP_201_CREATED)
async def create_artifact(data: ArtifactCreate, store: Store, _: StaffUser):
    """Catalog a new artifact. The id and creation date are assigned here."""
    return store.add_artifact(data)


@router.get("/{artifact_id}", response_model=Artifact)
async def get_artifact(artifact_id: str, store: Store, user: OptionalUser):
    return _visible_artifact(store, artifact_id, user)


@router.get("/{artifact_id}/related", response_model=List[Artifact])
async def get_related_artifacts(
    artifact_id: str,
    store: Store,
    user: OptionalUser,
    limit: int = Query(3, ge=1, le=20),
):
    _visible_artifact(store, artifact_id, user)
    return store.related_artifacts(artifact_id, limit=limit)


@router.get("/{artifact_id}/citation", response_model=CitationResponse)
async def get_artifact_citation(
    artifact_id: str,
    store: Store,
    user: OptionalUser,
    style: CitationStyle = CitationStyle.APA,
):
    artifact = _visible_artifact(store, artifact_id, user)
    return CitationResponse(
        artifact_id=artifact.id,
        style=style,
        citation=format_citation(artifact, style),
    )


@router.patch("/{artifact_id}", response_model=Artifact)
async def update_artifact(artifact_id: str, data: ArtifactPatch, store: Store, _: StaffUser):
    """Apply a partial update; fields not sent are left unchanged."""
    artifact = store.update_artifact(artifact_id, data)
    if artifact is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Artifact not found",
        )
    return artifact


@router.delete("/{artifact_id}", response_model=SuccessResponse)
async def delete_artifact(artifact_id: str, store: Store, _: StaffUser):
    if not store.delete_artifact(artifact_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Artifact not found",
        )
    return SuccessResponse(message="Artifact deleted")
