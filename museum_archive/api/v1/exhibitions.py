"""
Exhibition endpoints.
"""

from typing import List

from fastapi import APIRouter, HTTPException, status

from museum_archive.api.deps import StaffUser, Store
from museum_archive.kernel.models.exhibition import Exhibition, ExhibitionCreate, ExhibitionPatch
from museum_archive.schemas.common import SuccessResponse

router = APIRouter()


def _exhibition_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exhibition not found")


@router.get("", response_model=List[Exhibition])
async def list_exhibitions(store: Store, featured: bool = False):
    if featured:
        return store.featured_exhibitions()
    return store.exhibitions


@router.get("/{exhibition_id}", response_model=Exhibition)
async def get_exhibition(exhibition_id: str, store: Store):
    exhibition = store.get_exhibition_by_id(exhibition_id)
    if exhibition is None:
        raise _exhibition_not_found()
    return exhibition


@router.post("", response_model=Exhibition, status_code=status.HTTP_201_CREATED)
async def create_exhibition(data: ExhibitionCreate, store: Store, _: StaffUser):
    """Create an exhibition through the store so it gets a proper id."""
    return store.add_exhibition(data)


@router.patch("/{exhibition_id}", response_model=Exhibition)
async def update_exhibition(exhibition_id: str, data: ExhibitionPatch, store: Store, _: StaffUser):
    exhibition = store.update_exhibition(exhibition_id, data)
    if exhibition is None:
        raise _exhibition_not_found()
    return exhibition


@router.delete("/{exhibition_id}", response_model=SuccessResponse)
async def delete_exhibition(exhibition_id: str, store: Store, _: StaffUser):
    if not store.delete_exhibition(exhibition_id):
        raise _exhibition_not_found()
    return SuccessResponse(message="Exhibition deleted")
