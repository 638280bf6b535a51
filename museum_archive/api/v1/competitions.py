"""
Competition endpoints.

The public listing hides drafts and completed competitions and classifies
the rest by time on every request. Any signed-in identity may enter a
competition; running competitions is back-office work.
"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from museum_archive.api.deps import CurrentUser, OptionalUser, StaffUser, Store, is_staff
from museum_archive.engines.search.competition_filter import TimeCategory, filter_competitions
from museum_archive.kernel.models.competition import (
    HIDDEN_STATUSES,
    Competition,
    CompetitionLevel,
    CompetitionPatch,
    CompetitionSubmission,
)
from museum_archive.kernel.models.user import User
from museum_archive.kernel.store.archive_store import ArchiveStore
from museum_archive.schemas.common import SuccessResponse
from museum_archive.schemas.competition import (
    CompetitionCreateRequest,
    CompetitionResponse,
    SubmissionReview,
    WithdrawResponse,
)

router = APIRouter()


def _not_found(what: str = "Competition") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{what} not found",
    )


def _visible_competition(store: ArchiveStore, competition_id: str, user: Optional[User]) -> Competition:
    competition = store.get_competition_by_id(competition_id)
    if competition is None:
        raise _not_found()
    if competition.status in HIDDEN_STATUSES and not is_staff(user):
        raise _not_found()
    return competition


@router.get("", response_model=List[CompetitionResponse])
async def list_competitions(
    store: Store,
    time: Optional[List[TimeCategory]] = Query(None),
    type: Optional[List[str]] = Query(None),
    level: Optional[List[CompetitionLevel]] = Query(None),
):
    """
    Public competition listing.
    
    Each filter is multi-select (repeat the parameter); values within one
    filter are alternatives, and all active filters must hold.
    """
    now = store.now()
    competitions = filter_competitions(
        store.competitions,
        now,
        time_categories=time,
        types=type,
        levels=level,
    )
    return [CompetitionResponse.build(c, now) for c in competitions]


@router.post("", response_model=CompetitionResponse, status_code=status.HTTP_201_CREATED)
async def create_competition(data: CompetitionCreateRequest, store: Store, user: StaffUser):
    payload = data.model_dump()
    payload["admin_user_id"] = data.admin_user_id or user.id
    competition = store.add_competition(payload)
    return CompetitionResponse.build(competition, store.now())


@router.patch("/submissions/{submission_id}", response_model=CompetitionSubmission)
async def review_submission(submission_id: str, data: SubmissionReview, store: Store, _: StaffUser):
    """Record a review status, and optionally a score and feedback."""
    submission = store.update_submission_status(
        submission_id,
        data.status,
        score=data.score,
        feedback=data.feedback,
    )
    if submission is None:
        raise _not_found("Submission")
    return submission


@router.get("/{competition_id}", response_model=CompetitionResponse)
async def get_competition(competition_id: str, store: Store, user: OptionalUser):
    competition = _visible_competition(store, competition_id, user)
    return CompetitionResponse.build(competition, store.now())


@router.get("/{competition_id}/next", response_model=CompetitionResponse)
async def get_next_competition(competition_id: str, store: Store, user: OptionalUser):
    """The competition winners of this one advance to."""
    _visible_competition(store, competition_id, user)
    successor = store.next_competition(competition_id)
    if successor is None or (successor.status in HIDDEN_STATUSES and not is_staff(user)):
        raise _not_found("Next competition")
    return CompetitionResponse.build(successor, store.now())


@router.patch("/{competition_id}", response_model=CompetitionResponse)
async def update_competition(
    competition_id: str,
    data: CompetitionPatch,
    store: Store,
    _: StaffUser,
):
    competition = store.update_competition(competition_id, data)
    if competition is None:
        raise _not_found()
    return CompetitionResponse.build(competition, store.now())


@router.delete("/{competition_id}", response_model=SuccessResponse)
async def delete_competition(competition_id: str, store: Store, _: StaffUser):
    """Delete a competition and every submission made to it."""
    if not store.delete_competition(competition_id):
        raise _not_found()
    return SuccessResponse(message="Competition deleted")


@router.get("/{competition_id}/submissions", response_model=List[CompetitionSubmission])
async def list_submissions(competition_id: str, store: Store, _: StaffUser):
    if store.get_competition_by_id(competition_id) is None:
        raise _not_found()
    return store.get_submissions_for_competition(competition_id)


@router.post(
    "/{competition_id}/entries",
    response_model=CompetitionSubmission,
    status_code=status.HTTP_201_CREATED,
)
async def enter_competition(competition_id: str, store: Store, user: CurrentUser):
    """
    Enter the caller into a competition.
    
    Store constraint errors (unknown, closed, full, already entered) are
    turned into responses by the application's ArchiveError handler.
    """
    _visible_competition(store, competition_id, user)
    return store.submit_competition_entry(competition_id, user.id)


@router.get("/{competition_id}/entries/me", response_model=CompetitionSubmission)
async def get_my_entry(competition_id: str, store: Store, user: CurrentUser):
    submission = store.get_user_submission(competition_id, user.id)
    if submission is None:
        raise _not_found("Submission")
    return submission


@router.delete("/{competition_id}/entries", response_model=WithdrawResponse)
async def withdraw_from_competition(competition_id: str, store: Store, user: CurrentUser):
    """Withdraw the caller's entry. Withdrawing when not entered is not an error."""
    removed = store.withdraw_competition_entry(competition_id, user.id)
    return WithdrawResponse(competition_id=competition_id, removed=removed)
