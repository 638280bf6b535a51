"""
Competition API schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from museum_archive.engines.search.competition_filter import TimeCategory, time_category
from museum_archive.kernel.models.competition import (
    Competition,
    CompetitionFields,
    SubmissionStatus,
)


class CompetitionCreateRequest(CompetitionFields):
    """Competition creation request; the owner defaults to the caller."""
    
    admin_user_id: Optional[str] = None


class CompetitionResponse(Competition):
    """Competition plus its derived, per-request classification."""
    
    time_category: TimeCategory
    accepting_submissions: bool
    
    @classmethod
    def build(cls, competition: Competition, now: datetime) -> "CompetitionResponse":
        return cls(
            **competition.model_dump(),
            time_category=time_category(competition, now),
            accepting_submissions=competition.is_accepting_submissions(now),
        )


class SubmissionReview(BaseModel):
    """Review outcome for a submission."""
    
    status: SubmissionStatus
    score: Optional[float] = Field(None, ge=0)
    feedback: Optional[str] = None


class WithdrawResponse(BaseModel):
    competition_id: str
    removed: int
