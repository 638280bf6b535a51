"""
Competition and submission models.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from museum_archive.kernel.models.base import EntityModel, PatchModel, ensure_utc


class CompetitionLevel(str, Enum):
    """Tier a competition runs at; winners advance to the next tier."""
    DISTRICT = "district"
    DIVISION = "division"
    NATIONAL = "national"


class CompetitionStatus(str, Enum):
    """Lifecycle status of a competition."""
    DRAFT = "draft"
    UPCOMING = "upcoming"
    OPEN = "open"
    JUDGING = "judging"
    CLOSED = "closed"
    COMPLETED = "completed"


# Statuses in which a competition still takes entries (deadline permitting)
ACCEPTING_STATUSES = frozenset({CompetitionStatus.OPEN, CompetitionStatus.JUDGING})

# Statuses never shown in the public listing
HIDDEN_STATUSES = frozenset({CompetitionStatus.DRAFT, CompetitionStatus.COMPLETED})


class SubmissionStatus(str, Enum):
    """Review status of a competition entry."""
    SUBMITTED = "submitted"
    UNDER_REVIEW = "under_review"
    QUALIFIED = "qualified"
    NOT_QUALIFIED = "not_qualified"
    WINNER = "winner"


class CompetitionFields(BaseModel):
    """Fields shared by the create payload and the stored competition."""
    
    title: str = Field(..., min_length=1)
    description: str = ""
    level: CompetitionLevel
    type: str = Field(..., min_length=1)  # essay, art, photography, poem-writing, ...
    eligibility_criteria: str = ""
    start_date: datetime
    end_date: datetime  # submission deadline
    judging_criteria: str = ""
    rewards: str = ""
    status: CompetitionStatus = CompetitionStatus.DRAFT
    admin_user_id: str
    related_exhibition_id: Optional[str] = None
    max_participants: Optional[int] = Field(None, ge=1)
    next_competition_id: Optional[str] = None
    thumbnail: str = ""
    
    @field_validator("start_date", "end_date")
    @classmethod
    def normalize_utc(cls, v: datetime) -> datetime:
        return ensure_utc(v)
    
    @model_validator(mode="after")
    def check_date_order(self):
        if self.end_date <= self.start_date:
            raise ValueError("end_date must be after start_date")
        return self


class CompetitionCreate(CompetitionFields):
    """Competition creation payload."""


class Competition(EntityModel, CompetitionFields):
    """A themed contest."""
    
    id: str
    date_created: datetime
    
    def is_accepting_submissions(self, now: datetime) -> bool:
        """Open for entries: accepting status and the deadline has not passed."""
        return self.status in ACCEPTING_STATUSES and ensure_utc(now) <= self.end_date


class CompetitionPatch(PatchModel):
    """Partial competition update."""
    
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    level: Optional[CompetitionLevel] = None
    type: Optional[str] = Field(None, min_length=1)
    eligibility_criteria: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    judging_criteria: Optional[str] = None
    rewards: Optional[str] = None
    status: Optional[CompetitionStatus] = None
    admin_user_id: Optional[str] = None
    related_exhibition_id: Optional[str] = None
    max_participants: Optional[int] = Field(None, ge=1)
    next_competition_id: Optional[str] = None
    thumbnail: Optional[str] = None


class CompetitionSubmission(EntityModel):
    """One user's entry into one competition."""
    
    id: str
    competition_id: str
    user_id: str
    submission_date: datetime
    status: SubmissionStatus = SubmissionStatus.SUBMITTED
    score: Optional[float] = None
    feedback: Optional[str] = None


class SubmissionPatch(PatchModel):
    """Review outcome applied to a submission."""
    
    status: Optional[SubmissionStatus] = None
    score: Optional[float] = Field(None, ge=0)
    feedback: Optional[str] = None
