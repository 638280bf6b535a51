"""
Pydantic schemas for API request/response validation.

Domain entities from museum_archive.kernel.models are returned as-is;
these are the request bodies and response envelopes around them.
"""

from museum_archive.schemas.auth import (
    LoginRequest,
    UserResponse,
    TokenResponse,
    SessionResponse,
    GuardResponse,
)
from museum_archive.schemas.artifact import CitationResponse
from museum_archive.schemas.competition import (
    CompetitionCreateRequest,
    CompetitionResponse,
    SubmissionReview,
    WithdrawResponse,
)
from museum_archive.schemas.tour import TourResponse, TourStopResponse
from museum_archive.schemas.common import (
    ErrorResponse,
    HealthResponse,
    ListResponse,
    SuccessResponse,
)

__all__ = [
    # Auth
    "LoginRequest",
    "UserResponse",
    "TokenResponse",
    "SessionResponse",
    "GuardResponse",
    # Artifact
    "CitationResponse",
    # Competition
    "CompetitionCreateRequest",
    "CompetitionResponse",
    "SubmissionReview",
    "WithdrawResponse",
    # Tour
    "TourResponse",
    "TourStopResponse",
    # Common
    "ErrorResponse",
    "HealthResponse",
    "ListResponse",
    "SuccessResponse",
]
