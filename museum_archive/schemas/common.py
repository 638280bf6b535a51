"""
Common schema types used across the API.
"""

from typing import Any, Generic, List, Optional, TypeVar
from pydantic import BaseModel

T = TypeVar("T")


class ErrorResponse(BaseModel):
    """Standard error response."""
    
    detail: str
    code: Optional[str] = None
    request_id: Optional[str] = None


class SuccessResponse(BaseModel):
    """Standard success response."""
    
    message: str
    data: Optional[Any] = None


class ListResponse(BaseModel, Generic[T]):
    """Unpaginated list response; collections are small and held in memory."""
    
    items: List[T]
    total: int
    
    @classmethod
    def of(cls, items: List[T]) -> "ListResponse[T]":
        return cls(items=items, total=len(items))


class HealthResponse(BaseModel):
    """Health check response."""
    
    status: str = "ok"
    version: str
    session: str = "anonymous"
