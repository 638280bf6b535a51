"""
Base model with common fields and utilities.
"""

import time
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""


class EntityModel(BaseModel):
    """
    Base class for stored domain entities.

    Entities are frozen: the only way to change one is through the store,
    which builds a new validated instance from the old one plus a patch.
    """

    model_config = ConfigDict(frozen=True)


class PatchModel(BaseModel):
    """
    Base class for partial updates.

    Unknown fields are rejected, so a patch can never carry an identity
    or creation-timestamp field.
    """

    model_config = ConfigDict(extra="forbid")

    def changes(self) -> dict:
        """Fields the caller actually set, including explicit None."""
        return self.model_dump(exclude_unset=True)


_last_id: int = 0


def generate_id() -> str:
    """
    Generate a new entity id.

    Ids are nanosecond timestamps bumped to stay strictly increasing, so two
    entities created within the same clock tick still get distinct ids.
    """
    global _last_id
    candidate = time.time_ns()
    if candidate <= _last_id:
        candidate = _last_id + 1
    _last_id = candidate
    return str(candidate)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive datetimes as UTC so comparisons never mix aware/naive."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
