"""
Durable key/value record backing the authenticated session.
"""

from datetime import datetime

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from museum_archive.kernel.models.base import Base


class SessionRecord(Base):
    """One serialized value under a storage key."""
    
    __tablename__ = "session_records"
    
    key: Mapped[str] = mapped_column(
        String(100),
        primary_key=True,
    )
    value: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
    
    def __repr__(self) -> str:
        return f"<SessionRecord {self.key}>"
