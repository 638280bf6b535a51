"""
Durable storage for the single session record.
"""

from typing import Dict, Optional, Protocol

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from museum_archive.kernel.models.session_record import SessionRecord


class SessionStorage(Protocol):
    """Key/value storage holding at most one serialized session per key."""
    
    async def get(self, key: str) -> Optional[str]: ...
    
    async def set(self, key: str, value: str) -> None: ...
    
    async def delete(self, key: str) -> None: ...


class InMemorySessionStorage:
    """Process-local storage; nothing survives a restart."""
    
    def __init__(self):
        self._data: Dict[str, str] = {}
    
    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)
    
    async def set(self, key: str, value: str) -> None:
        self._data[key] = value
    
    async def delete(self, key: str) -> None:
        self._data.pop(key, None)


class SqlSessionStorage:
    """
    Storage backed by the session_records table.
    
    Usage:
        storage = SqlSessionStorage(async_session_maker)
        await storage.set("museum_user", record_json)
    """
    
    def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
        self.session_maker = session_maker
    
    async def get(self, key: str) -> Optional[str]:
        async with self.session_maker() as session:
            result = await session.execute(
                select(SessionRecord.value).where(SessionRecord.key == key)
            )
            return result.scalar_one_or_none()
    
    async def set(self, key: str, value: str) -> None:
        async with self.session_maker() as session:
            await session.merge(SessionRecord(key=key, value=value))
            await session.commit()
    
    async def delete(self, key: str) -> None:
        async with self.session_maker() as session:
            await session.execute(delete(SessionRecord).where(SessionRecord.key == key))
            await session.commit()
