from typing import Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select

from xenia.adapter.repositories.base import SqlModelRepository
from xenia.app.repositories.session_repository import ISessionRepository
from xenia.domain.entities import Session


class SessionRepository(SqlModelRepository[Session], ISessionRepository):
    """Session repository implementation using SQLModel"""

    async def get_by_id(self, session_id: UUID) -> Optional[Session]:
        """Get session by ID"""
        return await self._one_or_none(select(Session).where(Session.id == session_id))

    async def create(self, session_obj: Session) -> Session:
        return await self._save(session_obj)

    async def delete_by_id(self, session_id: UUID) -> bool:
        """Delete a specific session by ID"""
        stmt = delete(Session).where(Session.id == session_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
