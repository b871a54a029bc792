"""
Session Manager

Creates and destroys server-side session rows. Cookie handling lives in
xenia.api.utils.session_cookie.
"""

from datetime import timedelta
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from config import ApplicationConfig
from xenia.app.services.unit_of_work import UnitOfWork
from xenia.domain.base import utc_now
from xenia.domain.entities import Session


class ClientMetadata(BaseModel):
    """Client details recorded on the session row"""

    ip: Optional[str] = None
    user_agent: Optional[str] = None


def session_ttl() -> timedelta:
    return timedelta(days=ApplicationConfig.SESSION_TTL_DAYS)


async def create_session(
    uow: UnitOfWork,
    user_id: UUID,
    org_id: UUID,
    metadata: Optional[ClientMetadata] = None,
) -> Session:
    """Add a session bound to (user, org); the caller commits."""
    metadata = metadata or ClientMetadata()
    session = Session(
        user_id=user_id,
        org_id=org_id,
        expires_at=utc_now() + session_ttl(),
        ip=metadata.ip,
        user_agent=metadata.user_agent,
    )
    return await uow.sessions.create(session)


async def destroy_session(uow: UnitOfWork, session_id: UUID) -> bool:
    """Delete the session row; the caller commits."""
    return await uow.sessions.delete_by_id(session_id)
