"""
Session Entity

Server-side login record referenced by the session cookie.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from xenia.domain.base import utc_now


class Session(SQLModel, table=True):
    """
    Session entity - binds one user to one organization for a bounded window.

    Business Rules:
    - The id is the opaque cookie value
    - Expires 7 days after creation
    - Expiry is checked lazily on every request; expired rows are left in place
    - Switching organization requires a new session
    """

    __tablename__ = "sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    org_id: UUID = Field(foreign_key="organizations.id", nullable=False, index=True)

    created_at: datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime, nullable=False)
    )
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))

    # Client metadata captured at login
    ip: Optional[str] = Field(default=None, max_length=64)
    user_agent: Optional[str] = None

    __table_args__ = (Index("idx_session_expires_at", "expires_at"),)
