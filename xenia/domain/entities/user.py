"""
User Entity

Represents a person who can belong to multiple organizations.
"""

from datetime import datetime
from typing import Optional, TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Relationship, SQLModel

from xenia.domain.base import utc_now

if TYPE_CHECKING:
    from .membership import Membership


class User(SQLModel, table=True):
    """
    User entity - represents a person who can belong to multiple organizations.

    Business Rules:
    - Email must be unique across all users
    - Created (or reactivated) when an invitation is accepted
    - Never hard-deleted; deactivation clears is_active
    - Password stored as an argon2 hash
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str
    name: Optional[str] = Field(default=None, max_length=255)

    is_active: bool = Field(default=True)

    created_at: datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime, nullable=False)
    )

    memberships: list["Membership"] = Relationship(back_populates="user")
