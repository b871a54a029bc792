"""
Organization Entity

Tenant boundary: every membership, property and reservation belongs to one.
"""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Relationship, SQLModel

from xenia.domain.base import utc_now

if TYPE_CHECKING:
    from .membership import Membership


class Organization(SQLModel, table=True):
    """
    Organization entity - isolated workspace for a property manager.

    Business Rules:
    - Created by exactly one user (created_by)
    - Immutable once created
    """

    __tablename__ = "organizations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    created_by: UUID = Field(foreign_key="users.id", nullable=False)

    created_at: datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime, nullable=False)
    )

    memberships: list["Membership"] = Relationship(back_populates="organization")
