"""
Property Entity

A rental unit managed by an organization.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from xenia.domain.base import utc_now


class Property(SQLModel, table=True):
    """
    Property entity - a rental unit scoped to one organization.

    Business Rules:
    - Deleting a property only clears is_active (soft delete)
    - owner_id optionally references a PropertyOwner
    """

    __tablename__ = "properties"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    org_id: UUID = Field(foreign_key="organizations.id", nullable=False, index=True)
    owner_id: Optional[UUID] = Field(default=None, foreign_key="property_owners.id")

    name: str = Field(max_length=255)
    code: Optional[str] = Field(default=None, max_length=64)
    is_active: bool = Field(default=True)

    created_at: datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime, nullable=False)
    )
