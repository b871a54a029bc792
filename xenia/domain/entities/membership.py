"""
Membership Entity

Links User to Organization with a role.
"""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from sqlmodel import Column, DateTime, Field, Relationship, SQLModel

from xenia.domain.base import utc_now

from .enums import MembershipRole

if TYPE_CHECKING:
    from .organization import Organization
    from .user import User


class Membership(SQLModel, table=True):
    """
    Membership entity - links User to Organization with a role.

    Business Rules:
    - One user can be member of multiple organizations
    - (user_id, org_id) is the primary key: at most one row per pair
    - Removing the row revokes access on the very next request
    """

    __tablename__ = "memberships"

    user_id: UUID = Field(foreign_key="users.id", primary_key=True)
    org_id: UUID = Field(foreign_key="organizations.id", primary_key=True)

    role: MembershipRole = Field(nullable=False)

    created_at: datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime, nullable=False)
    )

    user: "User" = Relationship(back_populates="memberships")
    organization: "Organization" = Relationship(back_populates="memberships")
