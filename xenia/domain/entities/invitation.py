"""
Invitation Entity

Single-use token to join an organization with a given role.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import MembershipRole


class Invitation(SQLModel, table=True):
    """
    Invitation entity - grants an email the right to join an organization.

    Business Rules:
    - Created by admin/owner, expires after 7 days
    - Consumable at most once: used_at is set on acceptance
    - Acceptance only while unused and unexpired
    """

    __tablename__ = "invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    org_id: UUID = Field(foreign_key="organizations.id", nullable=False, index=True)
    email: str = Field(max_length=255, nullable=False, index=True)

    role: MembershipRole = Field(nullable=False)
    token: str = Field(unique=True, index=True, max_length=128)

    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    used_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_invitation_org_email", "org_id", "email"),)

    def is_usable(self, now: datetime) -> bool:
        return self.used_at is None and self.expires_at > now
