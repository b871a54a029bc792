"""
PropertyOwner Entity

Landlord contact whose properties an organization manages.
"""

from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel


class PropertyOwner(SQLModel, table=True):
    __tablename__ = "property_owners"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    org_id: UUID = Field(foreign_key="organizations.id", nullable=False, index=True)

    name: str = Field(max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=64)
