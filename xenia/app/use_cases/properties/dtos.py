"""
Property Use Case DTOs

Request payloads double as commands: they are already validated by FastAPI.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator

from xenia.domain.base import CamelModel


class PropertyCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    owner_id: Optional[UUID] = None
    code: Optional[str] = Field(None, max_length=64)
    is_active: Optional[bool] = None


class PropertyUpdate(CamelModel):
    """Partial update; only fields present in the payload are applied"""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    owner_id: Optional[UUID] = None
    code: Optional[str] = Field(None, max_length=64)
    is_active: Optional[bool] = None

    @field_validator("name", "is_active")
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("must not be null")
        return value


class PropertyResponse(CamelModel):
    id: UUID
    org_id: UUID
    owner_id: Optional[UUID] = None
    name: str
    code: Optional[str] = None
    is_active: bool
    created_at: datetime
