"""
Authentication Context

The request's authorization state as an explicit sum type. Each gate of the
pipeline consumes one variant and returns the next, so holding an Authorized
value proves that session and membership checks already ran.
"""

from typing import List, Optional, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from .entities.enums import MembershipRole


class Unauthenticated(BaseModel):
    """Inbound request before any gate ran"""

    model_config = ConfigDict(frozen=True)

    session_token: Optional[str] = None


class Authenticated(BaseModel):
    """Valid, unexpired session; roles not resolved yet"""

    model_config = ConfigDict(frozen=True)

    session_id: UUID
    user_id: UUID
    org_id: UUID


class Authorized(Authenticated):
    """Session plus the caller's roles in the session's organization"""

    roles: List[MembershipRole]


AuthContext = Union[Unauthenticated, Authenticated, Authorized]
