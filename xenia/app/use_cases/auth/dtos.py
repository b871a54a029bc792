"""
Authentication Use Case DTOs (Data Transfer Objects)

Command and Response classes for the auth domain. Responses are CamelModels
so they serialize with the camelCase wire names.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from xenia.app.services.session_manager import ClientMetadata
from xenia.domain.base import CamelModel
from xenia.domain.entities import MembershipRole


# ============================================================================
# Commands
# ============================================================================


class AcceptInviteCommand(BaseModel):
    token: str
    password: str
    name: Optional[str] = None
    client: ClientMetadata = ClientMetadata()


class LoginCommand(BaseModel):
    email: str
    password: str
    org_id: Optional[UUID] = None
    client: ClientMetadata = ClientMetadata()


# ============================================================================
# Response DTOs
# ============================================================================


class IssuedSession(BaseModel):
    """Session handed back to the API layer to be set as a cookie"""

    session_id: UUID
    expires_at: datetime


class UserInfo(CamelModel):
    id: UUID
    email: str


class OrganizationInfo(CamelModel):
    """Organization the session is bound to"""

    id: UUID
    name: str
    role: MembershipRole


class AcceptInviteResponse(CamelModel):
    user_id: UUID
    org_id: UUID


class AcceptInviteResult(BaseModel):
    response: AcceptInviteResponse
    session: IssuedSession


class LoginResponse(CamelModel):
    user: UserInfo
    org: OrganizationInfo


class LoginResult(BaseModel):
    response: LoginResponse
    session: IssuedSession


class UserProfile(CamelModel):
    id: UUID
    email: str
    name: Optional[str] = None


class SessionInfo(CamelModel):
    id: UUID
    org_id: UUID
    expires_at: datetime


class OrganizationMembershipInfo(CamelModel):
    org_id: UUID
    org_name: str
    role: MembershipRole


class MeResponse(CamelModel):
    user: UserProfile
    session: SessionInfo
    orgs: List[OrganizationMembershipInfo]
