from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from xenia.domain.base import CamelModel
from xenia.domain.entities import MembershipRole


class InviteMemberCommand(BaseModel):
    org_id: UUID
    inviter_user_id: UUID
    email: str
    role: MembershipRole


class InvitationResponse(CamelModel):
    """Created invitation; the token is only ever shown to the inviter"""

    id: UUID
    org_id: UUID
    email: str
    role: MembershipRole
    token: str
    expires_at: datetime
