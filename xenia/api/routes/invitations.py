from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import EmailStr, Field

from xenia.api.envelope import ApiResponse
from xenia.api.error import ClientError, ServerError
from xenia.api.utils.authorization import require_role
from xenia.app.services.unit_of_work import UnitOfWork
from xenia.app.use_cases.invitations import (
    InvitationResponse,
    InviteMemberCommand,
    InviteMemberUseCase,
)
from xenia.depends import get_unit_of_work
from xenia.domain.auth_context import Authorized
from xenia.domain.base import CamelModel
from xenia.domain.entities import MembershipRole

router = APIRouter(tags=["Invitations"])


class InviteMemberRequest(CamelModel):
    email: EmailStr = Field(..., description="Email of the person to invite")
    role: MembershipRole = Field(MembershipRole.member, description="Role granted on acceptance")


@router.post(
    "/orgs/{org_id}/invitations",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[InvitationResponse],
)
async def invite_member(
    org_id: UUID,
    payload: InviteMemberRequest,
    auth: Authorized = Depends(require_role(MembershipRole.admin)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Invite a member

    The returned token is what the invitee posts to /auth/accept-invite.

    Raises:
        - 409 Conflict: Email already a member, or an invitation is pending
    """
    command = InviteMemberCommand(
        org_id=org_id,
        inviter_user_id=auth.user_id,
        email=payload.email,
        role=payload.role,
    )
    result = await InviteMemberUseCase(uow).execute(command)

    if result.is_err():
        error = result.error
        if error.code in ("ALREADY_MEMBER", "INVITE_ALREADY_PENDING"):
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return ApiResponse(data=result.value)
