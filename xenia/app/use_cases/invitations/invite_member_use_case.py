"""
Invite Member Use Case

Issues a single-use invitation to join an organization.
"""

import logging
import secrets
from datetime import timedelta

from config import ApplicationConfig
from xenia.app.services.unit_of_work import UnitOfWork
from xenia.domain.base import utc_now
from xenia.domain.entities import Invitation
from xenia.libs.result import Error, Result, Return

from .dtos import InvitationResponse, InviteMemberCommand

logger = logging.getLogger(__name__)


class InviteMemberUseCase:
    """
    Use case for inviting someone into an organization.

    Business Rules:
    - Caller's minimum role (admin) is enforced by the authorization pipeline
    - Cannot invite an existing member
    - At most one pending (unused, unexpired) invitation per email and org
    - Token is 48 hex characters, invitation expires after INVITATION_TTL_DAYS
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: InviteMemberCommand) -> Result[InvitationResponse]:
        email = command.email

        async with self.uow:
            now = utc_now()

            existing_user = await self.uow.users.get_by_email(email)
            if existing_user is not None:
                membership = await self.uow.memberships.get_by_user_and_org(
                    existing_user.id, command.org_id
                )
                if membership is not None:
                    return Return.err(Error("ALREADY_MEMBER", "Already a member"))

            pending = await self.uow.invitations.get_pending_by_org_and_email(
                command.org_id, email, now
            )
            if pending is not None:
                return Return.err(
                    Error("INVITE_ALREADY_PENDING", "Invitation already pending")
                )

            invitation = Invitation(
                org_id=command.org_id,
                email=email,
                role=command.role,
                token=secrets.token_hex(24),
                expires_at=now + timedelta(days=ApplicationConfig.INVITATION_TTL_DAYS),
            )
            invitation = await self.uow.invitations.create(invitation)

            await self.uow.commit()

            logger.info(
                "Invitation %s issued by %s for org %s",
                invitation.id,
                command.inviter_user_id,
                command.org_id,
            )

            return Return.ok(InvitationResponse.model_validate(invitation))
