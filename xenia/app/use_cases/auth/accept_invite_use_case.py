"""
Accept Invite Use Case

Consumes an invitation and opens a session for the invited user.
"""

import logging

from xenia.app.services.password_hasher import hash_password
from xenia.app.services.session_manager import create_session
from xenia.app.services.unit_of_work import UnitOfWork
from xenia.domain.base import utc_now
from xenia.domain.entities import Membership, User
from xenia.libs.result import Error, Result, Return

from .dtos import (
    AcceptInviteCommand,
    AcceptInviteResponse,
    AcceptInviteResult,
    IssuedSession,
)

logger = logging.getLogger(__name__)

INVALID_INVITE = Error("INVALID_INVITE", "Invalid or expired invite")


class AcceptInviteUseCase:
    """
    Use case for accepting an organization invitation.

    Business Rules:
    - Invitation must exist, be unused and unexpired
    - User is upserted by the invitation email: created, or password reset
      and reactivated if it already exists
    - Membership is only created when (user, org) has none
    - Invitation is claimed with a conditional update before any user or
      membership write, so only one of two concurrent acceptances succeeds
    - A session bound to the invitation's organization is returned
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: AcceptInviteCommand) -> Result[AcceptInviteResult]:
        async with self.uow:
            now = utc_now()
            invitation = await self.uow.invitations.get_by_token(command.token)

            if invitation is None or not invitation.is_usable(now):
                return Return.err(INVALID_INVITE)

            if not await self.uow.invitations.mark_used(invitation.id, now):
                logger.info("Invitation %s was consumed concurrently", invitation.id)
                return Return.err(INVALID_INVITE)

            password_hash = hash_password(command.password)

            user = await self.uow.users.get_by_email(invitation.email)
            if user is None:
                user = await self.uow.users.create(
                    User(
                        email=invitation.email,
                        password_hash=password_hash,
                        name=command.name,
                        is_active=True,
                    )
                )
            else:
                user.password_hash = password_hash
                user.is_active = True
                if command.name:
                    user.name = command.name
                user = await self.uow.users.update(user)

            existing = await self.uow.memberships.get_by_user_and_org(
                user.id, invitation.org_id
            )
            if existing is None:
                await self.uow.memberships.create(
                    Membership(
                        user_id=user.id,
                        org_id=invitation.org_id,
                        role=invitation.role,
                    )
                )
            else:
                logger.info(
                    "User %s already member of %s, keeping role %s",
                    user.id,
                    invitation.org_id,
                    existing.role.value,
                )

            session = await create_session(
                self.uow, user.id, invitation.org_id, command.client
            )

            await self.uow.commit()

            return Return.ok(
                AcceptInviteResult(
                    response=AcceptInviteResponse(
                        user_id=user.id, org_id=invitation.org_id
                    ),
                    session=IssuedSession(
                        session_id=session.id, expires_at=session.expires_at
                    ),
                )
            )
