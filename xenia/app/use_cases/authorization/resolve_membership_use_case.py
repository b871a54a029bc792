"""
Resolve Membership Use Case

Second gate: Authenticated + path organization -> Authorized.
"""

from typing import Optional
from uuid import UUID

from xenia.app.services.unit_of_work import UnitOfWork
from xenia.domain.auth_context import Authenticated, Authorized
from xenia.libs.result import Error, Result, Return

MISSING_ORG = Error("MISSING_ORG", "Missing orgId")
WRONG_ORGANIZATION = Error("WRONG_ORGANIZATION", "Wrong organization context")
NO_MEMBERSHIP = Error("NO_MEMBERSHIP", "No membership")


class ResolveMembershipUseCase:
    """
    Use case for resolving the caller's roles in the requested organization.

    Business Rules:
    - A session is valid for exactly the organization it was created for
    - Membership is re-read on every request, never cached in the session
    - Roles are collected as stored; more than one role means the
      (user, org) uniqueness was bypassed and is tolerated here
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, context: Optional[Authenticated], org_id: Optional[str]
    ) -> Result[Authorized]:
        if context is None or not org_id:
            return Return.err(MISSING_ORG)

        try:
            requested_org_id = UUID(str(org_id))
        except ValueError:
            return Return.err(WRONG_ORGANIZATION)

        if requested_org_id != context.org_id:
            return Return.err(WRONG_ORGANIZATION)

        async with self.uow:
            roles = await self.uow.memberships.get_roles(
                context.user_id, requested_org_id
            )

        if not roles:
            return Return.err(NO_MEMBERSHIP)

        return Return.ok(
            Authorized(
                session_id=context.session_id,
                user_id=context.user_id,
                org_id=context.org_id,
                roles=list(roles),
            )
        )
