"""
Load Me Use Case

Loads the caller's profile, session and organizations.
"""

from xenia.app.services.unit_of_work import UnitOfWork
from xenia.domain.auth_context import Authenticated
from xenia.libs.result import Error, Result, Return

from .dtos import MeResponse, OrganizationMembershipInfo, SessionInfo, UserProfile


class LoadMeUseCase:
    """
    Use case for the current-user endpoint.

    Business Rules:
    - Runs behind session resolution only (no organization scoping)
    - Lists every organization the user belongs to, not only the session's
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, context: Authenticated) -> Result[MeResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(context.user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            session = await self.uow.sessions.get_by_id(context.session_id)
            if session is None:
                return Return.err(Error("NO_SESSION", "No session"))

            organizations = await self.uow.memberships.get_organizations_for_user(
                user.id
            )

            return Return.ok(
                MeResponse(
                    user=UserProfile(id=user.id, email=user.email, name=user.name),
                    session=SessionInfo(
                        id=session.id,
                        org_id=session.org_id,
                        expires_at=session.expires_at,
                    ),
                    orgs=[
                        OrganizationMembershipInfo(
                            org_id=org.id, org_name=org.name, role=membership.role
                        )
                        for membership, org in organizations
                    ],
                )
            )
