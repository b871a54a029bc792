"""
Login Use Case

Verifies credentials and opens a session bound to one organization.
"""

from xenia.app.services.password_hasher import burn_verification, verify_password
from xenia.app.services.session_manager import create_session
from xenia.app.services.unit_of_work import UnitOfWork
from xenia.libs.result import Error, Result, Return

from .dtos import (
    IssuedSession,
    LoginCommand,
    LoginResponse,
    LoginResult,
    OrganizationInfo,
    UserInfo,
)

INVALID_CREDENTIALS = Error("INVALID_CREDENTIALS", "Invalid credentials")


class LoginUseCase:
    """
    Use case for user login.

    Business Rules:
    - Unknown user, inactive user and wrong password all yield the same error
    - A verification is always performed, even without a user
    - User must belong to at least one organization
    - Requested organization must be one of the user's; default is the first
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: LoginCommand) -> Result[LoginResult]:
        async with self.uow:
            user = await self.uow.users.get_by_email(command.email)

            if user is None:
                burn_verification(command.password)
                return Return.err(INVALID_CREDENTIALS)

            if not verify_password(command.password, user.password_hash):
                return Return.err(INVALID_CREDENTIALS)

            if not user.is_active:
                return Return.err(INVALID_CREDENTIALS)

            organizations = await self.uow.memberships.get_organizations_for_user(
                user.id
            )
            if not organizations:
                return Return.err(
                    Error("NO_ORGANIZATIONS", "No organizations assigned")
                )

            if command.org_id is not None:
                selected = next(
                    (
                        (membership, org)
                        for membership, org in organizations
                        if org.id == command.org_id
                    ),
                    None,
                )
                if selected is None:
                    return Return.err(
                        Error("ORGANIZATION_NOT_ALLOWED", "Organization not allowed")
                    )
            else:
                selected = organizations[0]

            membership, organization = selected

            session = await create_session(
                self.uow, user.id, organization.id, command.client
            )
            await self.uow.commit()

            return Return.ok(
                LoginResult(
                    response=LoginResponse(
                        user=UserInfo(id=user.id, email=user.email),
                        org=OrganizationInfo(
                            id=organization.id,
                            name=organization.name,
                            role=membership.role,
                        ),
                    ),
                    session=IssuedSession(
                        session_id=session.id, expires_at=session.expires_at
                    ),
                )
            )
