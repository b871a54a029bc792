"""
Resolve Session Use Case

First gate of the authorization pipeline: cookie token -> Authenticated.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from xenia.app.services.unit_of_work import UnitOfWork
from xenia.domain.auth_context import Authenticated, Unauthenticated
from xenia.domain.base import utc_now
from xenia.libs.result import Error, Result, Return

NO_SESSION = Error("NO_SESSION", "No session")
SESSION_EXPIRED = Error("SESSION_EXPIRED", "Session expired")


class ResolveSessionUseCase:
    """
    Use case for resolving a session token to the caller's identity.

    Business Rules:
    - Missing, malformed or unknown token -> NO_SESSION
    - expires_at at or before now -> SESSION_EXPIRED (row is not deleted)
    - Read only
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, context: Unauthenticated, now: Optional[datetime] = None
    ) -> Result[Authenticated]:
        if not context.session_token:
            return Return.err(NO_SESSION)

        try:
            session_id = UUID(context.session_token)
        except ValueError:
            return Return.err(NO_SESSION)

        async with self.uow:
            session = await self.uow.sessions.get_by_id(session_id)

            if session is None:
                return Return.err(NO_SESSION)

            # Evaluated now, never at creation time
            if session.expires_at <= (now or utc_now()):
                return Return.err(SESSION_EXPIRED)

            return Return.ok(
                Authenticated(
                    session_id=session.id,
                    user_id=session.user_id,
                    org_id=session.org_id,
                )
            )
