"""
Logout Use Case

Destroys the session named by the cookie, if any.
"""

from typing import Optional
from uuid import UUID

from xenia.app.services.session_manager import destroy_session
from xenia.app.services.unit_of_work import UnitOfWork
from xenia.libs.result import Result, Return


class LogoutUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, session_token: Optional[str]) -> Result[bool]:
        """Returns whether a session row was removed. Never fails."""
        if not session_token:
            return Return.ok(False)

        try:
            session_id = UUID(session_token)
        except ValueError:
            return Return.ok(False)

        async with self.uow:
            removed = await destroy_session(self.uow, session_id)
            await self.uow.commit()

        return Return.ok(removed)
