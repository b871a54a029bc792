from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import update
from sqlmodel import select

from xenia.adapter.repositories.base import SqlModelRepository
from xenia.app.repositories.invitation_repository import IInvitationRepository
from xenia.domain.entities import Invitation


class InvitationRepository(SqlModelRepository[Invitation], IInvitationRepository):
    """Invitation repository implementation using SQLModel"""

    async def get_by_token(self, token: str) -> Optional[Invitation]:
        """Get invitation by token"""
        return await self._one_or_none(select(Invitation).where(Invitation.token == token))

    async def get_pending_by_org_and_email(
        self, org_id: UUID, email: str, now: datetime
    ) -> Optional[Invitation]:
        """Get pending invitation by organization and email"""
        stmt = select(Invitation).where(
            Invitation.org_id == org_id,
            Invitation.email == email,
            Invitation.used_at.is_(None),
            Invitation.expires_at > now,
        )
        return await self._first(stmt)

    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        return await self._save(invitation)

    async def mark_used(self, invitation_id: UUID, now: datetime) -> bool:
        """Claim the invitation; a concurrent claimer waits on the write lock, then matches no row"""
        stmt = (
            update(Invitation)
            .where(
                Invitation.id == invitation_id,
                Invitation.used_at.is_(None),
                Invitation.expires_at > now,
            )
            .values(used_at=now)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
