from typing import List, Optional, Tuple
from uuid import UUID

from sqlmodel import select

from xenia.adapter.repositories.base import SqlModelRepository
from xenia.app.repositories.membership_repository import IMembershipRepository
from xenia.domain.entities import Membership, MembershipRole, Organization


class MembershipRepository(SqlModelRepository[Membership], IMembershipRepository):
    """Membership repository implementation using SQLModel"""

    async def get_by_user_and_org(
        self, user_id: UUID, org_id: UUID
    ) -> Optional[Membership]:
        """Get membership by user and organization"""
        stmt = select(Membership).where(
            Membership.user_id == user_id, Membership.org_id == org_id
        )
        return await self._first(stmt)

    async def get_roles(self, user_id: UUID, org_id: UUID) -> List[MembershipRole]:
        """Role values for (user, org); more than one means the key was bypassed"""
        stmt = select(Membership.role).where(
            Membership.user_id == user_id, Membership.org_id == org_id
        )
        result = await self.session.exec(stmt)
        return [MembershipRole(role) for role in result.all()]

    async def get_organizations_for_user(
        self, user_id: UUID
    ) -> List[Tuple[Membership, Organization]]:
        stmt = (
            select(Membership, Organization)
            .join(Organization, Organization.id == Membership.org_id)
            .where(Membership.user_id == user_id)
            .order_by(Membership.created_at, Organization.name)
        )
        result = await self.session.exec(stmt)
        return [(membership, organization) for membership, organization in result.all()]

    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        return await self._save(membership)
