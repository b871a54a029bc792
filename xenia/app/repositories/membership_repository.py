from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from xenia.domain.entities import Membership, MembershipRole, Organization


class IMembershipRepository(ABC):
    """Membership repository interface - application layer"""

    @abstractmethod
    async def get_by_user_and_org(
        self, user_id: UUID, org_id: UUID
    ) -> Optional[Membership]:
        """Get membership by user and organization"""
        pass

    @abstractmethod
    async def get_roles(self, user_id: UUID, org_id: UUID) -> List[MembershipRole]:
        """All role values held by a user in one organization"""
        pass

    @abstractmethod
    async def get_organizations_for_user(
        self, user_id: UUID
    ) -> List[Tuple[Membership, Organization]]:
        """Memberships joined with their organizations, oldest membership first"""
        pass

    @abstractmethod
    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        pass
