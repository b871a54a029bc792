from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from xenia.domain.entities import Invitation


class IInvitationRepository(ABC):
    """Invitation repository interface - application layer"""

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[Invitation]:
        """Get invitation by token"""
        pass

    @abstractmethod
    async def get_pending_by_org_and_email(
        self, org_id: UUID, email: str, now: datetime
    ) -> Optional[Invitation]:
        """Get an unused, unexpired invitation by organization and email"""
        pass

    @abstractmethod
    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        pass

    @abstractmethod
    async def mark_used(self, invitation_id: UUID, now: datetime) -> bool:
        """
        Stamp used_at only if the invitation is still unused and unexpired.

        Returns False when another transaction consumed it first.
        """
        pass
