from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from xenia.domain.entities import PropertyOwner


class IPropertyOwnerRepository(ABC):
    """Property owner repository interface - application layer"""

    @abstractmethod
    async def get_in_org(self, org_id: UUID, owner_id: UUID) -> Optional[PropertyOwner]:
        """Get owner by ID, only if it belongs to the organization"""
        pass
