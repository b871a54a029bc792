from abc import ABC, abstractmethod
from typing import Optional

from xenia.domain.entities import Organization


class IOrganizationRepository(ABC):
    """Organization repository interface - application layer"""

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Organization]:
        """Get organization by name"""
        pass

    @abstractmethod
    async def create(self, organization: Organization) -> Organization:
        """Create a new organization"""
        pass
