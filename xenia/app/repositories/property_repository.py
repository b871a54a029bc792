from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from xenia.domain.entities import Property


class IPropertyRepository(ABC):
    """Property repository interface - application layer"""

    @abstractmethod
    async def list_by_org(self, org_id: UUID) -> List[Property]:
        """All properties of an organization, active or not"""
        pass

    @abstractmethod
    async def get_in_org(self, org_id: UUID, property_id: UUID) -> Optional[Property]:
        """Get property by ID, only if it belongs to the organization"""
        pass

    @abstractmethod
    async def get_by_org_and_name(self, org_id: UUID, name: str) -> Optional[Property]:
        """Get property by name within an organization"""
        pass

    @abstractmethod
    async def create(self, property_obj: Property) -> Property:
        """Create a new property"""
        pass

    @abstractmethod
    async def update(self, property_obj: Property) -> Property:
        """Update existing property"""
        pass
