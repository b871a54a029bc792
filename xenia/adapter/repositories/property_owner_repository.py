from typing import Optional
from uuid import UUID

from sqlmodel import select

from xenia.adapter.repositories.base import SqlModelRepository
from xenia.app.repositories.property_owner_repository import IPropertyOwnerRepository
from xenia.domain.entities import PropertyOwner


class PropertyOwnerRepository(SqlModelRepository[PropertyOwner], IPropertyOwnerRepository):
    """Property owner repository implementation using SQLModel"""

    async def get_in_org(self, org_id: UUID, owner_id: UUID) -> Optional[PropertyOwner]:
        stmt = select(PropertyOwner).where(
            PropertyOwner.org_id == org_id, PropertyOwner.id == owner_id
        )
        return await self._one_or_none(stmt)
