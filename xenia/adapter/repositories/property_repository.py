from typing import List, Optional
from uuid import UUID

from sqlmodel import select

from xenia.adapter.repositories.base import SqlModelRepository
from xenia.app.repositories.property_repository import IPropertyRepository
from xenia.domain.entities import Property


class PropertyRepository(SqlModelRepository[Property], IPropertyRepository):
    """Property repository implementation using SQLModel"""

    async def list_by_org(self, org_id: UUID) -> List[Property]:
        stmt = (
            select(Property)
            .where(Property.org_id == org_id)
            .order_by(Property.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_in_org(self, org_id: UUID, property_id: UUID) -> Optional[Property]:
        stmt = select(Property).where(
            Property.org_id == org_id, Property.id == property_id
        )
        return await self._one_or_none(stmt)

    async def get_by_org_and_name(self, org_id: UUID, name: str) -> Optional[Property]:
        stmt = (
            select(Property)
            .where(Property.org_id == org_id, Property.name == name)
            .limit(1)
        )
        return await self._first(stmt)

    async def create(self, property_obj: Property) -> Property:
        return await self._save(property_obj)

    async def update(self, property_obj: Property) -> Property:
        return await self._save(property_obj)
