from typing import Optional

from sqlmodel import select

from xenia.adapter.repositories.base import SqlModelRepository
from xenia.app.repositories.organization_repository import IOrganizationRepository
from xenia.domain.entities import Organization


class OrganizationRepository(SqlModelRepository[Organization], IOrganizationRepository):
    """Organization repository implementation using SQLModel"""

    async def get_by_name(self, name: str) -> Optional[Organization]:
        stmt = select(Organization).where(Organization.name == name).limit(1)
        return await self._first(stmt)

    async def create(self, organization: Organization) -> Organization:
        return await self._save(organization)
