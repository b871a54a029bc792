from uuid import UUID

from xenia.app.services.unit_of_work import UnitOfWork
from xenia.domain.entities import Property
from xenia.libs.result import Result, Return

from .dtos import PropertyCreate, PropertyResponse
from .errors import OWNER_NOT_FOUND


class CreatePropertyUseCase:
    """An ownerId, when given, must name an owner of the same organization"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, org_id: UUID, data: PropertyCreate) -> Result[PropertyResponse]:
        async with self.uow:
            if data.owner_id is not None:
                owner = await self.uow.property_owners.get_in_org(org_id, data.owner_id)
                if owner is None:
                    return Return.err(OWNER_NOT_FOUND)

            property_obj = Property(
                org_id=org_id,
                name=data.name,
                owner_id=data.owner_id,
                code=data.code,
                is_active=True if data.is_active is None else data.is_active,
            )
            property_obj = await self.uow.properties.create(property_obj)
            await self.uow.commit()

            return Return.ok(PropertyResponse.model_validate(property_obj))
