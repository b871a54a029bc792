from uuid import UUID

from xenia.app.services.unit_of_work import UnitOfWork
from xenia.libs.result import Result, Return

from .dtos import PropertyResponse, PropertyUpdate
from .errors import OWNER_NOT_FOUND, PROPERTY_NOT_FOUND


class UpdatePropertyUseCase:
    """Applies a partial update to a property of the organization"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, org_id: UUID, property_id: UUID, data: PropertyUpdate
    ) -> Result[PropertyResponse]:
        async with self.uow:
            property_obj = await self.uow.properties.get_in_org(org_id, property_id)
            if property_obj is None:
                return Return.err(PROPERTY_NOT_FOUND)

            changes = data.model_dump(exclude_unset=True)

            # ownerId: null detaches the owner and needs no lookup
            owner_id = changes.get("owner_id")
            if owner_id is not None:
                owner = await self.uow.property_owners.get_in_org(org_id, owner_id)
                if owner is None:
                    return Return.err(OWNER_NOT_FOUND)

            if changes:
                for field, value in changes.items():
                    setattr(property_obj, field, value)
                property_obj = await self.uow.properties.update(property_obj)
                await self.uow.commit()

            return Return.ok(PropertyResponse.model_validate(property_obj))
