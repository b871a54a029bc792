from uuid import UUID

from xenia.app.services.unit_of_work import UnitOfWork
from xenia.libs.result import Result, Return

from .dtos import PropertyResponse
from .errors import PROPERTY_NOT_FOUND


class GetPropertyUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, org_id: UUID, property_id: UUID) -> Result[PropertyResponse]:
        async with self.uow:
            property_obj = await self.uow.properties.get_in_org(org_id, property_id)
            if property_obj is None:
                return Return.err(PROPERTY_NOT_FOUND)
            return Return.ok(PropertyResponse.model_validate(property_obj))
