from typing import List
from uuid import UUID

from xenia.app.services.unit_of_work import UnitOfWork
from xenia.libs.result import Result, Return

from .dtos import PropertyResponse


class ListPropertiesUseCase:
    """Lists every property of the organization, inactive ones included"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, org_id: UUID) -> Result[List[PropertyResponse]]:
        async with self.uow:
            properties = await self.uow.properties.list_by_org(org_id)
            return Return.ok([PropertyResponse.model_validate(p) for p in properties])
