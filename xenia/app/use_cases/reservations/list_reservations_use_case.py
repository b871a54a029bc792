from typing import List
from uuid import UUID

from xenia.app.repositories.reservation_repository import ReservationFilter
from xenia.app.services.unit_of_work import UnitOfWork
from xenia.libs.result import Result, Return

from .dtos import ReservationResponse


class ListReservationsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, org_id: UUID, filters: ReservationFilter
    ) -> Result[List[ReservationResponse]]:
        async with self.uow:
            reservations = await self.uow.reservations.list_by_org(org_id, filters)
            return Return.ok(
                [ReservationResponse.model_validate(r) for r in reservations]
            )
