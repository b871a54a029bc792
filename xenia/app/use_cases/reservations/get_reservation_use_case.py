from uuid import UUID

from xenia.app.services.unit_of_work import UnitOfWork
from xenia.libs.result import Result, Return

from .dtos import ReservationResponse
from .errors import RESERVATION_NOT_FOUND


class GetReservationUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, org_id: UUID, reservation_id: UUID
    ) -> Result[ReservationResponse]:
        async with self.uow:
            reservation = await self.uow.reservations.get_in_org(org_id, reservation_id)
            if reservation is None:
                return Return.err(RESERVATION_NOT_FOUND)
            return Return.ok(ReservationResponse.model_validate(reservation))
