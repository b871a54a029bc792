from uuid import UUID

from xenia.app.services.unit_of_work import UnitOfWork
from xenia.domain.entities import Reservation
from xenia.libs.result import Result, Return

from .dtos import ReservationCreate, ReservationResponse
from .errors import PROPERTY_NOT_FOUND


class CreateReservationUseCase:
    """
    Use case for booking a property.

    Business Rules:
    - The property must belong to the caller's organization
    - created_by records the caller
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, org_id: UUID, created_by: UUID, data: ReservationCreate
    ) -> Result[ReservationResponse]:
        async with self.uow:
            property_obj = await self.uow.properties.get_in_org(org_id, data.property_id)
            if property_obj is None:
                return Return.err(PROPERTY_NOT_FOUND)

            reservation = Reservation(
                org_id=org_id,
                property_id=data.property_id,
                guest_name=data.guest_name,
                checkin_date=data.checkin_date,
                checkout_date=data.checkout_date,
                total_amount_cents=data.total_amount_cents,
                currency=data.currency,
                status=data.status,
                channel=data.channel,
                created_by=created_by,
            )
            reservation = await self.uow.reservations.create(reservation)
            await self.uow.commit()

            return Return.ok(ReservationResponse.model_validate(reservation))
