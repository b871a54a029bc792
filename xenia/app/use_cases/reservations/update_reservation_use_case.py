from uuid import UUID

from xenia.app.services.unit_of_work import UnitOfWork
from xenia.libs.result import Result, Return

from .dtos import ReservationResponse, ReservationUpdate
from .errors import INVALID_DATES, PROPERTY_NOT_FOUND, RESERVATION_NOT_FOUND


class UpdateReservationUseCase:
    """
    Applies a partial update to a reservation of the organization.

    Business Rules:
    - A new property_id must also belong to the organization
    - The merged dates must still have checkout after checkin
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, org_id: UUID, reservation_id: UUID, data: ReservationUpdate
    ) -> Result[ReservationResponse]:
        async with self.uow:
            reservation = await self.uow.reservations.get_in_org(org_id, reservation_id)
            if reservation is None:
                return Return.err(RESERVATION_NOT_FOUND)

            changes = data.model_dump(exclude_unset=True)
            if not changes:
                return Return.ok(ReservationResponse.model_validate(reservation))

            new_property_id = changes.get("property_id")
            if new_property_id is not None and new_property_id != reservation.property_id:
                property_obj = await self.uow.properties.get_in_org(org_id, new_property_id)
                if property_obj is None:
                    return Return.err(PROPERTY_NOT_FOUND)

            checkin = changes.get("checkin_date", reservation.checkin_date)
            checkout = changes.get("checkout_date", reservation.checkout_date)
            if checkout <= checkin:
                return Return.err(INVALID_DATES)

            for field, value in changes.items():
                setattr(reservation, field, value)
            reservation = await self.uow.reservations.update(reservation)
            await self.uow.commit()

            return Return.ok(ReservationResponse.model_validate(reservation))
