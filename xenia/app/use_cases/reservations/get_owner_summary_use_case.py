from typing import List
from uuid import UUID

from xenia.app.repositories.reservation_repository import ReservationFilter
from xenia.app.services.unit_of_work import UnitOfWork
from xenia.libs.result import Result, Return

from .dtos import OwnerSummaryRow


class GetOwnerSummaryUseCase:
    """
    Flat reservation table for an owner statement.

    Business Rules:
    - Covers every reservation of the organization matching the filters;
      the owner in the path does not narrow the rows yet
    - nights = checkout - checkin in days
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, org_id: UUID, filters: ReservationFilter
    ) -> Result[List[OwnerSummaryRow]]:
        async with self.uow:
            rows = await self.uow.reservations.list_with_property(org_id, filters)

            return Return.ok(
                [
                    OwnerSummaryRow(
                        property_name=property_obj.name,
                        checkin_date=reservation.checkin_date,
                        checkout_date=reservation.checkout_date,
                        nights=(reservation.checkout_date - reservation.checkin_date).days,
                        total_amount_cents=reservation.total_amount_cents,
                        status=reservation.status,
                    )
                    for reservation, property_obj in rows
                ]
            )
