from datetime import date
from typing import List, Optional
from uuid import UUID

from xenia.app.repositories.reservation_repository import ReservationFilter
from xenia.app.services.unit_of_work import UnitOfWork
from xenia.libs.result import Result, Return

from .dtos import CalendarEntry
from .errors import PROPERTY_NOT_FOUND


class GetCalendarUseCase:
    """Calendar events for one property, titled by guest name"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        org_id: UUID,
        property_id: UUID,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
    ) -> Result[List[CalendarEntry]]:
        async with self.uow:
            property_obj = await self.uow.properties.get_in_org(org_id, property_id)
            if property_obj is None:
                return Return.err(PROPERTY_NOT_FOUND)

            reservations = await self.uow.reservations.list_by_org(
                org_id,
                ReservationFilter(
                    property_id=property_id, date_from=date_from, date_to=date_to
                ),
            )

            return Return.ok(
                [
                    CalendarEntry(
                        id=r.id,
                        property_id=r.property_id,
                        title=r.guest_name,
                        start=r.checkin_date,
                        end=r.checkout_date,
                        status=r.status,
                        amount_cents=r.total_amount_cents,
                    )
                    for r in reservations
                ]
            )
