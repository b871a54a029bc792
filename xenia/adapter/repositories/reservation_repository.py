from typing import List, Optional, Tuple
from uuid import UUID

from sqlmodel import select

from xenia.adapter.repositories.base import SqlModelRepository
from xenia.app.repositories.reservation_repository import (
    IReservationRepository,
    ReservationFilter,
)
from xenia.domain.entities import Property, Reservation


def _apply_filters(stmt, org_id: UUID, filters: ReservationFilter):
    stmt = stmt.where(Reservation.org_id == org_id)
    if filters.property_id is not None:
        stmt = stmt.where(Reservation.property_id == filters.property_id)
    if filters.date_from is not None:
        stmt = stmt.where(Reservation.checkin_date >= filters.date_from)
    if filters.date_to is not None:
        stmt = stmt.where(Reservation.checkout_date <= filters.date_to)
    if filters.status is not None:
        stmt = stmt.where(Reservation.status == filters.status)
    return stmt.order_by(Reservation.checkin_date)


class ReservationRepository(SqlModelRepository[Reservation], IReservationRepository):
    """Reservation repository implementation using SQLModel"""

    async def list_by_org(
        self, org_id: UUID, filters: ReservationFilter
    ) -> List[Reservation]:
        stmt = _apply_filters(select(Reservation), org_id, filters)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_with_property(
        self, org_id: UUID, filters: ReservationFilter
    ) -> List[Tuple[Reservation, Property]]:
        stmt = select(Reservation, Property).join(
            Property, Property.id == Reservation.property_id
        )
        result = await self.session.exec(_apply_filters(stmt, org_id, filters))
        return [(reservation, property_obj) for reservation, property_obj in result.all()]

    async def get_in_org(
        self, org_id: UUID, reservation_id: UUID
    ) -> Optional[Reservation]:
        stmt = select(Reservation).where(
            Reservation.org_id == org_id, Reservation.id == reservation_id
        )
        return await self._one_or_none(stmt)

    async def create(self, reservation: Reservation) -> Reservation:
        return await self._save(reservation)

    async def update(self, reservation: Reservation) -> Reservation:
        return await self._save(reservation)

    async def delete(self, reservation: Reservation) -> None:
        await self.session.delete(reservation)
        await self.session.flush()
