from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Tuple
from uuid import UUID

from xenia.domain.entities import Property, Reservation, ReservationStatus


@dataclass(frozen=True)
class ReservationFilter:
    """Optional listing filters; date_from bounds check-in, date_to bounds check-out"""

    property_id: Optional[UUID] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    status: Optional[ReservationStatus] = None


class IReservationRepository(ABC):
    """Reservation repository interface - application layer"""

    @abstractmethod
    async def list_by_org(
        self, org_id: UUID, filters: ReservationFilter
    ) -> List[Reservation]:
        """Reservations of an organization matching the filters"""
        pass

    @abstractmethod
    async def list_with_property(
        self, org_id: UUID, filters: ReservationFilter
    ) -> List[Tuple[Reservation, Property]]:
        """Reservations joined with their property"""
        pass

    @abstractmethod
    async def get_in_org(
        self, org_id: UUID, reservation_id: UUID
    ) -> Optional[Reservation]:
        """Get reservation by ID, only if it belongs to the organization"""
        pass

    @abstractmethod
    async def create(self, reservation: Reservation) -> Reservation:
        """Create a new reservation"""
        pass

    @abstractmethod
    async def update(self, reservation: Reservation) -> Reservation:
        """Update existing reservation"""
        pass

    @abstractmethod
    async def delete(self, reservation: Reservation) -> None:
        """Remove a reservation permanently"""
        pass
