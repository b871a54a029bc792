"""
Reservation Use Cases

Tenant-scoped reservation CRUD, property calendar and owner summary.
"""

from .create_reservation_use_case import CreateReservationUseCase
from .delete_reservation_use_case import DeleteReservationUseCase
from .dtos import (
    CalendarEntry,
    OwnerSummaryRow,
    ReservationCreate,
    ReservationResponse,
    ReservationUpdate,
)
from .get_calendar_use_case import GetCalendarUseCase
from .get_owner_summary_use_case import GetOwnerSummaryUseCase
from .get_reservation_use_case import GetReservationUseCase
from .list_reservations_use_case import ListReservationsUseCase
from .update_reservation_use_case import UpdateReservationUseCase

__all__ = [
    "ListReservationsUseCase",
    "CreateReservationUseCase",
    "GetReservationUseCase",
    "UpdateReservationUseCase",
    "DeleteReservationUseCase",
    "GetCalendarUseCase",
    "GetOwnerSummaryUseCase",
    "ReservationCreate",
    "ReservationUpdate",
    "ReservationResponse",
    "CalendarEntry",
    "OwnerSummaryRow",
]
