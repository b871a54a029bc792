"""
Reservation Use Case DTOs
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator, model_validator

from xenia.domain.base import CamelModel
from xenia.domain.entities import ReservationStatus


class ReservationCreate(CamelModel):
    property_id: UUID
    guest_name: Optional[str] = Field(None, max_length=255)
    checkin_date: date
    checkout_date: date
    total_amount_cents: int = Field(..., ge=0)
    currency: str = Field("USD", min_length=3, max_length=3)
    status: ReservationStatus = ReservationStatus.pending
    channel: Optional[str] = Field(None, max_length=64)

    @model_validator(mode="after")
    def check_dates(self):
        if self.checkout_date <= self.checkin_date:
            raise ValueError("checkoutDate must be after checkinDate")
        return self


class ReservationUpdate(CamelModel):
    """Partial update; only fields present in the payload are applied"""

    property_id: Optional[UUID] = None
    guest_name: Optional[str] = Field(None, max_length=255)
    checkin_date: Optional[date] = None
    checkout_date: Optional[date] = None
    total_amount_cents: Optional[int] = Field(None, ge=0)
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    status: Optional[ReservationStatus] = None
    channel: Optional[str] = Field(None, max_length=64)

    @field_validator(
        "property_id",
        "checkin_date",
        "checkout_date",
        "total_amount_cents",
        "currency",
        "status",
    )
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("must not be null")
        return value


class ReservationResponse(CamelModel):
    id: UUID
    org_id: UUID
    property_id: UUID
    guest_name: Optional[str] = None
    checkin_date: date
    checkout_date: date
    total_amount_cents: int
    currency: str
    status: ReservationStatus
    channel: Optional[str] = None
    created_by: Optional[UUID] = None
    created_at: datetime


class CalendarEntry(CamelModel):
    id: UUID
    property_id: UUID
    title: Optional[str] = None
    start: date
    end: date
    status: ReservationStatus
    amount_cents: int


class OwnerSummaryRow(CamelModel):
    property_name: str
    checkin_date: date
    checkout_date: date
    nights: int
    total_amount_cents: int
    status: ReservationStatus
