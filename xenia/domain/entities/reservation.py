"""
Reservation Entity

A booking of a property for a date range.
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import BigInteger
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from xenia.domain.base import utc_now

from .enums import ReservationStatus


class Reservation(SQLModel, table=True):
    """
    Reservation entity - a stay at a property.

    Business Rules:
    - Belongs to the same organization as its property
    - Amounts are stored in minor units (cents)
    - Hard-deleted, owners only
    """

    __tablename__ = "reservations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    org_id: UUID = Field(foreign_key="organizations.id", nullable=False, index=True)
    property_id: UUID = Field(foreign_key="properties.id", nullable=False, index=True)

    guest_name: Optional[str] = Field(default=None, max_length=255)
    checkin_date: date
    checkout_date: date

    total_amount_cents: int = Field(
        default=0, sa_column=Column(BigInteger, nullable=False, default=0)
    )
    currency: str = Field(default="USD", max_length=3)
    status: ReservationStatus = Field(default=ReservationStatus.pending)
    channel: Optional[str] = Field(default=None, max_length=64)

    created_by: Optional[UUID] = Field(default=None, foreign_key="users.id")
    created_at: datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime, nullable=False)
    )

    __table_args__ = (
        Index("idx_reservation_org_checkin", "org_id", "checkin_date"),
    )
