"""
Xenia Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class MembershipRole(str, Enum):
    """User role within an organization"""

    owner = "owner"
    admin = "admin"
    member = "member"


class ReservationStatus(str, Enum):
    """Reservation lifecycle status"""

    pending = "pending"
    confirmed = "confirmed"
    checked_in = "checked_in"
    checked_out = "checked_out"
    cancelled = "cancelled"
