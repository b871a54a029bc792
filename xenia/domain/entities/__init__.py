"""
Xenia Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

from .enums import MembershipRole, ReservationStatus

from .user import User
from .organization import Organization
from .membership import Membership
from .session import Session
from .invitation import Invitation
from .property_owner import PropertyOwner
from .property import Property
from .reservation import Reservation

__all__ = [
    # Enums
    "MembershipRole",
    "ReservationStatus",
    # Entities
    "User",
    "Organization",
    "Membership",
    "Session",
    "Invitation",
    "PropertyOwner",
    "Property",
    "Reservation",
]
