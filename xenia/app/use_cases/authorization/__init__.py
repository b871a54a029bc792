"""
Authorization Pipeline

Session resolution -> membership resolution -> role check, in that order.
"""

from .resolve_membership_use_case import (
    MISSING_ORG,
    NO_MEMBERSHIP,
    WRONG_ORGANIZATION,
    ResolveMembershipUseCase,
)
from .resolve_session_use_case import NO_SESSION, SESSION_EXPIRED, ResolveSessionUseCase
from .role_check import INSUFFICIENT_ROLE, check_role

__all__ = [
    "ResolveSessionUseCase",
    "ResolveMembershipUseCase",
    "check_role",
    "NO_SESSION",
    "SESSION_EXPIRED",
    "MISSING_ORG",
    "WRONG_ORGANIZATION",
    "NO_MEMBERSHIP",
    "INSUFFICIENT_ROLE",
]
