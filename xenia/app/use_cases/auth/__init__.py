"""
Authentication Use Cases

Invite acceptance, login, logout and current-user context.
"""

from .accept_invite_use_case import AcceptInviteUseCase
from .dtos import (
    AcceptInviteCommand,
    AcceptInviteResponse,
    AcceptInviteResult,
    IssuedSession,
    LoginCommand,
    LoginResponse,
    LoginResult,
    MeResponse,
    OrganizationInfo,
    UserInfo,
)
from .load_me_use_case import LoadMeUseCase
from .login_use_case import LoginUseCase
from .logout_use_case import LogoutUseCase

__all__ = [
    # Use Cases
    "AcceptInviteUseCase",
    "LoginUseCase",
    "LogoutUseCase",
    "LoadMeUseCase",
    # DTOs - Commands
    "AcceptInviteCommand",
    "LoginCommand",
    # DTOs - Responses
    "AcceptInviteResponse",
    "AcceptInviteResult",
    "IssuedSession",
    "LoginResponse",
    "LoginResult",
    "MeResponse",
    "OrganizationInfo",
    "UserInfo",
]
