"""
Session Cookie

Attributes of the cookie that carries the session id.
"""

from datetime import UTC, datetime
from typing import Optional
from uuid import UUID

from fastapi import Request, Response

from config import ApplicationConfig


def session_cookie_options() -> dict:
    return {
        "httponly": True,
        "samesite": "lax",
        "secure": ApplicationConfig.is_production(),
        "path": "/",
    }


def read_session_cookie(request: Request) -> Optional[str]:
    return request.cookies.get(ApplicationConfig.COOKIE_NAME)


def set_session_cookie(response: Response, session_id: UUID, expires_at: datetime) -> None:
    """Cookie expiry matches the session row's expires_at (stored as naive UTC)."""
    if expires_at.tzinfo is None:
        expires_at = expires_at.replace(tzinfo=UTC)
    response.set_cookie(
        ApplicationConfig.COOKIE_NAME,
        str(session_id),
        expires=expires_at,
        **session_cookie_options(),
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(ApplicationConfig.COOKIE_NAME, **session_cookie_options())
