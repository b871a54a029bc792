from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope. Failures are rendered by the app's exception handlers."""

    ok: bool = True
    data: Optional[T] = None


def error_body(message: str) -> dict:
    return {"ok": False, "error": message}
