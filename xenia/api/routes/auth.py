from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import EmailStr, Field

from xenia.api.envelope import ApiResponse
from xenia.api.error import ClientError, ServerError
from xenia.api.utils.authorization import require_session
from xenia.api.utils.session_cookie import (
    clear_session_cookie,
    read_session_cookie,
    set_session_cookie,
)
from xenia.app.services.session_manager import ClientMetadata
from xenia.app.services.unit_of_work import UnitOfWork
from xenia.app.use_cases.auth import (
    AcceptInviteCommand,
    AcceptInviteResponse,
    AcceptInviteUseCase,
    LoadMeUseCase,
    LoginCommand,
    LoginResponse,
    LoginUseCase,
    LogoutUseCase,
    MeResponse,
)
from xenia.depends import get_unit_of_work
from xenia.domain.auth_context import Authenticated
from xenia.domain.base import CamelModel

router = APIRouter(prefix="/auth", tags=["Authentication"])


class AcceptInviteRequest(CamelModel):
    """
    Accept invite HTTP request payload

    The token is the opaque invitation secret handed out by an admin.
    """

    token: str = Field(..., min_length=16, description="Invitation token")
    password: str = Field(..., min_length=8, description="New password (min 8 chars)")
    name: Optional[str] = Field(None, min_length=1, max_length=255)


class LoginRequest(CamelModel):
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=8, description="User password")
    org_id: Optional[UUID] = Field(None, description="Organization to bind the session to")


def client_metadata(request: Request) -> ClientMetadata:
    ip = request.headers.get("X-Forwarded-For")
    if not ip and request.client is not None:
        ip = request.client.host
    return ClientMetadata(ip=ip, user_agent=request.headers.get("User-Agent"))


@router.post("/accept-invite", response_model=ApiResponse[AcceptInviteResponse])
async def accept_invite(
    payload: AcceptInviteRequest,
    request: Request,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Accept an invitation

    Creates or reactivates the invited user, joins them to the inviting
    organization and starts a session bound to it.

    Raises:
        - 400 Bad Request: Unknown, used or expired invitation
    """
    command = AcceptInviteCommand(
        token=payload.token,
        password=payload.password,
        name=payload.name,
        client=client_metadata(request),
    )
    result = await AcceptInviteUseCase(uow).execute(command)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_INVITE":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    accepted = result.value
    set_session_cookie(response, accepted.session.session_id, accepted.session.expires_at)
    return ApiResponse(data=accepted.response)


@router.post("/login", response_model=ApiResponse[LoginResponse])
async def login(
    payload: LoginRequest,
    request: Request,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    User Login

    Verifies credentials and binds a new session to one organization: the
    requested orgId, or the user's first organization.

    Raises:
        - 401 Unauthorized: Invalid credentials
        - 403 Forbidden: No organizations, or orgId not among them
    """
    command = LoginCommand(
        email=payload.email,
        password=payload.password,
        org_id=payload.org_id,
        client=client_metadata(request),
    )
    result = await LoginUseCase(uow).execute(command)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        if error.code in ("NO_ORGANIZATIONS", "ORGANIZATION_NOT_ALLOWED"):
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        raise ServerError(error)

    logged_in = result.value
    set_session_cookie(response, logged_in.session.session_id, logged_in.session.expires_at)
    return ApiResponse(data=logged_in.response)


@router.post(
    "/logout", response_model=ApiResponse[None], response_model_exclude_none=True
)
async def logout(
    request: Request, response: Response, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """Delete the current session if any; the cookie is always cleared"""
    await LogoutUseCase(uow).execute(read_session_cookie(request))
    clear_session_cookie(response)
    return ApiResponse()


@router.get("/me", response_model=ApiResponse[MeResponse])
async def me(
    auth: Authenticated = Depends(require_session),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await LoadMeUseCase(uow).execute(auth)

    if result.is_err():
        error = result.error
        if error.code in ("USER_NOT_FOUND", "NO_SESSION"):
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return ApiResponse(data=result.value)
