"""
Authorization Dependencies

The authorization pipeline as FastAPI dependencies. Each dependency pulls in
the previous gate, so declaring the last one runs all of them in order and
the first failure ends the request.

    require_session               -> Authenticated
    require_org   (session)       -> Authorized
    require_role(min) (org)       -> Authorized
"""

from typing import Optional

from fastapi import Depends, Request, status

from xenia.api.error import ClientError
from xenia.api.utils.session_cookie import read_session_cookie
from xenia.app.services.unit_of_work import UnitOfWork
from xenia.app.use_cases.authorization import (
    MISSING_ORG,
    ResolveMembershipUseCase,
    ResolveSessionUseCase,
    check_role,
)
from xenia.depends import get_unit_of_work
from xenia.domain.auth_context import Authenticated, Authorized, Unauthenticated
from xenia.domain.entities import MembershipRole

ORG_PATH_PARAM = "org_id"


async def require_session(
    request: Request, uow: UnitOfWork = Depends(get_unit_of_work)
) -> Authenticated:
    """Gate 1: resolve the session cookie"""
    context = Unauthenticated(session_token=read_session_cookie(request))
    result = await ResolveSessionUseCase(uow).execute(context)
    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_401_UNAUTHORIZED)
    return result.value


async def require_org(
    request: Request,
    auth: Authenticated = Depends(require_session),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> Authorized:
    """Gate 2: session organization must match the path and hold a membership"""
    org_id = request.path_params.get(ORG_PATH_PARAM)
    result = await ResolveMembershipUseCase(uow).execute(auth, org_id)
    if result.is_err():
        error = result.error
        if error == MISSING_ORG:
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
    return result.value


def require_role(minimum: Optional[MembershipRole]):
    """Gate 3: dependency factory bound to the route's static minimum role"""

    async def dependency(auth: Authorized = Depends(require_org)) -> Authorized:
        result = check_role(auth, minimum)
        if result.is_err():
            raise ClientError(result.error, status_code=status.HTTP_403_FORBIDDEN)
        return result.value

    return dependency
