from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from xenia.api.envelope import ApiResponse
from xenia.api.error import ClientError, ServerError
from xenia.api.utils.authorization import require_role
from xenia.app.services.unit_of_work import UnitOfWork
from xenia.app.use_cases.properties import (
    CreatePropertyUseCase,
    DeactivatePropertyUseCase,
    GetPropertyUseCase,
    ListPropertiesUseCase,
    PropertyCreate,
    PropertyResponse,
    PropertyUpdate,
    UpdatePropertyUseCase,
)
from xenia.depends import get_unit_of_work
from xenia.domain.auth_context import Authorized
from xenia.domain.entities import MembershipRole
from xenia.libs.result import Result

router = APIRouter(prefix="/orgs/{org_id}/properties", tags=["Properties"])

require_member = require_role(MembershipRole.member)
require_admin = require_role(MembershipRole.admin)


def unwrap(result: Result):
    if result.is_err():
        error = result.error
        if error.code in ("NOT_FOUND", "OWNER_NOT_FOUND"):
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)
    return result.value


@router.get("", response_model=ApiResponse[List[PropertyResponse]])
async def list_properties(
    org_id: UUID,
    auth: Authorized = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListPropertiesUseCase(uow).execute(org_id)
    return ApiResponse(data=unwrap(result))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[PropertyResponse],
)
async def create_property(
    org_id: UUID,
    payload: PropertyCreate,
    auth: Authorized = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CreatePropertyUseCase(uow).execute(org_id, payload)
    return ApiResponse(data=unwrap(result))


@router.get("/{property_id}", response_model=ApiResponse[PropertyResponse])
async def get_property(
    org_id: UUID,
    property_id: UUID,
    auth: Authorized = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetPropertyUseCase(uow).execute(org_id, property_id)
    return ApiResponse(data=unwrap(result))


@router.put("/{property_id}", response_model=ApiResponse[PropertyResponse])
async def update_property(
    org_id: UUID,
    property_id: UUID,
    payload: PropertyUpdate,
    auth: Authorized = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdatePropertyUseCase(uow).execute(org_id, property_id, payload)
    return ApiResponse(data=unwrap(result))


@router.delete(
    "/{property_id}",
    response_model=ApiResponse[None],
    response_model_exclude_none=True,
)
async def delete_property(
    org_id: UUID,
    property_id: UUID,
    auth: Authorized = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Soft delete: the property is kept with isActive=false"""
    unwrap(await DeactivatePropertyUseCase(uow).execute(org_id, property_id))
    return ApiResponse()
