from datetime import date
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from xenia.api.envelope import ApiResponse
from xenia.api.error import ClientError, ServerError
from xenia.api.utils.authorization import require_role
from xenia.app.repositories.reservation_repository import ReservationFilter
from xenia.app.services.unit_of_work import UnitOfWork
from xenia.app.use_cases.reservations import (
    CalendarEntry,
    CreateReservationUseCase,
    DeleteReservationUseCase,
    GetCalendarUseCase,
    GetOwnerSummaryUseCase,
    GetReservationUseCase,
    ListReservationsUseCase,
    OwnerSummaryRow,
    ReservationCreate,
    ReservationResponse,
    ReservationUpdate,
    UpdateReservationUseCase,
)
from xenia.depends import get_unit_of_work
from xenia.domain.auth_context import Authorized
from xenia.domain.entities import MembershipRole, ReservationStatus
from xenia.libs.result import Result

router = APIRouter(prefix="/orgs/{org_id}", tags=["Reservations"])

require_member = require_role(MembershipRole.member)
require_admin = require_role(MembershipRole.admin)
require_owner = require_role(MembershipRole.owner)


def unwrap(result: Result):
    if result.is_err():
        error = result.error
        if error.code in ("NOT_FOUND", "PROPERTY_NOT_FOUND"):
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        if error.code == "INVALID_DATES":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)
    return result.value


@router.get("/reservations", response_model=ApiResponse[List[ReservationResponse]])
async def list_reservations(
    org_id: UUID,
    property_id: Optional[UUID] = Query(None, alias="propertyId"),
    date_from: Optional[date] = Query(None, alias="from"),
    date_to: Optional[date] = Query(None, alias="to"),
    reservation_status: Optional[ReservationStatus] = Query(None, alias="status"),
    auth: Authorized = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List reservations

    from keeps reservations checking in on or after the date, to keeps those
    checking out on or before it.
    """
    filters = ReservationFilter(
        property_id=property_id,
        date_from=date_from,
        date_to=date_to,
        status=reservation_status,
    )
    result = await ListReservationsUseCase(uow).execute(org_id, filters)
    return ApiResponse(data=unwrap(result))


@router.post(
    "/reservations",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[ReservationResponse],
)
async def create_reservation(
    org_id: UUID,
    payload: ReservationCreate,
    auth: Authorized = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CreateReservationUseCase(uow).execute(org_id, auth.user_id, payload)
    return ApiResponse(data=unwrap(result))


@router.get("/reservations/{reservation_id}", response_model=ApiResponse[ReservationResponse])
async def get_reservation(
    org_id: UUID,
    reservation_id: UUID,
    auth: Authorized = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetReservationUseCase(uow).execute(org_id, reservation_id)
    return ApiResponse(data=unwrap(result))


@router.put("/reservations/{reservation_id}", response_model=ApiResponse[ReservationResponse])
async def update_reservation(
    org_id: UUID,
    reservation_id: UUID,
    payload: ReservationUpdate,
    auth: Authorized = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateReservationUseCase(uow).execute(org_id, reservation_id, payload)
    return ApiResponse(data=unwrap(result))


@router.delete(
    "/reservations/{reservation_id}",
    response_model=ApiResponse[None],
    response_model_exclude_none=True,
)
async def delete_reservation(
    org_id: UUID,
    reservation_id: UUID,
    auth: Authorized = Depends(require_owner),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    unwrap(await DeleteReservationUseCase(uow).execute(org_id, reservation_id))
    return ApiResponse()


@router.get(
    "/properties/{property_id}/calendar",
    response_model=ApiResponse[List[CalendarEntry]],
)
async def property_calendar(
    org_id: UUID,
    property_id: UUID,
    date_from: Optional[date] = Query(None, alias="from"),
    date_to: Optional[date] = Query(None, alias="to"),
    auth: Authorized = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetCalendarUseCase(uow).execute(org_id, property_id, date_from, date_to)
    return ApiResponse(data=unwrap(result))


@router.get("/owners/{user_id}/summary", response_model=ApiResponse[List[OwnerSummaryRow]])
async def owner_summary(
    org_id: UUID,
    user_id: UUID,
    property_id: Optional[UUID] = Query(None, alias="propertyId"),
    date_from: Optional[date] = Query(None, alias="from"),
    date_to: Optional[date] = Query(None, alias="to"),
    auth: Authorized = Depends(require_member),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Owner statement rows; every reservation of the organization is listed"""
    filters = ReservationFilter(
        property_id=property_id, date_from=date_from, date_to=date_to
    )
    result = await GetOwnerSummaryUseCase(uow).execute(org_id, filters)
    return ApiResponse(data=unwrap(result))
