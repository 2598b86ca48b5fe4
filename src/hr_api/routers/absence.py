"""Absence router: leave requests and their approval."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status

from hr_api.dependencies import CurrentUserDep, get_absence_service
from hr_api.exceptions import AbsenceRequestNotFoundError
from hr_api.models.dto.absence import (
    AbsenceDecision,
    AbsenceRequestCreate,
    AbsenceRequestResponse,
)
from hr_api.services.absence_service import AbsenceService

router = APIRouter()

AbsenceServiceDep = Annotated[AbsenceService, Depends(get_absence_service)]
RequestId = Annotated[int, Path(gt=0)]


@router.get("/my-requests", response_model=list[AbsenceRequestResponse])
async def list_my_requests(
    current_user: CurrentUserDep,
    absence_service: AbsenceServiceDep,
) -> list[AbsenceRequestResponse]:
    """List the caller's own requests."""
    return await absence_service.list_mine(current_user.id)


@router.get("/employee/{employee_id}", response_model=list[AbsenceRequestResponse])
async def list_employee_requests(
    employee_id: Annotated[int, Path(gt=0)],
    current_user: CurrentUserDep,
    absence_service: AbsenceServiceDep,
) -> list[AbsenceRequestResponse]:
    """List an employee's requests. Managers only."""
    return await absence_service.list_for_employee(employee_id, current_user.id)


@router.get("/approved", response_model=list[AbsenceRequestResponse])
async def list_approved_requests(
    current_user: CurrentUserDep,
    absence_service: AbsenceServiceDep,
) -> list[AbsenceRequestResponse]:
    """List approved absences of everyone, without reasons."""
    return await absence_service.list_approved()


@router.get("/pending-approvals", response_model=list[AbsenceRequestResponse])
async def list_pending_approvals(
    current_user: CurrentUserDep,
    absence_service: AbsenceServiceDep,
) -> list[AbsenceRequestResponse]:
    """List requests waiting for the caller's decision. Managers only."""
    return await absence_service.list_pending_for_manager(current_user.id)


@router.get("/{request_id}", response_model=AbsenceRequestResponse)
async def get_request(
    request_id: RequestId,
    current_user: CurrentUserDep,
    absence_service: AbsenceServiceDep,
) -> AbsenceRequestResponse:
    """Get a single request."""
    return await absence_service.get_by_id(request_id, current_user.id)


@router.post("", response_model=AbsenceRequestResponse, status_code=status.HTTP_201_CREATED)
async def create_request(
    body: AbsenceRequestCreate,
    current_user: CurrentUserDep,
    absence_service: AbsenceServiceDep,
) -> AbsenceRequestResponse:
    """Submit a new absence request for the caller."""
    return await absence_service.create(current_user.id, body)


@router.put("/{request_id}/approve", response_model=AbsenceRequestResponse)
async def approve_request(
    request_id: RequestId,
    body: AbsenceDecision,
    current_user: CurrentUserDep,
    absence_service: AbsenceServiceDep,
) -> AbsenceRequestResponse:
    """Approve a pending request."""
    return await absence_service.approve(request_id, current_user.id, body.approver_notes)


@router.put("/{request_id}/decline", response_model=AbsenceRequestResponse)
async def decline_request(
    request_id: RequestId,
    body: AbsenceDecision,
    current_user: CurrentUserDep,
    absence_service: AbsenceServiceDep,
) -> AbsenceRequestResponse:
    """Decline a pending request."""
    return await absence_service.decline(request_id, current_user.id, body.approver_notes)


@router.delete("/{request_id}", status_code=status.HTTP_204_NO_CONTENT)
async def cancel_request(
    request_id: RequestId,
    current_user: CurrentUserDep,
    absence_service: AbsenceServiceDep,
) -> Response:
    """Cancel one of the caller's pending requests."""
    if not await absence_service.cancel(request_id, current_user.id):
        raise AbsenceRequestNotFoundError(request_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
