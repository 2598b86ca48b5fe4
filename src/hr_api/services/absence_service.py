"""Absence request lifecycle.

A request starts ``pending`` and moves exactly once to ``approved``,
``rejected`` or ``cancelled``. Transitions are written with a conditional
UPDATE so that concurrent callers cannot both move the same request.
"""

import logging
from datetime import UTC, date, datetime

from sqlalchemy.ext.asyncio import AsyncSession

from hr_api.exceptions import (
    AbsenceRequestNotFoundError,
    ConflictingRequestError,
    EmployeeNotFoundError,
    InvalidRangeError,
    InvalidStateError,
)
from hr_api.models.domain.enums import AbsenceStatus
from hr_api.models.dto.absence import AbsenceRequestCreate, AbsenceRequestResponse
from hr_api.models.orm.absence_request import AbsenceRequestORM
from hr_api.repositories.absence_repository import AbsenceRepository
from hr_api.repositories.employee_repository import EmployeeRepository
from hr_api.services.authorization_service import AuthorizationService

logger = logging.getLogger(__name__)


def utc_today() -> date:
    """Current calendar day in UTC."""
    return datetime.now(UTC).date()


def to_response(request: AbsenceRequestORM, include_reason: bool = True) -> AbsenceRequestResponse:
    """Build an AbsenceRequestResponse from an ORM object.

    Args:
        request: Absence request with its employees loaded
        include_reason: Whether the free-text reason is shown

    Returns:
        AbsenceRequestResponse
    """
    return AbsenceRequestResponse(
        id=request.id,
        employee_id=request.employee_id,
        employee_name=request.employee.full_name,
        employee_email=request.employee.email,
        type=request.type,
        start_date=request.start_date,
        end_date=request.end_date,
        reason=request.reason if include_reason else None,
        status=request.status,
        created_at=request.created_at,
        updated_at=request.updated_at,
        approval_notes=request.approval_notes,
        approved_by_id=request.approved_by_id,
        approved_by_name=request.approved_by.full_name if request.approved_by else None,
        approved_at=request.approved_at,
        duration_in_days=request.duration_in_days,
    )


class AbsenceService:
    """Service for the absence request workflow."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.absence_repo = AbsenceRepository(session)
        self.employee_repo = EmployeeRepository(session)
        self.authz = AuthorizationService(session)

    async def create(self, employee_id: int, data: AbsenceRequestCreate) -> AbsenceRequestResponse:
        """Create a pending absence request for an employee.

        Args:
            employee_id: Requesting employee
            data: Validated request data

        Returns:
            Created AbsenceRequestResponse

        Raises:
            InvalidRangeError: If the range starts in the past or ends before it starts
            EmployeeNotFoundError: If the employee does not exist
            ConflictingRequestError: If an active request overlaps the range
        """
        if data.start_date < utc_today():
            raise InvalidRangeError("Start date cannot be in the past.")
        if data.end_date < data.start_date:
            raise InvalidRangeError("End date must be on or after the start date.")

        # Concurrent creates for one employee queue on this lock before the overlap scan
        employee = await self.employee_repo.lock(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)

        if await self.absence_repo.has_overlap(employee_id, data.start_date, data.end_date):
            raise ConflictingRequestError()

        request = await self.absence_repo.create(
            employee_id=employee_id,
            type=data.type.value,
            start_date=data.start_date,
            end_date=data.end_date,
            reason=data.reason,
            status=AbsenceStatus.PENDING.value,
        )
        request = await self.absence_repo.reload(request.id)

        logger.info(
            "Absence request %s created by employee %s (%s to %s)",
            request.id,
            employee_id,
            data.start_date,
            data.end_date,
        )
        return to_response(request)

    async def approve(
        self, request_id: int, approver_id: int, notes: str | None = None
    ) -> AbsenceRequestResponse:
        """Approve a pending request.

        Args:
            request_id: Absence request ID
            approver_id: Approving manager
            notes: Optional approval notes

        Returns:
            Updated AbsenceRequestResponse

        Raises:
            UnauthorizedError: If the approver is not a manager
            AbsenceRequestNotFoundError: If the request does not exist
            InvalidStateError: If the request is no longer pending
        """
        return await self._decide(request_id, approver_id, notes, AbsenceStatus.APPROVED)

    async def decline(
        self, request_id: int, approver_id: int, notes: str | None = None
    ) -> AbsenceRequestResponse:
        """Decline a pending request.

        Args:
            request_id: Absence request ID
            approver_id: Declining manager
            notes: Optional notes

        Returns:
            Updated AbsenceRequestResponse

        Raises:
            UnauthorizedError: If the approver is not a manager
            AbsenceRequestNotFoundError: If the request does not exist
            InvalidStateError: If the request is no longer pending
        """
        return await self._decide(request_id, approver_id, notes, AbsenceStatus.REJECTED)

    async def _decide(
        self,
        request_id: int,
        approver_id: int,
        notes: str | None,
        outcome: AbsenceStatus,
    ) -> AbsenceRequestResponse:
        await self.authz.require_approve_absence_requests(approver_id)

        request = await self.absence_repo.get_by_id(request_id)
        if request is None:
            raise AbsenceRequestNotFoundError(request_id)

        verb = "approved" if outcome == AbsenceStatus.APPROVED else "declined"
        if request.status != AbsenceStatus.PENDING:
            raise InvalidStateError(f"Only pending requests can be {verb}.")

        updated = await self.absence_repo.transition_from_pending(
            request_id,
            outcome,
            approved_by_id=approver_id,
            approved_at=datetime.now(UTC),
            approval_notes=notes,
        )
        if not updated:
            # Another transition committed after our read
            raise InvalidStateError(f"Only pending requests can be {verb}.")

        request = await self.absence_repo.reload(request_id)
        logger.info("Absence request %s %s by employee %s", request_id, verb, approver_id)
        return to_response(request)

    async def cancel(self, request_id: int, employee_id: int) -> bool:
        """Cancel one of the employee's own pending requests.

        Args:
            request_id: Absence request ID
            employee_id: Owner attempting the cancellation

        Returns:
            True if cancelled, False if no such request belongs to the employee

        Raises:
            InvalidStateError: If the request exists but is no longer pending
        """
        request = await self.absence_repo.get_owned(request_id, employee_id)
        if request is None:
            return False

        if request.status != AbsenceStatus.PENDING:
            raise InvalidStateError("Only pending requests can be cancelled.")

        cancelled = await self.absence_repo.transition_from_pending(
            request_id, AbsenceStatus.CANCELLED, employee_id=employee_id
        )
        if not cancelled:
            raise InvalidStateError("Only pending requests can be cancelled.")

        await self.absence_repo.reload(request_id)
        logger.info("Absence request %s cancelled by employee %s", request_id, employee_id)
        return True

    async def get_by_id(self, request_id: int, requesting_id: int) -> AbsenceRequestResponse:
        """Get a single request visible to the caller.

        Args:
            request_id: Absence request ID
            requesting_id: Caller

        Returns:
            AbsenceRequestResponse

        Raises:
            AbsenceRequestNotFoundError: If the request does not exist
            UnauthorizedError: If the caller may not see the owner's absences
        """
        request = await self.absence_repo.get_by_id(request_id)
        if request is None:
            raise AbsenceRequestNotFoundError(request_id)
        await self.authz.require_view_absence_requests(requesting_id, request.employee_id)
        return to_response(request)

    async def list_mine(self, employee_id: int) -> list[AbsenceRequestResponse]:
        """List the caller's own requests, newest first."""
        requests = await self.absence_repo.list_for_employee(employee_id)
        return [to_response(r) for r in requests]

    async def list_for_employee(
        self, employee_id: int, requesting_id: int
    ) -> list[AbsenceRequestResponse]:
        """List another employee's requests for a manager.

        Args:
            employee_id: Employee whose requests are listed
            requesting_id: Caller, must be a manager

        Returns:
            Requests, newest first

        Raises:
            UnauthorizedError: If the caller is not a manager
        """
        await self.authz.require_manager(requesting_id)
        requests = await self.absence_repo.list_for_employee(employee_id)
        return [to_response(r) for r in requests]

    async def list_approved(self) -> list[AbsenceRequestResponse]:
        """List approved requests company-wide without their reasons."""
        requests = await self.absence_repo.list_approved()
        return [to_response(r, include_reason=False) for r in requests]

    async def list_pending_for_manager(self, manager_id: int) -> list[AbsenceRequestResponse]:
        """List requests waiting for a decision, leaving out the manager's own.

        Args:
            manager_id: Caller, must be a manager

        Returns:
            Pending requests, newest first

        Raises:
            UnauthorizedError: If the caller is not a manager
        """
        await self.authz.require_manager(manager_id)
        requests = await self.absence_repo.list_pending_excluding(manager_id)
        return [to_response(r) for r in requests]
