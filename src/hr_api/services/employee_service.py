"""Employee directory and profile service."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from hr_api.constants.validation import NOT_ASSIGNED
from hr_api.exceptions import EmployeeEmailTakenError, EmployeeNotFoundError
from hr_api.models.dto.employee import (
    EmployeeDirectoryEntry,
    EmployeeFullView,
    EmployeePublicView,
    EmployeeUpdate,
)
from hr_api.models.orm.employee import EmployeeORM
from hr_api.repositories.employee_repository import EmployeeRepository
from hr_api.services.authorization_service import AuthorizationService

logger = logging.getLogger(__name__)

# Fields copied into the public view; the full view adds the contact details
_PUBLIC_FIELDS = (
    "id",
    "first_name",
    "last_name",
    "full_name",
    "department",
    "team",
    "position",
    "hire_date",
    "bio",
    "description",
    "profile_picture_url",
    "role",
)
_PRIVATE_FIELDS = (
    "email",
    "phone_number",
    "date_of_birth",
    "address",
    "emergency_contact",
    "emergency_phone",
)


def project_employee(
    employee: EmployeeORM, full: bool
) -> EmployeeFullView | EmployeePublicView:
    """Project an employee into the view the caller is allowed to see.

    Args:
        employee: Employee ORM object
        full: Whether the caller may see contact and personal details

    Returns:
        EmployeeFullView if ``full``, otherwise EmployeePublicView
    """
    data = {name: getattr(employee, name) for name in _PUBLIC_FIELDS}
    if not full:
        return EmployeePublicView(**data)
    data.update({name: getattr(employee, name) for name in _PRIVATE_FIELDS})
    return EmployeeFullView(**data)


def _to_directory_entry(employee: EmployeeORM) -> EmployeeDirectoryEntry:
    return EmployeeDirectoryEntry(
        id=employee.id,
        first_name=employee.first_name,
        last_name=employee.last_name,
        full_name=employee.full_name,
        department=employee.department or NOT_ASSIGNED,
        team=employee.team or NOT_ASSIGNED,
        position=employee.position or NOT_ASSIGNED,
        profile_picture_url=employee.profile_picture_url,
        role=employee.role,
    )


class EmployeeService:
    """Service for the co-worker directory and employee profiles."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.employee_repo = EmployeeRepository(session)
        self.authz = AuthorizationService(session)

    async def list_directory(self) -> list[EmployeeDirectoryEntry]:
        """List all named employees ordered by last name, then first name."""
        employees = await self.employee_repo.list_directory()
        return [_to_directory_entry(e) for e in employees]

    async def get_profile(
        self, employee_id: int, requesting_id: int
    ) -> EmployeeFullView | EmployeePublicView:
        """Get an employee profile shaped for the caller.

        Args:
            employee_id: Employee to show
            requesting_id: Caller

        Returns:
            Full view for the employee themselves and managers, public view otherwise

        Raises:
            EmployeeNotFoundError: If the employee does not exist
        """
        employee = await self.employee_repo.get_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        full = await self.authz.can_view_profile(requesting_id, employee_id)
        return project_employee(employee, full)

    async def update_profile(
        self, employee_id: int, data: EmployeeUpdate, requesting_id: int
    ) -> EmployeeFullView | EmployeePublicView:
        """Replace the editable fields of a profile.

        Role and creation time are never touched here.

        Args:
            employee_id: Employee to update
            data: New field values
            requesting_id: Caller

        Returns:
            Updated profile shaped for the caller

        Raises:
            UnauthorizedError: If the caller may not edit the profile
            EmployeeNotFoundError: If the employee does not exist
            EmployeeEmailTakenError: If the email belongs to another employee
        """
        await self.authz.require_edit_profile(requesting_id, employee_id)

        employee = await self.employee_repo.get_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)

        email = data.email.lower()
        if await self.employee_repo.email_taken_by_other(email, employee_id):
            raise EmployeeEmailTakenError(email)

        values = data.model_dump()
        values["email"] = email
        employee = await self.employee_repo.update(employee_id, **values)

        logger.info("Profile of employee %s updated by employee %s", employee_id, requesting_id)
        full = await self.authz.can_view_profile(requesting_id, employee_id)
        return project_employee(employee, full)
