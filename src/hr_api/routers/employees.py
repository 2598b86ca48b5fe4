"""Employees router: co-worker directory and profiles."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from hr_api.dependencies import CurrentUserDep, get_employee_service
from hr_api.models.dto.employee import EmployeeDirectoryEntry, EmployeeProfile, EmployeeUpdate
from hr_api.services.employee_service import EmployeeService

router = APIRouter()


@router.get("", response_model=list[EmployeeDirectoryEntry])
async def list_employees(
    current_user: CurrentUserDep,
    employee_service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> list[EmployeeDirectoryEntry]:
    """List all co-workers."""
    return await employee_service.list_directory()


@router.get("/{employee_id}", response_model=EmployeeProfile)
async def get_employee(
    employee_id: Annotated[int, Path(gt=0)],
    current_user: CurrentUserDep,
    employee_service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> EmployeeProfile:
    """Get a profile. Co-workers receive the public view."""
    return await employee_service.get_profile(employee_id, current_user.id)


@router.put("/{employee_id}", response_model=EmployeeProfile)
async def update_employee(
    employee_id: Annotated[int, Path(gt=0)],
    body: EmployeeUpdate,
    current_user: CurrentUserDep,
    employee_service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> EmployeeProfile:
    """Update a profile. Allowed for the employee and managers."""
    return await employee_service.update_profile(employee_id, body, current_user.id)
