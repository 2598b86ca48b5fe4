"""Feedback router."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from hr_api.dependencies import CurrentUserDep, get_feedback_service
from hr_api.models.dto.feedback import FeedbackCreate, FeedbackDetail, FeedbackListItem
from hr_api.services.feedback_service import FeedbackService

router = APIRouter()

FeedbackServiceDep = Annotated[FeedbackService, Depends(get_feedback_service)]
EmployeeId = Annotated[int, Path(gt=0)]


@router.get("/received/{employee_id}", response_model=list[FeedbackListItem])
async def list_received(
    employee_id: EmployeeId,
    current_user: CurrentUserDep,
    feedback_service: FeedbackServiceDep,
) -> list[FeedbackListItem]:
    """List feedback an employee received."""
    return await feedback_service.get_received(employee_id, current_user.id)


@router.get("/given/{employee_id}", response_model=list[FeedbackListItem])
async def list_given(
    employee_id: EmployeeId,
    current_user: CurrentUserDep,
    feedback_service: FeedbackServiceDep,
) -> list[FeedbackListItem]:
    """List feedback the caller wrote."""
    return await feedback_service.get_given(employee_id, current_user.id)


@router.get("/can-view/{employee_id}", response_model=bool)
async def can_view(
    employee_id: EmployeeId,
    current_user: CurrentUserDep,
    feedback_service: FeedbackServiceDep,
) -> bool:
    """Check whether the caller may view an employee's feedback."""
    return await feedback_service.can_view(employee_id, current_user.id)


@router.get("/can-give/{employee_id}", response_model=bool)
async def can_give(
    employee_id: EmployeeId,
    current_user: CurrentUserDep,
    feedback_service: FeedbackServiceDep,
) -> bool:
    """Check whether the caller may write feedback for an employee."""
    return await feedback_service.can_give(employee_id, current_user.id)


@router.get("/{feedback_id}", response_model=FeedbackDetail)
async def get_feedback(
    feedback_id: Annotated[int, Path(gt=0)],
    current_user: CurrentUserDep,
    feedback_service: FeedbackServiceDep,
) -> FeedbackDetail:
    """Get one feedback record."""
    return await feedback_service.get_by_id(feedback_id, current_user.id)


@router.post("", response_model=FeedbackDetail, status_code=status.HTTP_201_CREATED)
async def create_feedback(
    body: FeedbackCreate,
    current_user: CurrentUserDep,
    feedback_service: FeedbackServiceDep,
) -> FeedbackDetail:
    """Write feedback for a co-worker."""
    return await feedback_service.create(current_user.id, body)
