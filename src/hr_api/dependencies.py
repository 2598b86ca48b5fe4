"""Centralized dependency injection factories for FastAPI.

Each factory builds a service bound to the request's database session.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hr_api.database import get_db
from hr_api.models.domain.current_user import CurrentUser
from hr_api.security.auth import get_current_user
from hr_api.services.absence_service import AbsenceService
from hr_api.services.auth_service import AuthService
from hr_api.services.employee_service import EmployeeService
from hr_api.services.feedback_service import FeedbackService


def get_auth_service(db: AsyncSession = Depends(get_db)) -> AuthService:
    """Get AuthService instance."""
    return AuthService(db)


def get_employee_service(db: AsyncSession = Depends(get_db)) -> EmployeeService:
    """Get EmployeeService instance."""
    return EmployeeService(db)


def get_absence_service(db: AsyncSession = Depends(get_db)) -> AbsenceService:
    """Get AbsenceService instance."""
    return AbsenceService(db)


def get_feedback_service(db: AsyncSession = Depends(get_db)) -> FeedbackService:
    """Get FeedbackService instance."""
    return FeedbackService(db)


CurrentUserDep = Annotated[CurrentUser, Depends(get_current_user)]
