"""Services package."""

from hr_api.services.absence_service import AbsenceService
from hr_api.services.auth_service import AuthService
from hr_api.services.authorization_service import AuthorizationService
from hr_api.services.employee_service import EmployeeService
from hr_api.services.feedback_service import FeedbackService

__all__ = [
    "AbsenceService",
    "AuthService",
    "AuthorizationService",
    "EmployeeService",
    "FeedbackService",
]
