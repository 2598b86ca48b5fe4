"""Data Transfer Objects package."""

from hr_api.models.dto.absence import (
    AbsenceDecision,
    AbsenceRequestCreate,
    AbsenceRequestResponse,
)
from hr_api.models.dto.auth import AuthResponse, LoginRequest, RegisterRequest, UserInfo
from hr_api.models.dto.employee import (
    EmployeeDirectoryEntry,
    EmployeeFullView,
    EmployeeProfile,
    EmployeePublicView,
    EmployeeUpdate,
)
from hr_api.models.dto.feedback import FeedbackCreate, FeedbackDetail, FeedbackListItem

__all__ = [
    "AbsenceDecision",
    "AbsenceRequestCreate",
    "AbsenceRequestResponse",
    "AuthResponse",
    "LoginRequest",
    "RegisterRequest",
    "UserInfo",
    "EmployeeDirectoryEntry",
    "EmployeeFullView",
    "EmployeeProfile",
    "EmployeePublicView",
    "EmployeeUpdate",
    "FeedbackCreate",
    "FeedbackDetail",
    "FeedbackListItem",
]
