"""Domain models package."""

from hr_api.models.domain.current_user import CurrentUser
from hr_api.models.domain.enums import (
    ACTIVE_ABSENCE_STATUSES,
    DEPRECATED_ABSENCE_TYPES,
    AbsenceStatus,
    AbsenceType,
    EmployeeRole,
    FeedbackType,
)

__all__ = [
    "ACTIVE_ABSENCE_STATUSES",
    "DEPRECATED_ABSENCE_TYPES",
    "AbsenceStatus",
    "AbsenceType",
    "CurrentUser",
    "EmployeeRole",
    "FeedbackType",
]
