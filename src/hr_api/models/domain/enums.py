"""Domain enumerations.

Every enum is stored and serialized as its lowercase string value. A value,
once assigned, is never renamed or reused; retired members stay defined so
historical rows keep loading.
"""

from enum import StrEnum
from typing import Final


class EmployeeRole(StrEnum):
    """Employee role enum."""

    EMPLOYEE = "employee"
    MANAGER = "manager"
    ADMIN = "admin"


class AbsenceType(StrEnum):
    """Absence request type enum."""

    VACATION = "vacation"
    SICK_LEAVE = "sick_leave"
    PERSONAL_LEAVE = "personal_leave"
    OTHER = "other"
    # Retired: readable on existing rows, rejected for new requests
    BEREAVEMENT = "bereavement"


DEPRECATED_ABSENCE_TYPES: Final[frozenset[AbsenceType]] = frozenset({AbsenceType.BEREAVEMENT})


class AbsenceStatus(StrEnum):
    """Absence request status enum."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    CANCELLED = "cancelled"


# Statuses that still occupy their calendar days
ACTIVE_ABSENCE_STATUSES: Final[frozenset[AbsenceStatus]] = frozenset(
    {AbsenceStatus.PENDING, AbsenceStatus.APPROVED}
)


class FeedbackType(StrEnum):
    """Feedback type enum."""

    GENERAL = "general"
    PERFORMANCE = "performance"
    COLLABORATION = "collaboration"
    COMMUNICATION = "communication"
    LEADERSHIP = "leadership"
    TECHNICAL = "technical"
