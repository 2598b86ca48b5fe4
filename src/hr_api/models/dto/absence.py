"""Absence request DTOs."""

from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator

from hr_api.constants.validation import (
    ABSENCE_REASON_MAX_LENGTH,
    ABSENCE_REASON_MIN_LENGTH,
    APPROVAL_NOTES_MAX_LENGTH,
)
from hr_api.models.domain.enums import DEPRECATED_ABSENCE_TYPES, AbsenceStatus, AbsenceType


class AbsenceRequestCreate(BaseModel):
    """Absence request create DTO.

    Date range rules are checked by the service, since they depend on the
    current day and on the employee's other requests.
    """

    type: AbsenceType
    start_date: date
    end_date: date
    reason: str = Field(
        min_length=ABSENCE_REASON_MIN_LENGTH,
        max_length=ABSENCE_REASON_MAX_LENGTH,
    )

    @field_validator("type")
    @classmethod
    def reject_retired_type(cls, v: AbsenceType) -> AbsenceType:
        """Reject absence types that are kept only for historical rows."""
        if v in DEPRECATED_ABSENCE_TYPES:
            raise ValueError(f"Absence type '{v.value}' is no longer accepted")
        return v


class AbsenceDecision(BaseModel):
    """Approve/decline request body."""

    approver_notes: str | None = Field(default=None, max_length=APPROVAL_NOTES_MAX_LENGTH)


class AbsenceRequestResponse(BaseModel):
    """Absence request response DTO with denormalized employee fields."""

    id: int
    employee_id: int
    employee_name: str
    employee_email: str
    type: AbsenceType
    start_date: date
    end_date: date
    reason: str | None = None  # Omitted from the company-wide approved listing
    status: AbsenceStatus
    created_at: datetime
    updated_at: datetime
    approval_notes: str | None = None
    approved_by_id: int | None = None
    approved_by_name: str | None = None
    approved_at: datetime | None = None
    duration_in_days: int
