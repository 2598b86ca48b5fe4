"""Domain-specific exceptions for the HR API.

These exceptions provide a clean separation between service-layer errors
and HTTP responses. Services raise them at the point of detection and the
error handler middleware translates them into status codes.
"""

from typing import Any


class HrAPIError(Exception):
    """Base exception for all HR API errors."""

    def __init__(self, message: str = "An error occurred", details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# =============================================================================
# Authentication and Authorization Errors (401 / 403)
# =============================================================================


class AuthenticationError(HrAPIError):
    """Raised when credentials or tokens cannot be verified."""

    def __init__(self, message: str = "Invalid email or password") -> None:
        super().__init__(message)


class UnauthorizedError(HrAPIError):
    """Raised when the actor lacks permission for the attempted action."""

    def __init__(self, message: str = "You are not authorized to perform this action.") -> None:
        super().__init__(message)


# =============================================================================
# Resource Not Found Errors (404)
# =============================================================================


class NotFoundError(HrAPIError):
    """Base class for resource not found errors."""

    pass


class EmployeeNotFoundError(NotFoundError):
    """Raised when an employee cannot be found."""

    def __init__(self, employee_id: int | None = None, message: str = "Employee not found") -> None:
        details = {"employee_id": employee_id} if employee_id is not None else {}
        super().__init__(message, details)


class AbsenceRequestNotFoundError(NotFoundError):
    """Raised when an absence request cannot be found."""

    def __init__(self, request_id: int | None = None) -> None:
        details = {"request_id": request_id} if request_id is not None else {}
        super().__init__("Absence request not found", details)


class FeedbackNotFoundError(NotFoundError):
    """Raised when a feedback record cannot be found."""

    def __init__(self, feedback_id: int | None = None) -> None:
        details = {"feedback_id": feedback_id} if feedback_id is not None else {}
        super().__init__("Feedback not found", details)


# =============================================================================
# Conflict Errors (409)
# =============================================================================


class ConflictError(HrAPIError):
    """Base class for resource conflict errors."""

    pass


class EmployeeEmailTakenError(ConflictError):
    """Raised when a profile update would reuse another employee's email."""

    def __init__(self, email: str | None = None) -> None:
        details = {"email": email} if email else {}
        super().__init__("Another employee already uses this email", details)


# =============================================================================
# Business Rule Violations (400)
# =============================================================================


class BusinessRuleError(HrAPIError):
    """Base class for business-rule violations surfaced verbatim to callers."""

    pass


class InvalidRangeError(BusinessRuleError):
    """Raised when an absence date range is not acceptable."""

    pass


class ConflictingRequestError(BusinessRuleError):
    """Raised when a new absence request overlaps an active one."""

    def __init__(self) -> None:
        super().__init__("You already have an absence request for the selected dates.")


class InvalidStateError(BusinessRuleError):
    """Raised when a lifecycle transition is not allowed from the current status."""

    pass


class EmailAlreadyRegisteredError(BusinessRuleError):
    """Raised when registering with an email that already exists."""

    def __init__(self, email: str | None = None) -> None:
        details = {"email": email} if email else {}
        super().__init__("User with this email already exists", details)
