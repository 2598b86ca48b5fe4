"""Authenticated caller domain model."""

from pydantic import BaseModel

from hr_api.models.domain.enums import EmployeeRole


class CurrentUser(BaseModel):
    """Verified token claims for the caller of one request.

    Built by the auth dependency from a signed token and passed into every
    handler explicitly. The role is a snapshot from login time; authorization
    decisions re-read the role from the employee store.
    """

    id: int
    email: str
    role: EmployeeRole
    token_id: str | None = None

    class Config:
        """Pydantic config."""

        frozen = True
