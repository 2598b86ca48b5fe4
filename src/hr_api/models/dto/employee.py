"""Employee DTOs."""

from datetime import date
from typing import Annotated, Literal

from pydantic import BaseModel, EmailStr, Field

from hr_api.constants.validation import (
    ADDRESS_MAX_LENGTH,
    BIO_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
    EMAIL_MAX_LENGTH,
    EMERGENCY_CONTACT_MAX_LENGTH,
    NAME_MAX_LENGTH,
    ORG_FIELD_MAX_LENGTH,
    PHONE_MAX_LENGTH,
    PICTURE_URL_MAX_LENGTH,
)
from hr_api.models.domain.enums import EmployeeRole

PHONE_PATTERN = r"^\+?[0-9 ()./-]{3,20}$"


class EmployeeDirectoryEntry(BaseModel):
    """Employee entry in the co-worker directory."""

    id: int
    first_name: str
    last_name: str
    full_name: str
    department: str
    team: str
    position: str
    profile_picture_url: str | None = None
    role: EmployeeRole


class EmployeePublicView(BaseModel):
    """Profile as seen by co-workers without elevated access."""

    view: Literal["public"] = "public"
    id: int
    first_name: str
    last_name: str
    full_name: str
    department: str | None = None
    team: str | None = None
    position: str | None = None
    hire_date: date | None = None
    bio: str | None = None
    description: str | None = None
    profile_picture_url: str | None = None
    role: EmployeeRole


class EmployeeFullView(EmployeePublicView):
    """Profile as seen by the employee themselves or a manager."""

    view: Literal["full"] = "full"  # type: ignore[assignment]
    email: str
    phone_number: str | None = None
    date_of_birth: date | None = None
    address: str | None = None
    emergency_contact: str | None = None
    emergency_phone: str | None = None


EmployeeProfile = Annotated[EmployeeFullView | EmployeePublicView, Field(discriminator="view")]


class EmployeeUpdate(BaseModel):
    """Profile update DTO. Replaces every editable field."""

    first_name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    last_name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    email: EmailStr = Field(max_length=EMAIL_MAX_LENGTH)
    phone_number: str | None = Field(
        default=None, max_length=PHONE_MAX_LENGTH, pattern=PHONE_PATTERN
    )
    department: str | None = Field(default=None, max_length=ORG_FIELD_MAX_LENGTH)
    team: str | None = Field(default=None, max_length=ORG_FIELD_MAX_LENGTH)
    position: str | None = Field(default=None, max_length=ORG_FIELD_MAX_LENGTH)
    bio: str | None = Field(default=None, max_length=BIO_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    profile_picture_url: str | None = Field(default=None, max_length=PICTURE_URL_MAX_LENGTH)
    date_of_birth: date | None = None
    address: str | None = Field(default=None, max_length=ADDRESS_MAX_LENGTH)
    emergency_contact: str | None = Field(default=None, max_length=EMERGENCY_CONTACT_MAX_LENGTH)
    emergency_phone: str | None = Field(
        default=None, max_length=PHONE_MAX_LENGTH, pattern=PHONE_PATTERN
    )
