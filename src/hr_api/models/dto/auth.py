"""Authentication DTOs."""

from datetime import date, datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

from hr_api.constants.validation import (
    DESCRIPTION_MAX_LENGTH,
    EMAIL_MAX_LENGTH,
    NAME_MAX_LENGTH,
    ORG_FIELD_MAX_LENGTH,
    PASSWORD_MAX_BYTES,
    PASSWORD_MAX_LENGTH,
    PASSWORD_MIN_LENGTH,
)
from hr_api.models.domain.enums import EmployeeRole


def _check_password_bytes(v: str) -> str:
    if len(v.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValueError(f"Password must not exceed {PASSWORD_MAX_BYTES} bytes")
    return v


class RegisterRequest(BaseModel):
    """Self-registration request."""

    first_name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    last_name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    email: EmailStr = Field(max_length=EMAIL_MAX_LENGTH)
    password: str = Field(min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH)
    role: EmployeeRole = EmployeeRole.EMPLOYEE
    department: str | None = Field(default=None, max_length=ORG_FIELD_MAX_LENGTH)
    team: str | None = Field(default=None, max_length=ORG_FIELD_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        """Reject passwords longer than bcrypt can hash."""
        return _check_password_bytes(v)


class LoginRequest(BaseModel):
    """Email/password login request."""

    email: EmailStr
    password: str = Field(min_length=1, max_length=PASSWORD_MAX_LENGTH)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        """Reject passwords longer than bcrypt can hash."""
        return _check_password_bytes(v)


class ValidateTokenRequest(BaseModel):
    """Token validation request."""

    token: str = Field(max_length=4096)


class ValidateTokenResponse(BaseModel):
    """Token validation result."""

    is_valid: bool


class UserInfo(BaseModel):
    """Authenticated employee summary returned with a token."""

    id: int
    first_name: str
    last_name: str
    full_name: str
    email: str
    phone_number: str | None = None
    department: str | None = None
    team: str | None = None
    position: str | None = None
    description: str | None = None
    hire_date: date | None = None
    bio: str | None = None
    profile_picture_url: str | None = None
    role: EmployeeRole

    class Config:
        """Pydantic config."""

        from_attributes = True


class AuthResponse(BaseModel):
    """Token issued on register or login."""

    token: str
    token_type: str = "bearer"
    expires_at: datetime
    user: UserInfo


class CurrentUserResponse(BaseModel):
    """Claims of the caller's token."""

    id: int
    email: str
    role: EmployeeRole
