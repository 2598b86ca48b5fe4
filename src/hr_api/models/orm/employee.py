"""Employee ORM model."""

from datetime import date

from sqlalchemy import CheckConstraint, Date, Index, String
from sqlalchemy.orm import Mapped, mapped_column

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
from hr_api.models.orm.base import Base, IntegerIDMixin, TimestampMixin


class EmployeeORM(Base, IntegerIDMixin, TimestampMixin):
    """Employee database model."""

    __tablename__ = "employees"

    first_name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    last_name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    email: Mapped[str] = mapped_column(String(EMAIL_MAX_LENGTH), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(
        String(50), nullable=False, default=EmployeeRole.EMPLOYEE.value
    )

    phone_number: Mapped[str | None] = mapped_column(String(PHONE_MAX_LENGTH), nullable=True)
    department: Mapped[str | None] = mapped_column(String(ORG_FIELD_MAX_LENGTH), nullable=True)
    team: Mapped[str | None] = mapped_column(String(ORG_FIELD_MAX_LENGTH), nullable=True)
    position: Mapped[str | None] = mapped_column(String(ORG_FIELD_MAX_LENGTH), nullable=True)
    hire_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    bio: Mapped[str | None] = mapped_column(String(BIO_MAX_LENGTH), nullable=True)
    description: Mapped[str | None] = mapped_column(String(DESCRIPTION_MAX_LENGTH), nullable=True)
    profile_picture_url: Mapped[str | None] = mapped_column(
        String(PICTURE_URL_MAX_LENGTH), nullable=True
    )

    # Sensitive fields, only part of the full profile view
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)
    address: Mapped[str | None] = mapped_column(String(ADDRESS_MAX_LENGTH), nullable=True)
    emergency_contact: Mapped[str | None] = mapped_column(
        String(EMERGENCY_CONTACT_MAX_LENGTH), nullable=True
    )
    emergency_phone: Mapped[str | None] = mapped_column(String(PHONE_MAX_LENGTH), nullable=True)

    __table_args__ = (
        CheckConstraint("role IN ('employee', 'manager', 'admin')", name="ck_employees_role"),
        Index("idx_employees_last_first", "last_name", "first_name"),
        Index("idx_employees_role", "role"),
    )

    @property
    def full_name(self) -> str:
        """Display name built from first and last name."""
        return f"{self.first_name} {self.last_name}"
