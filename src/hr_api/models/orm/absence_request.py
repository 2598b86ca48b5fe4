"""Absence request ORM model."""

from datetime import date, datetime

from sqlalchemy import CheckConstraint, Date, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hr_api.constants.validation import ABSENCE_REASON_MAX_LENGTH, APPROVAL_NOTES_MAX_LENGTH
from hr_api.models.domain.enums import AbsenceStatus
from hr_api.models.orm.base import Base, IntegerIDMixin, TimestampMixin
from hr_api.models.orm.employee import EmployeeORM


class AbsenceRequestORM(Base, IntegerIDMixin, TimestampMixin):
    """Absence (leave) request database model."""

    __tablename__ = "absence_requests"

    employee_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("employees.id", ondelete="CASCADE"),
        nullable=False,
    )
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    reason: Mapped[str] = mapped_column(String(ABSENCE_REASON_MAX_LENGTH), nullable=False)
    status: Mapped[str] = mapped_column(
        String(50), nullable=False, default=AbsenceStatus.PENDING.value
    )

    approved_by_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("employees.id", ondelete="SET NULL"),
        nullable=True,
    )
    approval_notes: Mapped[str | None] = mapped_column(
        String(APPROVAL_NOTES_MAX_LENGTH), nullable=True
    )
    approved_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    # Joined eagerly: async sessions cannot lazy load on attribute access
    employee: Mapped[EmployeeORM] = relationship(
        EmployeeORM,
        foreign_keys=[employee_id],
        lazy="joined",
    )
    approved_by: Mapped[EmployeeORM | None] = relationship(
        EmployeeORM,
        foreign_keys=[approved_by_id],
        lazy="joined",
    )

    __table_args__ = (
        CheckConstraint("end_date >= start_date", name="ck_absence_requests_date_range"),
        # bereavement is retired but stays valid for historical rows
        CheckConstraint(
            "type IN ('vacation', 'sick_leave', 'personal_leave', 'other', 'bereavement')",
            name="ck_absence_requests_type",
        ),
        CheckConstraint(
            "status IN ('pending', 'approved', 'rejected', 'cancelled')",
            name="ck_absence_requests_status",
        ),
        Index("idx_absence_requests_employee_status", "employee_id", "status"),
        Index("idx_absence_requests_status", "status"),
    )

    @property
    def duration_in_days(self) -> int:
        """Inclusive number of calendar days covered."""
        return (self.end_date - self.start_date).days + 1
