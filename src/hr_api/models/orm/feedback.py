"""Feedback ORM model."""

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hr_api.constants.validation import FEEDBACK_CONTENT_MAX_LENGTH, FEEDBACK_RATING_DEFAULT
from hr_api.models.domain.enums import FeedbackType
from hr_api.models.orm.base import Base, IntegerIDMixin, TimestampMixin
from hr_api.models.orm.employee import EmployeeORM


class FeedbackORM(Base, IntegerIDMixin, TimestampMixin):
    """Peer feedback database model.

    Rows are written once. The true sender is always stored, anonymity is
    applied when the record is displayed.
    """

    __tablename__ = "feedback"

    from_employee_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("employees.id", ondelete="CASCADE"),
        nullable=False,
    )
    to_employee_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("employees.id", ondelete="CASCADE"),
        nullable=False,
    )
    content: Mapped[str] = mapped_column(String(FEEDBACK_CONTENT_MAX_LENGTH), nullable=False)
    polished_content: Mapped[str | None] = mapped_column(
        String(FEEDBACK_CONTENT_MAX_LENGTH), nullable=True
    )
    type: Mapped[str] = mapped_column(
        String(50), nullable=False, default=FeedbackType.GENERAL.value
    )
    rating: Mapped[int] = mapped_column(Integer, nullable=False, default=FEEDBACK_RATING_DEFAULT)
    is_anonymous: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_polished: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    from_employee: Mapped[EmployeeORM] = relationship(
        EmployeeORM,
        foreign_keys=[from_employee_id],
        lazy="joined",
    )
    to_employee: Mapped[EmployeeORM] = relationship(
        EmployeeORM,
        foreign_keys=[to_employee_id],
        lazy="joined",
    )

    __table_args__ = (
        CheckConstraint("rating BETWEEN 1 AND 10", name="ck_feedback_rating_range"),
        CheckConstraint("from_employee_id <> to_employee_id", name="ck_feedback_not_self"),
        Index("idx_feedback_to_employee", "to_employee_id"),
        Index("idx_feedback_from_employee", "from_employee_id"),
    )
