"""SQLAlchemy ORM models package."""

from hr_api.models.orm.base import Base
from hr_api.models.orm.employee import EmployeeORM
from hr_api.models.orm.absence_request import AbsenceRequestORM
from hr_api.models.orm.feedback import FeedbackORM

__all__ = [
    "Base",
    "EmployeeORM",
    "AbsenceRequestORM",
    "FeedbackORM",
]
