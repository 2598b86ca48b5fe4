"""Repositories package."""

from hr_api.repositories.absence_repository import AbsenceRepository
from hr_api.repositories.base import BaseRepository
from hr_api.repositories.employee_repository import EmployeeRepository
from hr_api.repositories.feedback_repository import FeedbackRepository

__all__ = [
    "BaseRepository",
    "AbsenceRepository",
    "EmployeeRepository",
    "FeedbackRepository",
]
