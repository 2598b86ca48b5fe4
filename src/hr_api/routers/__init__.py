"""API routers."""

from hr_api.routers import absence, auth, employees, feedback

__all__ = ["absence", "auth", "employees", "feedback"]
