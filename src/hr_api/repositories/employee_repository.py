"""Employee repository."""

from sqlalchemy import select

from hr_api.models.orm.employee import EmployeeORM
from hr_api.repositories.base import BaseRepository


class EmployeeRepository(BaseRepository[EmployeeORM]):
    """Repository for employee operations."""

    model = EmployeeORM

    async def get_by_email(self, email: str) -> EmployeeORM | None:
        """Get employee by email.

        Emails are stored lowercase, so the lookup is case-insensitive.

        Args:
            email: Employee email address

        Returns:
            EmployeeORM or None if not found
        """
        result = await self.session.execute(
            select(EmployeeORM).where(EmployeeORM.email == email.lower())
        )
        return result.scalar_one_or_none()

    async def get_role(self, employee_id: int) -> str | None:
        """Get only the stored role of an employee.

        Args:
            employee_id: Employee ID

        Returns:
            Role token or None if the employee does not exist
        """
        result = await self.session.execute(
            select(EmployeeORM.role).where(EmployeeORM.id == employee_id)
        )
        return result.scalar_one_or_none()

    async def lock(self, employee_id: int) -> EmployeeORM | None:
        """Load an employee row with a row-level write lock.

        Serializes writers that maintain per-employee invariants. SQLite
        ignores FOR UPDATE and relies on its database-wide write lock.

        Args:
            employee_id: Employee ID

        Returns:
            EmployeeORM or None if not found
        """
        result = await self.session.execute(
            select(EmployeeORM).where(EmployeeORM.id == employee_id).with_for_update()
        )
        return result.scalar_one_or_none()

    async def list_directory(self) -> list[EmployeeORM]:
        """List employees that have a first and last name.

        Returns:
            Employees ordered by last name, then first name
        """
        result = await self.session.execute(
            select(EmployeeORM)
            .where(EmployeeORM.first_name != "", EmployeeORM.last_name != "")
            .order_by(EmployeeORM.last_name, EmployeeORM.first_name, EmployeeORM.id)
        )
        return list(result.scalars().all())

    async def email_taken_by_other(self, email: str, employee_id: int) -> bool:
        """Check whether an email belongs to a different employee.

        Args:
            email: Email address to check
            employee_id: Employee allowed to own the email

        Returns:
            True if another employee already uses the email
        """
        result = await self.session.execute(
            select(EmployeeORM.id).where(
                EmployeeORM.email == email.lower(),
                EmployeeORM.id != employee_id,
            )
        )
        return result.first() is not None
