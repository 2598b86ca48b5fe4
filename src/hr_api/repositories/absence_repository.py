"""Absence request repository."""

from datetime import date
from typing import Any

from sqlalchemy import select, update

from hr_api.models.domain.enums import ACTIVE_ABSENCE_STATUSES, AbsenceStatus
from hr_api.models.orm.absence_request import AbsenceRequestORM
from hr_api.models.orm.base import utc_now
from hr_api.repositories.base import BaseRepository

_NEWEST_FIRST = (AbsenceRequestORM.created_at.desc(), AbsenceRequestORM.id.desc())


class AbsenceRepository(BaseRepository[AbsenceRequestORM]):
    """Repository for absence request operations."""

    model = AbsenceRequestORM

    async def reload(self, request_id: int) -> AbsenceRequestORM | None:
        """Load a request, overwriting any stale copy held by the session.

        Args:
            request_id: Absence request ID

        Returns:
            Freshly loaded request or None if not found
        """
        result = await self.session.execute(
            select(AbsenceRequestORM)
            .where(AbsenceRequestORM.id == request_id)
            .execution_options(populate_existing=True)
        )
        return result.unique().scalar_one_or_none()

    async def get_owned(self, request_id: int, employee_id: int) -> AbsenceRequestORM | None:
        """Get a request only if it belongs to the given employee.

        Args:
            request_id: Absence request ID
            employee_id: Expected owner

        Returns:
            Request or None if missing or owned by someone else
        """
        result = await self.session.execute(
            select(AbsenceRequestORM).where(
                AbsenceRequestORM.id == request_id,
                AbsenceRequestORM.employee_id == employee_id,
            )
        )
        return result.unique().scalar_one_or_none()

    async def has_overlap(self, employee_id: int, start_date: date, end_date: date) -> bool:
        """Check for an active request of the employee overlapping a date range.

        Two inclusive ranges [s1, e1] and [s2, e2] overlap iff
        s1 <= e2 and s2 <= e1.

        Args:
            employee_id: Employee ID
            start_date: First day of the candidate range
            end_date: Last day of the candidate range

        Returns:
            True if an overlapping pending or approved request exists
        """
        result = await self.session.execute(
            select(AbsenceRequestORM.id)
            .where(
                AbsenceRequestORM.employee_id == employee_id,
                AbsenceRequestORM.status.in_([s.value for s in ACTIVE_ABSENCE_STATUSES]),
                AbsenceRequestORM.start_date <= end_date,
                start_date <= AbsenceRequestORM.end_date,
            )
            .limit(1)
        )
        return result.first() is not None

    async def transition_from_pending(
        self,
        request_id: int,
        new_status: AbsenceStatus,
        employee_id: int | None = None,
        **values: Any,
    ) -> bool:
        """Move a request out of pending with a single conditional UPDATE.

        The status predicate is evaluated by the database, so of two
        concurrent transitions on the same request at most one matches.

        Args:
            request_id: Absence request ID
            new_status: Terminal status to set
            employee_id: Restrict the update to this owner, if given
            **values: Additional columns to write

        Returns:
            True if the row was still pending and has been updated
        """
        stmt = (
            update(AbsenceRequestORM)
            .where(
                AbsenceRequestORM.id == request_id,
                AbsenceRequestORM.status == AbsenceStatus.PENDING.value,
            )
            .values(status=new_status.value, updated_at=utc_now(), **values)
            .execution_options(synchronize_session=False)
        )
        if employee_id is not None:
            stmt = stmt.where(AbsenceRequestORM.employee_id == employee_id)
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def list_for_employee(self, employee_id: int) -> list[AbsenceRequestORM]:
        """List all requests of one employee, newest first.

        Args:
            employee_id: Employee ID

        Returns:
            List of requests
        """
        result = await self.session.execute(
            select(AbsenceRequestORM)
            .where(AbsenceRequestORM.employee_id == employee_id)
            .order_by(*_NEWEST_FIRST)
        )
        return list(result.unique().scalars().all())

    async def list_approved(self) -> list[AbsenceRequestORM]:
        """List approved requests of every employee by start date, latest first.

        Returns:
            List of requests
        """
        result = await self.session.execute(
            select(AbsenceRequestORM)
            .where(AbsenceRequestORM.status == AbsenceStatus.APPROVED.value)
            .order_by(AbsenceRequestORM.start_date.desc(), AbsenceRequestORM.id.desc())
        )
        return list(result.unique().scalars().all())

    async def list_pending_excluding(self, employee_id: int) -> list[AbsenceRequestORM]:
        """List pending requests of everyone except one employee, newest first.

        Args:
            employee_id: Employee whose own requests are left out

        Returns:
            List of requests
        """
        result = await self.session.execute(
            select(AbsenceRequestORM)
            .where(
                AbsenceRequestORM.status == AbsenceStatus.PENDING.value,
                AbsenceRequestORM.employee_id != employee_id,
            )
            .order_by(*_NEWEST_FIRST)
        )
        return list(result.unique().scalars().all())
