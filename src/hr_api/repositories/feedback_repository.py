"""Feedback repository."""

from sqlalchemy import select

from hr_api.models.orm.feedback import FeedbackORM
from hr_api.repositories.base import BaseRepository

_NEWEST_FIRST = (FeedbackORM.created_at.desc(), FeedbackORM.id.desc())


class FeedbackRepository(BaseRepository[FeedbackORM]):
    """Repository for feedback operations."""

    model = FeedbackORM

    async def reload(self, feedback_id: int) -> FeedbackORM | None:
        """Load a feedback record together with both employees.

        Args:
            feedback_id: Feedback ID

        Returns:
            Feedback or None if not found
        """
        result = await self.session.execute(
            select(FeedbackORM)
            .where(FeedbackORM.id == feedback_id)
            .execution_options(populate_existing=True)
        )
        return result.unique().scalar_one_or_none()

    async def list_received(self, employee_id: int) -> list[FeedbackORM]:
        """List feedback addressed to an employee, newest first.

        Args:
            employee_id: Recipient ID

        Returns:
            List of feedback records
        """
        result = await self.session.execute(
            select(FeedbackORM)
            .where(FeedbackORM.to_employee_id == employee_id)
            .order_by(*_NEWEST_FIRST)
        )
        return list(result.unique().scalars().all())

    async def list_given(self, employee_id: int) -> list[FeedbackORM]:
        """List feedback written by an employee, newest first.

        Args:
            employee_id: Sender ID

        Returns:
            List of feedback records
        """
        result = await self.session.execute(
            select(FeedbackORM)
            .where(FeedbackORM.from_employee_id == employee_id)
            .order_by(*_NEWEST_FIRST)
        )
        return list(result.unique().scalars().all())
