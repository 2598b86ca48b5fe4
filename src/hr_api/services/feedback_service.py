"""Feedback service."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from hr_api.constants.validation import ANONYMOUS_SENDER_NAME
from hr_api.exceptions import EmployeeNotFoundError, FeedbackNotFoundError, UnauthorizedError
from hr_api.models.dto.feedback import FeedbackCreate, FeedbackDetail, FeedbackListItem
from hr_api.models.orm.feedback import FeedbackORM
from hr_api.repositories.employee_repository import EmployeeRepository
from hr_api.repositories.feedback_repository import FeedbackRepository
from hr_api.services.authorization_service import AuthorizationService

logger = logging.getLogger(__name__)


def _sender_hidden(feedback: FeedbackORM, viewer_id: int) -> bool:
    """Anonymous feedback hides its sender from everyone but the sender."""
    return feedback.is_anonymous and feedback.from_employee_id != viewer_id


def _to_list_item(feedback: FeedbackORM, viewer_id: int) -> FeedbackListItem:
    hidden = _sender_hidden(feedback, viewer_id)
    return FeedbackListItem(
        id=feedback.id,
        from_employee_name=ANONYMOUS_SENDER_NAME if hidden else feedback.from_employee.full_name,
        to_employee_name=feedback.to_employee.full_name,
        content=feedback.content,
        polished_content=feedback.polished_content,
        type=feedback.type,
        rating=feedback.rating,
        is_anonymous=feedback.is_anonymous,
        is_polished=feedback.is_polished,
        created_at=feedback.created_at,
        updated_at=feedback.updated_at,
    )


def _to_detail(feedback: FeedbackORM, viewer_id: int) -> FeedbackDetail:
    hidden = _sender_hidden(feedback, viewer_id)
    return FeedbackDetail(
        id=feedback.id,
        from_employee_id=None if hidden else feedback.from_employee_id,
        from_employee_name=ANONYMOUS_SENDER_NAME if hidden else feedback.from_employee.full_name,
        to_employee_id=feedback.to_employee_id,
        to_employee_name=feedback.to_employee.full_name,
        content=feedback.content,
        polished_content=feedback.polished_content,
        type=feedback.type,
        rating=feedback.rating,
        is_anonymous=feedback.is_anonymous,
        is_polished=feedback.is_polished,
        created_at=feedback.created_at,
        updated_at=feedback.updated_at,
    )


class FeedbackService:
    """Service for peer feedback."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.feedback_repo = FeedbackRepository(session)
        self.employee_repo = EmployeeRepository(session)
        self.authz = AuthorizationService(session)

    async def get_received(self, employee_id: int, requesting_id: int) -> list[FeedbackListItem]:
        """List feedback an employee received.

        Args:
            employee_id: Recipient
            requesting_id: Caller

        Returns:
            Feedback, newest first, with anonymous senders masked

        Raises:
            UnauthorizedError: If the caller may not view the recipient's feedback
        """
        await self.authz.require_view_feedback(requesting_id, employee_id)
        feedback = await self.feedback_repo.list_received(employee_id)
        return [_to_list_item(f, requesting_id) for f in feedback]

    async def get_given(self, employee_id: int, requesting_id: int) -> list[FeedbackListItem]:
        """List feedback an employee wrote. Only the author may see this list.

        Args:
            employee_id: Sender
            requesting_id: Caller

        Returns:
            Feedback, newest first

        Raises:
            UnauthorizedError: If the caller is not the sender
        """
        if employee_id != requesting_id:
            logger.warning(
                "Denied given feedback listing: actor=%s target=%s", requesting_id, employee_id
            )
            raise UnauthorizedError()
        feedback = await self.feedback_repo.list_given(employee_id)
        return [_to_list_item(f, requesting_id) for f in feedback]

    async def create(self, from_id: int, data: FeedbackCreate) -> FeedbackDetail:
        """Write feedback for a co-worker.

        Args:
            from_id: Sender
            data: Feedback content

        Returns:
            Created FeedbackDetail

        Raises:
            EmployeeNotFoundError: If the recipient does not exist
            UnauthorizedError: If the sender targets themselves
        """
        if not await self.employee_repo.exists(data.to_employee_id):
            raise EmployeeNotFoundError(data.to_employee_id, "Recipient employee not found")
        await self.authz.require_give_feedback(from_id, data.to_employee_id)

        feedback = await self.feedback_repo.create(
            from_employee_id=from_id,
            to_employee_id=data.to_employee_id,
            content=data.content,
            type=data.type.value,
            rating=data.rating,
            is_anonymous=data.is_anonymous,
            is_polished=False,
        )
        feedback = await self.feedback_repo.reload(feedback.id)

        logger.info(
            "Feedback %s created by employee %s for employee %s",
            feedback.id,
            from_id,
            data.to_employee_id,
        )
        return _to_detail(feedback, from_id)

    async def get_by_id(self, feedback_id: int, requesting_id: int) -> FeedbackDetail:
        """Get one feedback record.

        Visible to the sender, the recipient and managers.

        Args:
            feedback_id: Feedback ID
            requesting_id: Caller

        Returns:
            FeedbackDetail

        Raises:
            FeedbackNotFoundError: If the record does not exist
            UnauthorizedError: If the caller may not view it
        """
        feedback = await self.feedback_repo.get_by_id(feedback_id)
        if feedback is None:
            raise FeedbackNotFoundError(feedback_id)

        if feedback.from_employee_id != requesting_id:
            await self.authz.require_view_feedback(requesting_id, feedback.to_employee_id)

        return _to_detail(feedback, requesting_id)

    async def can_view(self, employee_id: int, requesting_id: int) -> bool:
        """Check whether the caller may view an employee's received feedback."""
        return await self.authz.can_view_feedback(requesting_id, employee_id)

    async def can_give(self, employee_id: int, requesting_id: int) -> bool:
        """Check whether the caller may write feedback for an employee."""
        return await self.authz.can_give_feedback(requesting_id, employee_id)
