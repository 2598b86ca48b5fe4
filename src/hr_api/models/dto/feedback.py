"""Feedback DTOs."""

from datetime import datetime

from pydantic import BaseModel, Field

from hr_api.constants.validation import (
    FEEDBACK_CONTENT_MAX_LENGTH,
    FEEDBACK_RATING_DEFAULT,
    FEEDBACK_RATING_MAX,
    FEEDBACK_RATING_MIN,
)
from hr_api.models.domain.enums import FeedbackType


class FeedbackCreate(BaseModel):
    """Feedback create DTO."""

    to_employee_id: int
    content: str = Field(min_length=1, max_length=FEEDBACK_CONTENT_MAX_LENGTH)
    type: FeedbackType = FeedbackType.GENERAL
    rating: int = Field(
        default=FEEDBACK_RATING_DEFAULT,
        ge=FEEDBACK_RATING_MIN,
        le=FEEDBACK_RATING_MAX,
    )
    is_anonymous: bool = False


class FeedbackListItem(BaseModel):
    """Feedback entry in a received or given listing.

    ``from_employee_name`` is "Anonymous" in received listings when the
    sender asked to stay anonymous.
    """

    id: int
    from_employee_name: str
    to_employee_name: str
    content: str
    polished_content: str | None = None
    type: FeedbackType
    rating: int
    is_anonymous: bool
    is_polished: bool
    created_at: datetime
    updated_at: datetime


class FeedbackDetail(BaseModel):
    """Single feedback record.

    ``from_employee_id`` is withheld for anonymous feedback unless the
    viewer wrote it.
    """

    id: int
    from_employee_id: int | None = None
    from_employee_name: str
    to_employee_id: int
    to_employee_name: str
    content: str
    polished_content: str | None = None
    type: FeedbackType
    rating: int
    is_anonymous: bool
    is_polished: bool
    created_at: datetime
    updated_at: datetime
