"""Tests for peer feedback rules."""

import pytest

from hr_api.models.domain.enums import EmployeeRole, FeedbackType
from hr_api.models.dto.feedback import FeedbackCreate


@pytest.fixture
async def people(create_employee):
    """Two co-workers and a manager."""
    alice = await create_employee(first_name="Alice", last_name="Meyer")
    bob = await create_employee(first_name="Bob", last_name="Hart")
    manager = await create_employee(first_name="Mona", last_name="Klein", role=EmployeeRole.MANAGER)
    return alice, bob, manager


@pytest.fixture
def service(session):
    from hr_api.services.feedback_service import FeedbackService

    return FeedbackService(session)


class TestCreate:
    """Tests for writing feedback."""

    async def test_create_returns_detail(self, service, people) -> None:
        """Created feedback names both sides and keeps the defaults."""
        alice, bob, _ = people

        detail = await service.create(
            alice.id, FeedbackCreate(to_employee_id=bob.id, content="Great code reviews")
        )

        assert detail.from_employee_id == alice.id
        assert detail.from_employee_name == "Alice Meyer"
        assert detail.to_employee_name == "Bob Hart"
        assert detail.type == FeedbackType.GENERAL
        assert detail.rating == 5
        assert detail.is_polished is False
        assert detail.polished_content is None

    async def test_self_feedback_is_unauthorized(self, service, people) -> None:
        """Nobody writes feedback for themselves."""
        from hr_api.exceptions import UnauthorizedError

        alice, _, _ = people

        with pytest.raises(UnauthorizedError):
            await service.create(
                alice.id, FeedbackCreate(to_employee_id=alice.id, content="I am great")
            )

    async def test_missing_recipient_is_not_found(self, service, people) -> None:
        """The recipient is checked before the permission rule."""
        from hr_api.exceptions import EmployeeNotFoundError

        alice, _, _ = people

        with pytest.raises(EmployeeNotFoundError):
            await service.create(alice.id, FeedbackCreate(to_employee_id=999, content="Hello"))

    @pytest.mark.parametrize("rating", [0, 11])
    def test_rating_out_of_range(self, rating) -> None:
        """Ratings are limited to 1..10."""
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            FeedbackCreate(to_employee_id=2, content="Fine", rating=rating)


class TestAnonymity:
    """Tests for masking anonymous senders."""

    async def test_received_masks_anonymous_sender(self, service, people) -> None:
        """Recipients see "Anonymous" instead of the sender's name."""
        alice, bob, _ = people
        await service.create(
            alice.id,
            FeedbackCreate(to_employee_id=bob.id, content="Speak up more", is_anonymous=True),
        )

        received = await service.get_received(bob.id, bob.id)

        assert received[0].from_employee_name == "Anonymous"
        assert received[0].is_anonymous is True

    async def test_manager_does_not_unmask(self, service, people) -> None:
        """Managers see the mask too."""
        alice, bob, manager = people
        created = await service.create(
            alice.id,
            FeedbackCreate(to_employee_id=bob.id, content="Speak up more", is_anonymous=True),
        )

        detail = await service.get_by_id(created.id, manager.id)

        assert detail.from_employee_id is None
        assert detail.from_employee_name == "Anonymous"

    async def test_sender_sees_own_name(self, service, people) -> None:
        """The author keeps seeing their own identity."""
        alice, bob, _ = people
        created = await service.create(
            alice.id,
            FeedbackCreate(to_employee_id=bob.id, content="Speak up more", is_anonymous=True),
        )

        detail = await service.get_by_id(created.id, alice.id)
        given = await service.get_given(alice.id, alice.id)

        assert detail.from_employee_id == alice.id
        assert given[0].from_employee_name == "Alice Meyer"

    async def test_named_feedback_shows_sender(self, service, people) -> None:
        """Non-anonymous feedback is attributed."""
        alice, bob, _ = people
        created = await service.create(
            alice.id, FeedbackCreate(to_employee_id=bob.id, content="Thanks for the help")
        )

        detail = await service.get_by_id(created.id, bob.id)

        assert detail.from_employee_id == alice.id
        assert detail.from_employee_name == "Alice Meyer"


class TestVisibility:
    """Tests for who can list and read feedback."""

    async def test_received_newest_first(self, service, people) -> None:
        """Received feedback is listed most recent first."""
        alice, bob, manager = people
        first = await service.create(alice.id, FeedbackCreate(to_employee_id=bob.id, content="One"))
        second = await service.create(
            manager.id, FeedbackCreate(to_employee_id=bob.id, content="Two")
        )

        received = await service.get_received(bob.id, bob.id)

        assert [f.id for f in received] == [second.id, first.id]

    async def test_colleague_cannot_list_received(self, service, people) -> None:
        """Feedback received by someone else is private to them and managers."""
        from hr_api.exceptions import UnauthorizedError

        alice, bob, manager = people
        await service.create(alice.id, FeedbackCreate(to_employee_id=bob.id, content="One"))

        with pytest.raises(UnauthorizedError):
            await service.get_received(bob.id, alice.id)
        assert len(await service.get_received(bob.id, manager.id)) == 1

    async def test_given_is_self_only(self, service, people) -> None:
        """Only the author lists their given feedback, managers included."""
        from hr_api.exceptions import UnauthorizedError

        alice, bob, manager = people
        await service.create(alice.id, FeedbackCreate(to_employee_id=bob.id, content="One"))

        assert len(await service.get_given(alice.id, alice.id)) == 1
        with pytest.raises(UnauthorizedError):
            await service.get_given(alice.id, manager.id)

    async def test_get_by_id_access(self, service, people, create_employee) -> None:
        """Sender, recipient and managers read a record, others do not."""
        from hr_api.exceptions import FeedbackNotFoundError, UnauthorizedError

        alice, bob, manager = people
        outsider = await create_employee(first_name="Olga")
        created = await service.create(
            alice.id, FeedbackCreate(to_employee_id=bob.id, content="One")
        )

        for viewer in (alice, bob, manager):
            assert (await service.get_by_id(created.id, viewer.id)).id == created.id
        with pytest.raises(UnauthorizedError):
            await service.get_by_id(created.id, outsider.id)
        with pytest.raises(FeedbackNotFoundError):
            await service.get_by_id(999, alice.id)

    async def test_permission_checks(self, service, people) -> None:
        """The boolean checks mirror the rules without raising."""
        alice, bob, manager = people

        assert await service.can_view(bob.id, bob.id)
        assert await service.can_view(bob.id, manager.id)
        assert not await service.can_view(bob.id, alice.id)
        assert await service.can_give(bob.id, alice.id)
        assert not await service.can_give(alice.id, alice.id)
        assert not await service.can_give(999, alice.id)
