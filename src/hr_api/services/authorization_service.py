"""Authorization policy.

The rules are plain predicates over ``(actor_id, actor_role, target_id)``.
``AuthorizationService`` resolves the actor's role from the employee store
and pairs every ``can_*`` check with a ``require_*`` variant that raises.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from hr_api.exceptions import UnauthorizedError
from hr_api.models.domain.enums import EmployeeRole
from hr_api.repositories.employee_repository import EmployeeRepository

logger = logging.getLogger(__name__)

# Roles allowed to approve absences and see every profile
MANAGER_ROLES: frozenset[EmployeeRole] = frozenset({EmployeeRole.MANAGER, EmployeeRole.ADMIN})


def is_manager(role: EmployeeRole | None) -> bool:
    """Check whether a role carries manager privileges."""
    return role in MANAGER_ROLES


def _self_or_manager(actor_id: int, actor_role: EmployeeRole | None, target_id: int) -> bool:
    return actor_id == target_id or is_manager(actor_role)


def can_view_profile(actor_id: int, actor_role: EmployeeRole | None, target_id: int) -> bool:
    """Employees see their own full profile, managers see everyone's."""
    return _self_or_manager(actor_id, actor_role, target_id)


def can_edit_profile(actor_id: int, actor_role: EmployeeRole | None, target_id: int) -> bool:
    """Employees edit their own profile, managers edit anyone's."""
    return _self_or_manager(actor_id, actor_role, target_id)


def can_view_absence_requests(
    actor_id: int, actor_role: EmployeeRole | None, target_id: int
) -> bool:
    """Employees see their own absences, managers see everyone's."""
    return _self_or_manager(actor_id, actor_role, target_id)


def can_approve_absence_requests(actor_role: EmployeeRole | None) -> bool:
    """Only managers approve or decline absence requests."""
    return is_manager(actor_role)


def can_view_feedback(actor_id: int, actor_role: EmployeeRole | None, target_id: int) -> bool:
    """Employees see feedback they received, managers see anyone's."""
    return _self_or_manager(actor_id, actor_role, target_id)


class AuthorizationService:
    """Role-aware authorization checks backed by the employee store."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.employee_repo = EmployeeRepository(session)

    async def get_role(self, employee_id: int) -> EmployeeRole | None:
        """Resolve the current role of an employee.

        Args:
            employee_id: Employee ID

        Returns:
            EmployeeRole, or None if the employee does not exist
        """
        role = await self.employee_repo.get_role(employee_id)
        return EmployeeRole(role) if role is not None else None

    async def is_manager(self, employee_id: int) -> bool:
        """Check whether an employee currently has manager privileges."""
        return is_manager(await self.get_role(employee_id))

    async def can_view_profile(self, actor_id: int, target_id: int) -> bool:
        """Check profile visibility for the actor."""
        return can_view_profile(actor_id, await self.get_role(actor_id), target_id)

    async def can_edit_profile(self, actor_id: int, target_id: int) -> bool:
        """Check profile edit rights for the actor."""
        return can_edit_profile(actor_id, await self.get_role(actor_id), target_id)

    async def can_view_absence_requests(self, actor_id: int, target_id: int) -> bool:
        """Check absence visibility for the actor."""
        return can_view_absence_requests(actor_id, await self.get_role(actor_id), target_id)

    async def can_approve_absence_requests(self, actor_id: int) -> bool:
        """Check approval rights for the actor."""
        return can_approve_absence_requests(await self.get_role(actor_id))

    async def can_view_feedback(self, actor_id: int, target_id: int) -> bool:
        """Check feedback visibility for the actor."""
        return can_view_feedback(actor_id, await self.get_role(actor_id), target_id)

    async def can_give_feedback(self, from_id: int, to_id: int) -> bool:
        """Check that feedback goes to someone else and both employees exist.

        Args:
            from_id: Sender ID
            to_id: Recipient ID

        Returns:
            True if the feedback may be written
        """
        if from_id == to_id:
            return False
        return await self.employee_repo.exists(from_id) and await self.employee_repo.exists(to_id)

    async def require_manager(self, actor_id: int) -> None:
        """Raise UnauthorizedError unless the actor is a manager."""
        if not await self.is_manager(actor_id):
            self._deny("manager action", actor_id)

    async def require_view_profile(self, actor_id: int, target_id: int) -> None:
        """Raise UnauthorizedError unless the actor may view the profile."""
        if not await self.can_view_profile(actor_id, target_id):
            self._deny("view profile", actor_id, target_id)

    async def require_edit_profile(self, actor_id: int, target_id: int) -> None:
        """Raise UnauthorizedError unless the actor may edit the profile."""
        if not await self.can_edit_profile(actor_id, target_id):
            self._deny("edit profile", actor_id, target_id)

    async def require_view_absence_requests(self, actor_id: int, target_id: int) -> None:
        """Raise UnauthorizedError unless the actor may view the absences."""
        if not await self.can_view_absence_requests(actor_id, target_id):
            self._deny("view absence requests", actor_id, target_id)

    async def require_approve_absence_requests(self, actor_id: int) -> None:
        """Raise UnauthorizedError unless the actor may approve absences."""
        if not await self.can_approve_absence_requests(actor_id):
            self._deny("approve absence requests", actor_id)

    async def require_view_feedback(self, actor_id: int, target_id: int) -> None:
        """Raise UnauthorizedError unless the actor may view the feedback."""
        if not await self.can_view_feedback(actor_id, target_id):
            self._deny("view feedback", actor_id, target_id)

    async def require_give_feedback(self, from_id: int, to_id: int) -> None:
        """Raise UnauthorizedError unless the feedback may be written."""
        if not await self.can_give_feedback(from_id, to_id):
            self._deny("give feedback", from_id, to_id)

    @staticmethod
    def _deny(action: str, actor_id: int, target_id: int | None = None) -> None:
        logger.warning(
            "Denied %s: actor=%s target=%s", action, actor_id, target_id
        )
        raise UnauthorizedError()
