"""Authentication service for employee registration and login."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from hr_api.exceptions import AuthenticationError, EmailAlreadyRegisteredError
from hr_api.models.domain.enums import EmployeeRole
from hr_api.models.dto.auth import AuthResponse, RegisterRequest, UserInfo
from hr_api.models.orm.employee import EmployeeORM
from hr_api.repositories.employee_repository import EmployeeRepository
from hr_api.security.auth import create_access_token, decode_token
from hr_api.security.password import PasswordService

logger = logging.getLogger(__name__)

# Compared against when the email is unknown so both failure paths cost one bcrypt check
_DUMMY_HASH = "$2b$04$C6UzMDM.H6dfI/f/IKxGhu5oZ0tWJ7b1uPpOXEZb4lWDhcp9C6kUi"


class AuthService:
    """Service for registration, login and token validation."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.employee_repo = EmployeeRepository(session)
        self.password_service = PasswordService()

    def _issue(self, employee: EmployeeORM) -> AuthResponse:
        token, expires_at = create_access_token(
            employee.id, employee.email, EmployeeRole(employee.role)
        )
        return AuthResponse(
            token=token,
            expires_at=expires_at,
            user=UserInfo.model_validate(employee),
        )

    async def register(self, data: RegisterRequest) -> AuthResponse:
        """Register a new employee account.

        Args:
            data: Registration data

        Returns:
            AuthResponse with a token for the new employee

        Raises:
            EmailAlreadyRegisteredError: If the email is already in use
        """
        email = data.email.lower()
        if await self.employee_repo.get_by_email(email) is not None:
            raise EmailAlreadyRegisteredError(email)

        try:
            employee = await self.employee_repo.create(
                first_name=data.first_name,
                last_name=data.last_name,
                email=email,
                password_hash=self.password_service.hash_password(data.password),
                role=data.role.value,
                department=data.department,
                team=data.team,
                description=data.description,
            )
        except IntegrityError:
            # A concurrent registration took the email after the check above
            await self.session.rollback()
            if await self.employee_repo.get_by_email(email) is not None:
                raise EmailAlreadyRegisteredError(email) from None
            raise

        logger.info("Registered employee %s with role %s", employee.id, employee.role)
        return self._issue(employee)

    async def login(self, email: str, password: str) -> AuthResponse:
        """Authenticate with email and password.

        Args:
            email: Employee email
            password: Plain text password

        Returns:
            AuthResponse with a fresh token

        Raises:
            AuthenticationError: If the email is unknown or the password is wrong
        """
        employee = await self.employee_repo.get_by_email(email)
        hashed = employee.password_hash if employee is not None else _DUMMY_HASH
        password_ok = self.password_service.verify_password(password, hashed)

        if employee is None or not password_ok:
            logger.warning("Failed login attempt")
            raise AuthenticationError("Invalid email or password")

        logger.info("Employee %s logged in", employee.id)
        return self._issue(employee)

    @staticmethod
    def validate(token: str) -> bool:
        """Check signature, issuer, audience and expiry of a token.

        Args:
            token: JWT token string

        Returns:
            True if the token is currently valid
        """
        try:
            decode_token(token)
        except AuthenticationError:
            return False
        return True
