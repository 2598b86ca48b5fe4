"""Authentication utilities: token issuing and the current-user dependency."""

import uuid
from datetime import UTC, datetime, timedelta
from typing import Annotated, Any

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from hr_api.config import get_settings
from hr_api.exceptions import AuthenticationError
from hr_api.models.domain.current_user import CurrentUser
from hr_api.models.domain.enums import EmployeeRole


def create_access_token(employee_id: int, email: str, role: EmployeeRole) -> tuple[str, datetime]:
    """Create a JWT access token.

    Args:
        employee_id: Employee ID, stored as the subject
        email: Employee email
        role: Employee role at issue time

    Returns:
        Tuple of (JWT token string, expiry time)
    """
    settings = get_settings()
    now = datetime.now(UTC)
    expire = now + timedelta(minutes=settings.jwt_expiration_minutes)

    payload = {
        "sub": str(employee_id),
        "email": email,
        "role": role.value,
        "iat": now,
        "exp": expire,
        "jti": uuid.uuid4().hex,
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience,
    }

    token = jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    return token, expire


def decode_token(token: str) -> dict[str, Any]:
    """Decode and verify a JWT token.

    Checks signature, expiry, issuer and audience.

    Args:
        token: JWT token string

    Returns:
        Token payload

    Raises:
        AuthenticationError: If token is invalid or expired
    """
    settings = get_settings()

    try:
        return jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
        )
    except JWTError as e:
        raise AuthenticationError("Invalid or expired token") from e


def claims_to_user(payload: dict[str, Any]) -> CurrentUser:
    """Build the caller context from verified claims.

    Args:
        payload: Decoded token payload

    Returns:
        CurrentUser

    Raises:
        AuthenticationError: If required claims are missing or malformed
    """
    try:
        return CurrentUser(
            id=int(payload["sub"]),
            email=payload["email"],
            role=EmployeeRole(payload["role"]),
            token_id=payload.get("jti"),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise AuthenticationError("Invalid or expired token") from e


async def get_current_user(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(HTTPBearer(auto_error=False))
    ] = None,
) -> CurrentUser:
    """Get the current authenticated caller from the bearer token.

    Args:
        credentials: HTTP Bearer credentials

    Returns:
        CurrentUser built from the verified claims

    Raises:
        AuthenticationError: If authentication fails
    """
    if credentials is None:
        raise AuthenticationError("Authentication required")

    return claims_to_user(decode_token(credentials.credentials))
