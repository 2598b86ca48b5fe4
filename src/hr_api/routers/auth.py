"""Authentication router: registration, login and token checks."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status

from hr_api.dependencies import CurrentUserDep, get_auth_service
from hr_api.models.dto.auth import (
    AuthResponse,
    CurrentUserResponse,
    LoginRequest,
    RegisterRequest,
    ValidateTokenRequest,
    ValidateTokenResponse,
)
from hr_api.security.rate_limit import AUTH_LOGIN_LIMIT, AUTH_REGISTER_LIMIT, limiter
from hr_api.services.auth_service import AuthService

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(AUTH_REGISTER_LIMIT)
async def register(
    request: Request,
    body: RegisterRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> AuthResponse:
    """Register a new employee and return a token."""
    return await auth_service.register(body)


@router.post("/login", response_model=AuthResponse)
@limiter.limit(AUTH_LOGIN_LIMIT)
async def login(
    request: Request,
    body: LoginRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> AuthResponse:
    """Authenticate with email and password."""
    return await auth_service.login(body.email, body.password)


@router.post("/validate", response_model=ValidateTokenResponse)
async def validate_token(body: ValidateTokenRequest) -> ValidateTokenResponse:
    """Check whether a token is currently valid."""
    return ValidateTokenResponse(is_valid=AuthService.validate(body.token))


@router.get("/me", response_model=CurrentUserResponse)
async def get_me(current_user: CurrentUserDep) -> CurrentUserResponse:
    """Return the claims of the caller's token."""
    return CurrentUserResponse(
        id=current_user.id,
        email=current_user.email,
        role=current_user.role,
    )
