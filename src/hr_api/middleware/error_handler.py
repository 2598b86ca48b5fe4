"""Global error handling to map domain errors and prevent information disclosure."""

import logging
from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from hr_api.config import get_settings
from hr_api.exceptions import (
    AuthenticationError,
    BusinessRuleError,
    ConflictError,
    HrAPIError,
    NotFoundError,
    UnauthorizedError,
)
from hr_api.utils.secure_logging import log_error

logger = logging.getLogger(__name__)

# Safe error messages that can be shown to users
SAFE_ERROR_MESSAGES = {
    400: "Invalid request",
    401: "Authentication required",
    403: "Access denied",
    404: "Resource not found",
    405: "Method not allowed",
    409: "Conflict with existing resource",
    429: "Too many requests",
    500: "Internal server error",
}

# Most specific class first
DOMAIN_STATUS_CODES: list[tuple[type[HrAPIError], int]] = [
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (UnauthorizedError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (BusinessRuleError, status.HTTP_400_BAD_REQUEST),
]


def _get_cors_headers(request: Request) -> dict[str, str]:
    """Get CORS headers for error responses.

    Exception handlers run outside the CORS middleware, so allowed origins
    have to be echoed here.

    Args:
        request: The incoming request

    Returns:
        Dict of CORS headers to add to the response
    """
    origin = request.headers.get("origin")
    if not origin:
        return {}

    if origin in get_settings().cors_origins_list:
        return {
            "Access-Control-Allow-Origin": origin,
            "Access-Control-Allow-Credentials": "true",
        }

    return {}


def status_for(exc: HrAPIError) -> int:
    """Get the HTTP status code for a domain exception.

    Args:
        exc: Domain exception

    Returns:
        HTTP status code, 500 for unmapped subclasses
    """
    for exc_type, code in DOMAIN_STATUS_CODES:
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _field_errors(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """Reduce pydantic errors to field name and message."""
    safe_errors = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        safe_errors.append(
            {
                "field": ".".join(loc) or "request",
                "message": str(error.get("msg", "Invalid value")),
            }
        )
    return safe_errors


async def hr_api_exception_handler(request: Request, exc: HrAPIError) -> JSONResponse:
    """Translate domain exceptions into HTTP responses.

    Business-rule messages are written for end users and pass through
    unchanged.

    Args:
        request: FastAPI request
        exc: Domain exception

    Returns:
        JSONResponse with the exception message
    """
    status_code = status_for(exc)
    content: dict[str, Any] = {"detail": exc.message}

    if status_code >= 500:
        log_error(logger, f"Unmapped domain error for {request.url.path}", exc)
        content = {"detail": SAFE_ERROR_MESSAGES[500]}

    headers = _get_cors_headers(request)
    if isinstance(exc, AuthenticationError):
        headers["WWW-Authenticate"] = "Bearer"

    return JSONResponse(status_code=status_code, content=content, headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle framework HTTP exceptions such as 404 for unknown routes.

    Args:
        request: FastAPI request
        exc: HTTP exception

    Returns:
        JSONResponse with a generic message for the status
    """
    settings = get_settings()
    detail = exc.detail if settings.debug else SAFE_ERROR_MESSAGES.get(exc.status_code, "Request failed")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": detail},
        headers=_get_cors_headers(request),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation errors as 400 with field-level messages.

    Args:
        request: FastAPI request
        exc: Validation exception

    Returns:
        JSONResponse listing the offending fields
    """
    errors = _field_errors(list(exc.errors()))
    logger.warning("Validation error for %s: %s", request.url.path, errors)

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Validation failed.", "errors": errors},
        headers=_get_cors_headers(request),
    )


async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Handle SQLAlchemy exceptions without leaking database details.

    Args:
        request: FastAPI request
        exc: SQLAlchemy exception

    Returns:
        JSONResponse with safe error
    """
    settings = get_settings()
    cors_headers = _get_cors_headers(request)

    log_error(logger, f"Database error for {request.url.path}", exc)

    # Integrity errors (duplicates, foreign key violations)
    if isinstance(exc, IntegrityError):
        message = str(exc).lower()
        if "unique" in message or "duplicate" in message:
            return JSONResponse(
                status_code=status.HTTP_409_CONFLICT,
                content={"detail": "Resource already exists"},
                headers=cors_headers,
            )
        if "foreign key" in message:
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"detail": "Referenced resource not found"},
                headers=cors_headers,
            )

    if settings.debug:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "Database error",
                "type": type(exc).__name__,
            },
            headers=cors_headers,
        )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database error occurred"},
        headers=cors_headers,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions without leaking information.

    Args:
        request: FastAPI request
        exc: Unexpected exception

    Returns:
        JSONResponse with generic error
    """
    settings = get_settings()
    cors_headers = _get_cors_headers(request)

    logger.error("Unhandled exception for %s", request.url.path, exc_info=exc)

    if settings.debug:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": str(exc),
                "type": type(exc).__name__,
            },
            headers=cors_headers,
        )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": SAFE_ERROR_MESSAGES[500]},
        headers=cors_headers,
    )
