"""Secure logging helpers that keep personal data out of production logs."""

import logging
import re
from functools import lru_cache

from hr_api.config import get_settings

_JWT_PATTERN = re.compile(r"eyJ[a-zA-Z0-9_\-]+\.[a-zA-Z0-9_\-]+\.[a-zA-Z0-9_\-]+")
_URL_PATTERN = re.compile(r"(postgresql|postgres|sqlite|http|https)(\+\w+)?://[^\s]+")
_EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+")
_LONG_TOKEN_PATTERN = re.compile(r"[a-zA-Z0-9_\-]{32,}")

MAX_MESSAGE_LENGTH = 200


@lru_cache(maxsize=1)
def is_debug_mode() -> bool:
    """Check if application is running in debug mode."""
    return get_settings().debug


def sanitize_exception_message(error: Exception) -> str:
    """Strip tokens, connection strings and email addresses from an error message.

    Args:
        error: The exception to sanitize

    Returns:
        Sanitized error message suitable for production logs
    """
    error_msg = str(error)

    # Order matters: JWTs would otherwise be split by the generic token rule
    error_msg = _JWT_PATTERN.sub("[JWT]", error_msg)
    error_msg = _URL_PATTERN.sub("[URL]", error_msg)
    error_msg = _EMAIL_PATTERN.sub("[EMAIL]", error_msg)
    error_msg = _LONG_TOKEN_PATTERN.sub("[TOKEN]", error_msg)

    if len(error_msg) > MAX_MESSAGE_LENGTH:
        error_msg = error_msg[: MAX_MESSAGE_LENGTH - 3] + "..."

    return error_msg


def log_error(
    logger: logging.Logger,
    message: str,
    error: Exception | None = None,
) -> None:
    """Log an error with a detail level that depends on debug mode.

    In debug mode the full exception and traceback are logged. Otherwise only
    the sanitized exception message is.

    Args:
        logger: The logger instance to use
        message: The log message (should be generic, no personal data)
        error: Optional exception to include
    """
    if error is None:
        logger.error(message)
    elif is_debug_mode():
        logger.error("%s: %s", message, error, exc_info=error)
    else:
        logger.error("%s: %s", message, sanitize_exception_message(error))
