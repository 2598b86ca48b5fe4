"""Security package."""

from hr_api.security.auth import (
    create_access_token,
    decode_token,
    get_current_user,
)
from hr_api.security.password import PasswordService

__all__ = [
    "PasswordService",
    "create_access_token",
    "decode_token",
    "get_current_user",
]
