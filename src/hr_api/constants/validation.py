"""Centralized validation constants for the HR API.

This module provides a single source of truth for field limits, display
placeholders and bounds used across models, DTOs and services.
"""

from typing import Final

# =============================================================================
# Employee Constants
# =============================================================================

NAME_MAX_LENGTH: Final[int] = 100
EMAIL_MAX_LENGTH: Final[int] = 255
PHONE_MAX_LENGTH: Final[int] = 20
ORG_FIELD_MAX_LENGTH: Final[int] = 100  # department, team, position
BIO_MAX_LENGTH: Final[int] = 500
DESCRIPTION_MAX_LENGTH: Final[int] = 1000
PICTURE_URL_MAX_LENGTH: Final[int] = 255
ADDRESS_MAX_LENGTH: Final[int] = 500
EMERGENCY_CONTACT_MAX_LENGTH: Final[int] = 100

PASSWORD_MIN_LENGTH: Final[int] = 6
PASSWORD_MAX_LENGTH: Final[int] = 72
# bcrypt only accepts this many bytes of input
PASSWORD_MAX_BYTES: Final[int] = 72

# Shown in the directory when an organisational field is empty
NOT_ASSIGNED: Final[str] = "Not Assigned"

# =============================================================================
# Absence Constants
# =============================================================================

ABSENCE_REASON_MIN_LENGTH: Final[int] = 10
ABSENCE_REASON_MAX_LENGTH: Final[int] = 500
APPROVAL_NOTES_MAX_LENGTH: Final[int] = 500

# =============================================================================
# Feedback Constants
# =============================================================================

FEEDBACK_CONTENT_MAX_LENGTH: Final[int] = 1000
FEEDBACK_RATING_MIN: Final[int] = 1
FEEDBACK_RATING_MAX: Final[int] = 10
FEEDBACK_RATING_DEFAULT: Final[int] = 5

# Replaces the sender name of anonymous feedback at display time
ANONYMOUS_SENDER_NAME: Final[str] = "Anonymous"
