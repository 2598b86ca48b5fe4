"""Password hashing utilities."""

import bcrypt

from hr_api.config import get_settings


class PasswordService:
    """Service for password hashing and verification."""

    def __init__(self, rounds: int | None = None) -> None:
        """Initialize with a bcrypt cost factor.

        Args:
            rounds: bcrypt log rounds; defaults to the configured value
        """
        self.rounds = rounds if rounds is not None else get_settings().bcrypt_rounds

    def hash_password(self, password: str) -> str:
        """Hash a password using bcrypt.

        Args:
            password: Plain text password

        Returns:
            Hashed password string
        """
        salt = bcrypt.gensalt(rounds=self.rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def verify_password(self, password: str, hashed: str) -> bool:
        """Verify a password against a hash.

        Args:
            password: Plain text password
            hashed: Hashed password

        Returns:
            True if password matches
        """
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
        except (ValueError, UnicodeDecodeError, UnicodeEncodeError):
            # Invalid hash format or encoding issues
            return False
