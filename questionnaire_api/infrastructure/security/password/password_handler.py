"""
Password Handler
================
Password hashing and verification backed by passlib.
"""

import logging

from passlib.context import CryptContext

logger = logging.getLogger(__name__)


class PasswordHandler:
    """
    Handles password hashing and verification using passlib.
    Allows configuration of hashing schemes.
    """

    def __init__(self, schemes: list[str] | None = None, deprecated: str = "auto"):
        """
        Initialize the PasswordHandler with specified schemes.

        Args:
            schemes: List of hashing schemes (e.g., ["bcrypt"]). Defaults to bcrypt.
            deprecated: Handling of deprecated hashes ("auto", "warn", "error").
        """
        self.schemes = schemes or ["bcrypt"]
        self.context = CryptContext(schemes=self.schemes, deprecated=deprecated)
        logger.debug(f"PasswordHandler initialized with schemes: {self.schemes}")

    def get_password_hash(self, password: str) -> str:
        """Hashes a plain text password."""
        return self.context.hash(password)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verifies a plain text password against a hashed password.

        Returns:
            True if the password matches, False otherwise (including unparseable hashes).
        """
        try:
            return self.context.verify(plain_password, hashed_password)
        except ValueError as e:
            logger.warning(f"Password verification encountered an issue: {e}")
            return False
