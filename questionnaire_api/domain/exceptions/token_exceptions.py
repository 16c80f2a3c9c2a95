"""
Exception classes related to authentication tokens.

This module defines exceptions raised during token validation and generation.
"""

from questionnaire_api.domain.exceptions.base_exceptions import AuthenticationError


class TokenException(AuthenticationError):
    """Base class for token-related exceptions."""

    def __init__(self, message: str = "Authentication error") -> None:
        super().__init__(message)


class InvalidTokenException(TokenException):
    """Raised when a token is invalid."""

    def __init__(self, message: str = "Invalid or malformed token") -> None:
        super().__init__(message)


class TokenExpiredException(TokenException):
    """Raised when a token has expired."""

    def __init__(self, message: str = "Authentication token has expired") -> None:
        super().__init__(message)
