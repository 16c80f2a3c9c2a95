"""
Base exception classes for the application.

This module defines base exception classes that are extended by other
exception classes in the application.
"""


class BaseApplicationError(Exception):
    """Base class for all application exceptions."""

    def __init__(self, message: str = "An application error occurred") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationError(BaseApplicationError):
    """Error raised when validation fails."""

    def __init__(self, message: str = "Validation failed") -> None:
        super().__init__(message)


class AuthenticationError(BaseApplicationError):
    """Error raised when authentication fails."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message)


class InvalidCredentialsError(AuthenticationError):
    """Error raised when a username/password pair does not match."""

    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(message)


class ConfigurationError(BaseApplicationError):
    """Error raised when configuration is invalid."""

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(message)


class MalformedTemplateError(ValidationError):
    """Error raised when an endpoint URL template cannot be compiled."""

    def __init__(self, template: str, reason: str) -> None:
        super().__init__(f"Malformed URL template {template!r}: {reason}")
        self.template = template
        self.reason = reason
