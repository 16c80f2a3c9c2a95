"""Password hashing."""

from questionnaire_api.infrastructure.security.password.password_handler import PasswordHandler

__all__ = ["PasswordHandler"]
