"""Domain exceptions."""

from questionnaire_api.domain.exceptions.base_exceptions import (
    AuthenticationError,
    BaseApplicationError,
    ConfigurationError,
    InvalidCredentialsError,
    MalformedTemplateError,
    ValidationError,
)
from questionnaire_api.domain.exceptions.repository import (
    DuplicateEntityError,
    EntityNotFoundError,
    RepositoryError,
    StoreUnavailableError,
)
from questionnaire_api.domain.exceptions.token_exceptions import (
    InvalidTokenException,
    TokenException,
    TokenExpiredException,
)

__all__ = [
    "AuthenticationError",
    "BaseApplicationError",
    "ConfigurationError",
    "DuplicateEntityError",
    "EntityNotFoundError",
    "InvalidCredentialsError",
    "InvalidTokenException",
    "MalformedTemplateError",
    "RepositoryError",
    "StoreUnavailableError",
    "TokenException",
    "TokenExpiredException",
    "ValidationError",
]
