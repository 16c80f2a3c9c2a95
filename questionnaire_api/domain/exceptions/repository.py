"""
Repository-related exceptions.

Raised by repository implementations so that callers never depend on the
persistence library's own exception types.
"""

from questionnaire_api.domain.exceptions.base_exceptions import BaseApplicationError


class RepositoryError(BaseApplicationError):
    """Base class for persistence failures."""

    def __init__(self, message: str = "Repository operation failed") -> None:
        super().__init__(message)


class EntityNotFoundError(RepositoryError):
    """Raised when a referenced entity does not exist."""

    def __init__(self, entity: str, entity_id: object) -> None:
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class DuplicateEntityError(RepositoryError):
    """Raised when a uniqueness constraint would be violated."""

    def __init__(self, message: str = "Entity already exists") -> None:
        super().__init__(message)


class StoreUnavailableError(RepositoryError):
    """Raised when the backing store cannot be reached."""

    def __init__(self, message: str = "Data store unavailable") -> None:
        super().__init__(message)
