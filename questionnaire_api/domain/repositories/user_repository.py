"""
User Repository domain interface.

This module defines the repository interface for User entities in the domain layer,
following the Repository pattern to abstract data access operations.
"""

from abc import ABC, abstractmethod

from questionnaire_api.domain.entities.user import User


class UserRepository(ABC):
    """
    Repository interface for User entities in the domain layer.

    This abstract class defines the contract that any concrete repository
    implementation must follow for User data access operations.
    """

    @abstractmethod
    async def get_by_id(self, user_id: int) -> User | None:
        """
        Retrieve a user by their unique ID.

        Args:
            user_id: The id of the user to retrieve

        Returns:
            The User entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> User | None:
        """
        Retrieve a user by their username.

        Args:
            username: The username of the user to retrieve

        Returns:
            The User entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Create a new user record.

        Args:
            user: The User entity to create

        Returns:
            The created User entity with any generated fields populated

        Raises:
            DuplicateEntityError: If a user with the same username or email already exists
        """
        pass
