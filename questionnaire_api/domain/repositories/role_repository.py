"""
Role Repository domain interface.
"""

from abc import ABC, abstractmethod

from questionnaire_api.domain.entities.rbac import Role


class RoleRepository(ABC):
    """Repository interface for Role records."""

    @abstractmethod
    async def get_by_id(self, role_id: int) -> Role | None:
        pass

    @abstractmethod
    async def get_by_name(self, role_name: str) -> Role | None:
        pass

    @abstractmethod
    async def list_roles(self) -> list[Role]:
        pass

    @abstractmethod
    async def create(self, role_name: str, description: str | None = None) -> Role:
        """
        Create a role.

        Raises:
            DuplicateEntityError: If a role with the same name exists
        """
        pass
