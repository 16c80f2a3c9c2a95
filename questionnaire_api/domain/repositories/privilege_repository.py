"""
Privilege Repository domain interface.

Per (role, endpoint) grant rows consulted by the permission resolver.
"""

from abc import ABC, abstractmethod

from questionnaire_api.domain.entities.rbac import Privilege


class PrivilegeRepository(ABC):
    """Repository interface for role privilege rows."""

    @abstractmethod
    async def get_privilege(self, role_id: int, endpoint_id: int) -> Privilege | None:
        """
        Fetch the privilege row for a (role, endpoint) pair.

        Returns:
            The Privilege if a row exists, None otherwise. A missing row is an
            expected outcome, not an error.

        Raises:
            StoreUnavailableError: If the backing store cannot be reached
        """
        pass

    @abstractmethod
    async def upsert_privilege(self, privilege: Privilege) -> Privilege:
        """
        Create the row for ``(privilege.role_id, privilege.endpoint_id)`` or
        overwrite all four grants of the existing one.

        The operation is atomic: concurrent upserts for the same key leave
        exactly one row holding one caller's complete set of grants.
        """
        pass

    @abstractmethod
    async def list_privileges(self, role_id: int | None = None) -> list[Privilege]:
        pass
