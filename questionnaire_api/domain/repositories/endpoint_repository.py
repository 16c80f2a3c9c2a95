"""
Endpoint Repository domain interface.

Read access to the declared endpoint catalogue plus the administrative
registration used by the endpoints API.
"""

from abc import ABC, abstractmethod

from questionnaire_api.domain.entities.rbac import Endpoint


class EndpointRepository(ABC):
    """
    Repository interface for Endpoint records.

    Implementations must return endpoints in declaration order, i.e. ascending
    ``endpoint_id``, because the first matching endpoint wins.
    """

    @abstractmethod
    async def list_endpoints(self) -> list[Endpoint]:
        """
        Return all declared endpoints in declaration order.

        Raises:
            StoreUnavailableError: If the backing store cannot be reached
        """
        pass

    @abstractmethod
    async def get_by_id(self, endpoint_id: int) -> Endpoint | None:
        pass

    @abstractmethod
    async def create(self, url: str, method: str, description: str | None = None) -> Endpoint:
        """
        Register a new endpoint.

        Args:
            url: URL template
            method: Uppercase HTTP method
            description: Free-form description

        Returns:
            The created Endpoint with its assigned id

        Raises:
            DuplicateEntityError: If (url, method) is already declared
        """
        pass
