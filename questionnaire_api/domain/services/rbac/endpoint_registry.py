"""
Endpoint registry.

Caches a RouteTable built from the endpoint repository. The snapshot is
rebuilt lazily after ``invalidate()`` and once it is older than the configured
TTL, which is how registrations made by other worker processes become visible.
"""

import asyncio
import logging
import time
from collections.abc import Callable

from questionnaire_api.domain.entities.rbac import Endpoint
from questionnaire_api.domain.repositories.endpoint_repository import EndpointRepository
from questionnaire_api.domain.services.rbac.route_table import RouteTable

logger = logging.getLogger(__name__)


class EndpointRegistry:
    """Serves endpoint lookups from a cached, precompiled route table."""

    def __init__(
        self,
        repository: EndpointRepository,
        ttl_seconds: float = 30.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._repository = repository
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._table: RouteTable | None = None
        self._built_at = 0.0
        self._stale = True
        self._lock = asyncio.Lock()

    def invalidate(self) -> None:
        """Mark the snapshot stale so the next lookup rebuilds it."""
        self._stale = True

    def _needs_rebuild(self) -> bool:
        if self._table is None or self._stale:
            return True
        if self._ttl_seconds > 0:
            return self._clock() - self._built_at >= self._ttl_seconds
        return False

    async def get_route_table(self) -> RouteTable:
        """
        Return the current snapshot, rebuilding it first when needed.

        Raises:
            StoreUnavailableError: If the repository cannot be read
        """
        if not self._needs_rebuild():
            return self._table

        async with self._lock:
            if self._needs_rebuild():
                # Cleared before reading so an invalidate() during the read is kept
                self._stale = False
                try:
                    endpoints = await self._repository.list_endpoints()
                except Exception:
                    self._stale = True
                    raise
                self._table = RouteTable.build(endpoints)
                self._built_at = self._clock()
                logger.debug("Route table rebuilt with %d endpoints", len(self._table))
            return self._table

    async def resolve(self, method: str, path: str) -> Endpoint | None:
        table = await self.get_route_table()
        return table.match(method, path)
