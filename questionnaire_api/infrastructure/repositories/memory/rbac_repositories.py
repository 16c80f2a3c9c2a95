"""
In-Memory RBAC Repository Module.

Endpoint, role and privilege stores held in process memory.
"""

import asyncio
from collections.abc import Iterable

from questionnaire_api.domain.entities.rbac import Endpoint, Privilege, Role
from questionnaire_api.domain.exceptions import DuplicateEntityError
from questionnaire_api.domain.repositories.endpoint_repository import EndpointRepository
from questionnaire_api.domain.repositories.privilege_repository import PrivilegeRepository
from questionnaire_api.domain.repositories.role_repository import RoleRepository


class InMemoryEndpointRepository(EndpointRepository):
    """In-memory endpoint catalogue; ids are assigned in insertion order."""

    def __init__(self, endpoints: Iterable[Endpoint] = ()):
        self._endpoints: dict[int, Endpoint] = {e.endpoint_id: e for e in endpoints}
        self._lock = asyncio.Lock()

    async def list_endpoints(self) -> list[Endpoint]:
        return sorted(self._endpoints.values(), key=lambda e: e.endpoint_id)

    async def get_by_id(self, endpoint_id: int) -> Endpoint | None:
        return self._endpoints.get(endpoint_id)

    async def create(self, url: str, method: str, description: str | None = None) -> Endpoint:
        method = method.upper()
        async with self._lock:
            if any(e.url == url and e.method == method for e in self._endpoints.values()):
                raise DuplicateEntityError(f"Endpoint {method} {url} already exists")
            endpoint_id = max(self._endpoints, default=0) + 1
            endpoint = Endpoint(
                endpoint_id=endpoint_id, url=url, method=method, description=description
            )
            self._endpoints[endpoint_id] = endpoint
            return endpoint


class InMemoryPrivilegeRepository(PrivilegeRepository):
    """
    In-memory privilege rows keyed by (role_id, endpoint_id).

    Rows are immutable and replaced whole under a lock, so readers always see
    either the previous or the new complete set of grants.
    """

    def __init__(self, privileges: Iterable[Privilege] = ()):
        self._rows: dict[tuple[int, int], Privilege] = {
            (p.role_id, p.endpoint_id): p for p in privileges
        }
        self._lock = asyncio.Lock()

    async def get_privilege(self, role_id: int, endpoint_id: int) -> Privilege | None:
        return self._rows.get((role_id, endpoint_id))

    async def upsert_privilege(self, privilege: Privilege) -> Privilege:
        async with self._lock:
            self._rows[(privilege.role_id, privilege.endpoint_id)] = privilege
        return privilege

    async def list_privileges(self, role_id: int | None = None) -> list[Privilege]:
        rows = sorted(self._rows.values(), key=lambda p: (p.role_id, p.endpoint_id))
        if role_id is None:
            return rows
        return [p for p in rows if p.role_id == role_id]


class InMemoryRoleRepository(RoleRepository):
    def __init__(self, roles: Iterable[Role] = ()):
        self._roles: dict[int, Role] = {r.role_id: r for r in roles}
        self._lock = asyncio.Lock()

    async def get_by_id(self, role_id: int) -> Role | None:
        return self._roles.get(role_id)

    async def get_by_name(self, role_name: str) -> Role | None:
        return next((r for r in self._roles.values() if r.role_name == role_name), None)

    async def list_roles(self) -> list[Role]:
        return sorted(self._roles.values(), key=lambda r: r.role_id)

    async def create(self, role_name: str, description: str | None = None) -> Role:
        async with self._lock:
            if await self.get_by_name(role_name) is not None:
                raise DuplicateEntityError(f"Role {role_name!r} already exists")
            role_id = max(self._roles, default=0) + 1
            role = Role(role_id=role_id, role_name=role_name, description=description)
            self._roles[role_id] = role
            return role
