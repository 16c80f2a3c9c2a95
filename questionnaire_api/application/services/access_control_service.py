"""
Access control administration.

Roles, endpoint registration and privilege assignment. Endpoint writes
invalidate the route table snapshot so the permission resolver sees them on
the next request.
"""

import logging

from questionnaire_api.domain.entities.rbac import Endpoint, HttpMethod, Privilege, Role
from questionnaire_api.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    MalformedTemplateError,
    ValidationError,
)
from questionnaire_api.domain.repositories.endpoint_repository import EndpointRepository
from questionnaire_api.domain.repositories.privilege_repository import PrivilegeRepository
from questionnaire_api.domain.repositories.role_repository import RoleRepository
from questionnaire_api.domain.services.rbac.endpoint_registry import EndpointRegistry
from questionnaire_api.domain.services.rbac.pattern_matcher import (
    CompiledTemplate,
    compile_template,
)

logger = logging.getLogger(__name__)


class AccessControlService:
    def __init__(
        self,
        role_repository: RoleRepository,
        endpoint_repository: EndpointRepository,
        privilege_repository: PrivilegeRepository,
        registry: EndpointRegistry,
    ):
        self._roles = role_repository
        self._endpoints = endpoint_repository
        self._privileges = privilege_repository
        self._registry = registry

    async def create_role(self, role_name: str, description: str | None = None) -> Role:
        role = await self._roles.create(role_name, description)
        logger.info(f"Created role {role.role_id} ({role.role_name!r})")
        return role

    async def list_roles(self) -> list[Role]:
        return await self._roles.list_roles()

    async def register_endpoint(
        self, url: str, method: str, description: str | None = None
    ) -> Endpoint:
        """
        Declare a new protected endpoint.

        Raises:
            ValidationError: If the method is not supported
            MalformedTemplateError: If the URL template cannot be compiled
            DuplicateEntityError: If an endpoint with the same method already
                matches exactly the same paths, e.g. ``/x/:id`` and ``/x/{id}``
        """
        method = method.upper()
        if method not in HttpMethod.__members__:
            raise ValidationError(f"Unsupported HTTP method {method!r}")
        compiled = compile_template(url)
        await self._reject_equivalent_endpoint(compiled, method)

        endpoint = await self._endpoints.create(url, method, description)
        self._registry.invalidate()
        logger.info(f"Registered endpoint {endpoint.endpoint_id}: {method} {url}")
        return endpoint

    async def _reject_equivalent_endpoint(self, compiled: CompiledTemplate, method: str) -> None:
        # The first declared endpoint wins, so an equivalent later one could never match
        for existing in await self._endpoints.list_endpoints():
            if existing.method != method:
                continue
            try:
                existing_shape = compile_template(existing.url).shape
            except MalformedTemplateError:
                continue
            if existing_shape == compiled.shape:
                raise DuplicateEntityError(
                    f"Endpoint {method} {compiled.template} is equivalent to endpoint "
                    f"{existing.endpoint_id} ({existing.url})"
                )

    async def list_endpoints(self) -> list[Endpoint]:
        return await self._endpoints.list_endpoints()

    async def set_privileges(self, privilege: Privilege) -> Privilege:
        """
        Create or overwrite the grants of a role on an endpoint.

        Raises:
            EntityNotFoundError: If the role or endpoint does not exist
        """
        if await self._roles.get_by_id(privilege.role_id) is None:
            raise EntityNotFoundError("Role", privilege.role_id)
        if await self._endpoints.get_by_id(privilege.endpoint_id) is None:
            raise EntityNotFoundError("Endpoint", privilege.endpoint_id)

        result = await self._privileges.upsert_privilege(privilege)
        logger.info(
            f"Updated privileges of role {privilege.role_id} on endpoint {privilege.endpoint_id}"
        )
        return result

    async def list_role_privileges(self, role_id: int) -> list[Privilege]:
        if await self._roles.get_by_id(role_id) is None:
            raise EntityNotFoundError("Role", role_id)
        return await self._privileges.list_privileges(role_id)
