"""
Permission resolver.

Maps an authenticated request (identity, HTTP method, path) to an allow/deny
decision against the endpoint catalogue and the role privilege rows. Every
path that is not an explicit grant is a deny.
"""

import logging

from questionnaire_api.domain.entities.identity import IdentityContext
from questionnaire_api.domain.entities.rbac import Grant
from questionnaire_api.domain.repositories.privilege_repository import PrivilegeRepository
from questionnaire_api.domain.services.rbac.decision import AccessDecision, DenyReason
from questionnaire_api.domain.services.rbac.endpoint_registry import EndpointRegistry

logger = logging.getLogger(__name__)

METHOD_GRANTS: dict[str, Grant] = {
    "GET": Grant.READ,
    "POST": Grant.CREATE,
    "PUT": Grant.UPDATE,
    "PATCH": Grant.UPDATE,
    "DELETE": Grant.DELETE,
}


class PermissionResolver:
    """
    Resolves access decisions for authenticated requests.

    Holds no per-request state; a single instance is shared by all requests.
    """

    def __init__(self, registry: EndpointRegistry, privileges: PrivilegeRepository):
        self._registry = registry
        self._privileges = privileges

    @property
    def registry(self) -> EndpointRegistry:
        return self._registry

    async def resolve(
        self, identity: IdentityContext | None, method: str, path: str
    ) -> AccessDecision:
        """
        Decide whether ``identity`` may call ``method path``.

        Args:
            identity: Decoded caller identity, None if the request is unauthenticated
            method: HTTP method, any case
            path: Request path without query string

        Returns:
            An AccessDecision; store failures produce a STORE_UNAVAILABLE deny
        """
        decision = await self._decide(identity, method, path)
        if not decision.allowed:
            logger.info(
                "Access denied for %s %s (user=%s, reason=%s)",
                method,
                path,
                identity.user_id if identity else None,
                decision.reason.value,
            )
        return decision

    async def _decide(
        self, identity: IdentityContext | None, method: str, path: str
    ) -> AccessDecision:
        if identity is None:
            return AccessDecision.deny(DenyReason.MISSING_IDENTITY, "Authentication required")

        method = method.upper()
        grant = METHOD_GRANTS.get(method)
        if grant is None:
            return AccessDecision.deny(
                DenyReason.METHOD_NOT_ALLOWED, f"Method {method} not allowed"
            )

        try:
            endpoint = await self._registry.resolve(method, path)
        except Exception:
            logger.exception("Endpoint lookup failed for %s %s", method, path)
            return AccessDecision.deny(
                DenyReason.STORE_UNAVAILABLE, "Permission store unavailable"
            )

        if endpoint is None:
            return AccessDecision.deny(DenyReason.ENDPOINT_NOT_FOUND, "Endpoint not found")

        if identity.role_id is None:
            return AccessDecision.deny(
                DenyReason.NO_PRIVILEGE_CONFIGURED,
                "No privileges configured for this role",
                endpoint,
            )

        try:
            privilege = await self._privileges.get_privilege(
                identity.role_id, endpoint.endpoint_id
            )
        except Exception:
            logger.exception(
                "Privilege lookup failed for role %s on endpoint %s",
                identity.role_id,
                endpoint.endpoint_id,
            )
            return AccessDecision.deny(
                DenyReason.STORE_UNAVAILABLE, "Permission store unavailable", endpoint
            )

        if privilege is None:
            return AccessDecision.deny(
                DenyReason.NO_PRIVILEGE_CONFIGURED,
                "No privileges configured for this role",
                endpoint,
            )

        if not privilege.allows(grant):
            return AccessDecision.deny(
                DenyReason.INSUFFICIENT_PERMISSION, "Insufficient permissions", endpoint
            )

        return AccessDecision.allow(endpoint)
