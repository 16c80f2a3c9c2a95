"""
Unit tests for the permission resolver.

Runs the resolver against in-memory repositories; the catalogue used here is
defined in the shared conftest.
"""

from unittest.mock import AsyncMock

import pytest

from questionnaire_api.domain.entities.identity import IdentityContext
from questionnaire_api.domain.entities.rbac import Endpoint, Privilege
from questionnaire_api.domain.exceptions import StoreUnavailableError
from questionnaire_api.domain.services.rbac.decision import DenyReason
from questionnaire_api.domain.services.rbac.endpoint_registry import EndpointRegistry
from questionnaire_api.domain.services.rbac.permission_resolver import PermissionResolver
from questionnaire_api.tests.helpers import ADMIN_ROLE_ID, MEMBER_ROLE_ID


ADMIN = IdentityContext(user_id=1, role_id=ADMIN_ROLE_ID, username="admin")
MEMBER = IdentityContext(user_id=2, role_id=MEMBER_ROLE_ID, username="member")
ROLELESS = IdentityContext(user_id=3, role_id=None)


@pytest.fixture
def registry(endpoint_repository) -> EndpointRegistry:
    return EndpointRegistry(endpoint_repository, ttl_seconds=0)


@pytest.fixture
def resolver(registry, privilege_repository) -> PermissionResolver:
    return PermissionResolver(registry, privilege_repository)


class TestAllow:
    @pytest.mark.asyncio
    async def test_admin_may_create_role(self, resolver):
        decision = await resolver.resolve(ADMIN, "POST", "/roles")

        assert decision.allowed
        assert decision.reason is None
        assert decision.endpoint.endpoint_id == 1

    @pytest.mark.asyncio
    async def test_member_may_read_roles(self, resolver):
        decision = await resolver.resolve(MEMBER, "GET", "/roles")

        assert decision.allowed

    @pytest.mark.asyncio
    async def test_method_is_case_insensitive(self, resolver):
        decision = await resolver.resolve(MEMBER, "get", "/roles")

        assert decision.allowed

    @pytest.mark.asyncio
    async def test_delete_maps_to_delete_grant(self, resolver):
        decision = await resolver.resolve(ADMIN, "DELETE", "/questions/4/options/9")

        assert decision.allowed
        assert decision.endpoint.endpoint_id == 4


class TestDeny:
    @pytest.mark.asyncio
    async def test_member_without_create_grant_cannot_create_role(self, resolver):
        decision = await resolver.resolve(MEMBER, "POST", "/roles")

        assert not decision.allowed
        assert decision.reason is DenyReason.INSUFFICIENT_PERMISSION
        assert decision.endpoint.endpoint_id == 1

    @pytest.mark.asyncio
    async def test_missing_identity(self, resolver):
        decision = await resolver.resolve(None, "GET", "/roles")

        assert decision.reason is DenyReason.MISSING_IDENTITY
        assert decision.endpoint is None

    @pytest.mark.asyncio
    async def test_unknown_path(self, resolver):
        decision = await resolver.resolve(ADMIN, "GET", "/unknown")

        assert decision.reason is DenyReason.ENDPOINT_NOT_FOUND

    @pytest.mark.asyncio
    async def test_declared_path_with_undeclared_method(self, resolver):
        decision = await resolver.resolve(ADMIN, "PUT", "/roles")

        assert decision.reason is DenyReason.ENDPOINT_NOT_FOUND

    @pytest.mark.asyncio
    async def test_trailing_slash_does_not_match(self, resolver):
        decision = await resolver.resolve(ADMIN, "GET", "/roles/")

        assert decision.reason is DenyReason.ENDPOINT_NOT_FOUND

    @pytest.mark.asyncio
    async def test_role_without_privilege_row(self, resolver):
        decision = await resolver.resolve(MEMBER, "GET", "/questions/12")

        assert decision.reason is DenyReason.NO_PRIVILEGE_CONFIGURED
        assert decision.endpoint.endpoint_id == 3

    @pytest.mark.asyncio
    async def test_identity_without_role(self, resolver):
        decision = await resolver.resolve(ROLELESS, "GET", "/roles")

        assert decision.reason is DenyReason.NO_PRIVILEGE_CONFIGURED

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["OPTIONS", "HEAD", "TRACE", "CONNECT"])
    async def test_unmapped_methods_are_not_allowed(self, resolver, method):
        decision = await resolver.resolve(ADMIN, method, "/roles")

        assert decision.reason is DenyReason.METHOD_NOT_ALLOWED
        assert method in decision.message

    @pytest.mark.asyncio
    async def test_unmapped_method_is_rejected_before_endpoint_lookup(self, privilege_repository):
        registry = AsyncMock()
        resolver = PermissionResolver(registry, privilege_repository)

        decision = await resolver.resolve(ADMIN, "OPTIONS", "/unknown")

        assert decision.reason is DenyReason.METHOD_NOT_ALLOWED
        registry.resolve.assert_not_awaited()


class TestStoreFailures:
    @pytest.mark.asyncio
    async def test_endpoint_store_failure(self, privilege_repository):
        endpoints = AsyncMock()
        endpoints.list_endpoints.side_effect = StoreUnavailableError()
        resolver = PermissionResolver(EndpointRegistry(endpoints), privilege_repository)

        decision = await resolver.resolve(ADMIN, "GET", "/roles")

        assert not decision.allowed
        assert decision.reason is DenyReason.STORE_UNAVAILABLE

    @pytest.mark.asyncio
    async def test_privilege_store_failure(self, registry):
        privileges = AsyncMock()
        privileges.get_privilege.side_effect = ConnectionError("database went away")
        resolver = PermissionResolver(registry, privileges)

        decision = await resolver.resolve(ADMIN, "GET", "/roles")

        assert decision.reason is DenyReason.STORE_UNAVAILABLE
        assert decision.endpoint.endpoint_id == 2


class TestLiveUpdates:
    @pytest.mark.asyncio
    async def test_privilege_change_applies_to_next_request(self, resolver, privilege_repository):
        assert (await resolver.resolve(MEMBER, "POST", "/roles")).allowed is False

        await privilege_repository.upsert_privilege(
            Privilege(role_id=MEMBER_ROLE_ID, endpoint_id=1, can_create=True)
        )

        assert (await resolver.resolve(MEMBER, "POST", "/roles")).allowed is True

    @pytest.mark.asyncio
    async def test_new_endpoint_is_visible_after_invalidate(
        self, resolver, endpoint_repository, privilege_repository
    ):
        endpoint = await endpoint_repository.create("/answers", "POST")
        await privilege_repository.upsert_privilege(
            Privilege(role_id=MEMBER_ROLE_ID, endpoint_id=endpoint.endpoint_id, can_create=True)
        )
        resolver.registry.invalidate()

        decision = await resolver.resolve(MEMBER, "POST", "/answers")

        assert decision.allowed
        assert decision.endpoint == Endpoint(
            endpoint_id=endpoint.endpoint_id, url="/answers", method="POST"
        )
