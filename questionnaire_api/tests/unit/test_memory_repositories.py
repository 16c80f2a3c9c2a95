"""
Unit tests for the in-memory RBAC repositories.
"""

import asyncio

import pytest

from questionnaire_api.domain.entities.rbac import Privilege
from questionnaire_api.domain.exceptions import DuplicateEntityError


@pytest.mark.asyncio
async def test_upsert_replaces_existing_row(privilege_repository):
    await privilege_repository.upsert_privilege(
        Privilege(role_id=2, endpoint_id=1, can_create=True, can_delete=True)
    )

    rows = await privilege_repository.list_privileges(role_id=2)
    row = await privilege_repository.get_privilege(2, 1)

    assert len([r for r in rows if r.endpoint_id == 1]) == 1
    assert row.can_create and row.can_delete
    assert not row.can_read


@pytest.mark.asyncio
async def test_upsert_is_idempotent(privilege_repository):
    privilege = Privilege(role_id=9, endpoint_id=3, can_read=True)

    await privilege_repository.upsert_privilege(privilege)
    await privilege_repository.upsert_privilege(privilege)

    assert await privilege_repository.list_privileges(role_id=9) == [privilege]


@pytest.mark.asyncio
async def test_concurrent_upserts_leave_one_complete_row(privilege_repository):
    candidates = [
        Privilege(role_id=5, endpoint_id=1, can_create=True),
        Privilege(role_id=5, endpoint_id=1, can_read=True, can_update=True),
    ]

    await asyncio.gather(*(privilege_repository.upsert_privilege(p) for p in candidates))

    rows = await privilege_repository.list_privileges(role_id=5)
    assert len(rows) == 1
    assert rows[0] in candidates


@pytest.mark.asyncio
async def test_missing_privilege_is_none(privilege_repository):
    assert await privilege_repository.get_privilege(99, 99) is None


@pytest.mark.asyncio
async def test_endpoint_create_assigns_next_id_and_normalizes_method(endpoint_repository):
    endpoint = await endpoint_repository.create("/answers", "post", "Submit answers")

    assert endpoint.endpoint_id == 5
    assert endpoint.method == "POST"
    assert await endpoint_repository.get_by_id(5) == endpoint


@pytest.mark.asyncio
async def test_duplicate_endpoint_is_rejected(endpoint_repository):
    with pytest.raises(DuplicateEntityError):
        await endpoint_repository.create("/roles", "get")


@pytest.mark.asyncio
async def test_roles_are_unique_by_name(role_repository):
    role = await role_repository.create("questionnaire manager")

    assert role.role_id == 3
    assert (await role_repository.get_by_name("questionnaire manager")) == role
    with pytest.raises(DuplicateEntityError):
        await role_repository.create("member")
