"""
Fixtures for tests that run the full application against in-memory SQLite.
"""

from collections.abc import AsyncGenerator

import pytest_asyncio
from asgi_lifespan import LifespanManager
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy import update

from questionnaire_api.app_factory import create_application
from questionnaire_api.infrastructure.persistence.sqlalchemy.models import UserModel
from questionnaire_api.tests.helpers import API, login, register_and_login


@pytest_asyncio.fixture
async def app(test_settings) -> AsyncGenerator[FastAPI, None]:
    app_instance = create_application(settings_override=test_settings)
    async with LifespanManager(app_instance):
        yield app_instance


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test", timeout=10.0
    ) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def admin_headers(client) -> dict[str, str]:
    return await login(client, "admin", "admin-password")


@pytest_asyncio.fixture
async def member_headers(client) -> dict[str, str]:
    return await register_and_login(client, "member_user")


@pytest_asyncio.fixture
async def manager_headers(app, client, admin_headers) -> dict[str, str]:
    """A registered user promoted to the questionnaire manager role."""
    await register_and_login(client, "manager_user")
    roles = (await client.get(f"{API}/roles", headers=admin_headers)).json()
    manager_role_id = next(
        r["role_id"] for r in roles if r["role_name"] == "questionnaire manager"
    )

    # No user administration API exists, so promote through the table
    async with app.state.session_factory() as session:
        async with session.begin():
            await session.execute(
                update(UserModel)
                .where(UserModel.username == "manager_user")
                .values(role_id=manager_role_id)
            )

    # The role is a token claim, so log in again to pick it up
    return await login(client, "manager_user", "manager_user-password")
