"""
Constants and helpers shared by the unit and HTTP-level tests.
"""

from httpx import AsyncClient

API = "/api/v1"

# Role ids of the in-memory RBAC catalogue fixtures
ADMIN_ROLE_ID = 1
MEMBER_ROLE_ID = 2


async def login(client: AsyncClient, username: str, password: str) -> dict[str, str]:
    """Log in and return the Authorization header for the issued token."""
    response = await client.post(
        f"{API}/auth/login", json={"username": username, "password": password}
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


async def register_and_login(client: AsyncClient, username: str) -> dict[str, str]:
    password = f"{username}-password"
    response = await client.post(
        f"{API}/auth/register",
        json={"username": username, "email": f"{username}@example.com", "password": password},
    )
    assert response.status_code == 201, response.text
    return await login(client, username, password)
