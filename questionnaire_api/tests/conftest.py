"""
Global test configuration for the entire test suite.

Fixtures shared by unit and integration tests: settings pointing at an
in-memory database, and an in-memory RBAC catalogue for resolver tests.
"""

import logging

import pytest

from questionnaire_api.core.config.settings import Settings
from questionnaire_api.domain.entities.rbac import Endpoint, Privilege, Role
from questionnaire_api.infrastructure.repositories.memory import (
    InMemoryEndpointRepository,
    InMemoryPrivilegeRepository,
    InMemoryRoleRepository,
)
from questionnaire_api.infrastructure.security.jwt.jwt_service import JWTService
from questionnaire_api.tests.helpers import ADMIN_ROLE_ID, MEMBER_ROLE_ID

logger = logging.getLogger(__name__)

TEST_SECRET_KEY = "test_jwt_secret_key_that_is_sufficiently_long_for_testing_purposes_only"


@pytest.fixture
def test_settings() -> Settings:
    """Settings for an isolated in-memory application instance."""
    return Settings(
        ENVIRONMENT="test",
        DATABASE_URL="sqlite+aiosqlite:///:memory:",
        JWT_SECRET_KEY=TEST_SECRET_KEY,
        LOG_TO_FILE=False,
        LOG_LEVEL="INFO",
        SENTRY_DSN=None,
        BACKEND_CORS_ORIGINS=[],
        BOOTSTRAP_ADMIN_USERNAME="admin",
        BOOTSTRAP_ADMIN_PASSWORD="admin-password",
        RBAC_ROUTE_TABLE_TTL_SECONDS=0,
    )


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(secret_key=TEST_SECRET_KEY, access_token_expire_minutes=30)


@pytest.fixture
def rbac_endpoints() -> list[Endpoint]:
    return [
        Endpoint(endpoint_id=1, url="/roles", method="POST"),
        Endpoint(endpoint_id=2, url="/roles", method="GET"),
        Endpoint(endpoint_id=3, url="/questions/:questionnaire_id", method="GET"),
        Endpoint(endpoint_id=4, url="/questions/{questionnaire_id}/options/{option_id}", method="DELETE"),
    ]


@pytest.fixture
def rbac_privileges() -> list[Privilege]:
    return [
        Privilege(role_id=ADMIN_ROLE_ID, endpoint_id=1, can_create=True, can_read=True),
        Privilege(role_id=ADMIN_ROLE_ID, endpoint_id=2, can_read=True),
        Privilege(role_id=ADMIN_ROLE_ID, endpoint_id=4, can_delete=True),
        Privilege(role_id=MEMBER_ROLE_ID, endpoint_id=1),
        Privilege(role_id=MEMBER_ROLE_ID, endpoint_id=2, can_read=True),
    ]


@pytest.fixture
def endpoint_repository(rbac_endpoints) -> InMemoryEndpointRepository:
    return InMemoryEndpointRepository(rbac_endpoints)


@pytest.fixture
def privilege_repository(rbac_privileges) -> InMemoryPrivilegeRepository:
    return InMemoryPrivilegeRepository(rbac_privileges)


@pytest.fixture
def role_repository() -> InMemoryRoleRepository:
    return InMemoryRoleRepository(
        [
            Role(role_id=ADMIN_ROLE_ID, role_name="admin"),
            Role(role_id=MEMBER_ROLE_ID, role_name="member"),
        ]
    )
