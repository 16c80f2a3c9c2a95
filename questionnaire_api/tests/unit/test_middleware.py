"""
Unit tests for the authentication and authorization middleware.

A minimal application with the two middlewares and an in-memory permission
resolver; no database is involved.
"""

import asyncio
import uuid

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from questionnaire_api.domain.entities.rbac import Endpoint, Privilege
from questionnaire_api.domain.services.rbac.endpoint_registry import EndpointRegistry
from questionnaire_api.domain.services.rbac.permission_resolver import PermissionResolver
from questionnaire_api.infrastructure.repositories.memory import (
    InMemoryEndpointRepository,
    InMemoryPrivilegeRepository,
)
from questionnaire_api.presentation.middleware.authentication import AuthenticationMiddleware
from questionnaire_api.presentation.middleware.authorization import AuthorizationMiddleware
from questionnaire_api.presentation.middleware.request_id import RequestIdMiddleware
from questionnaire_api.presentation.middleware.security_headers import SecurityHeadersMiddleware

READER_ROLE_ID = 10


def create_test_app(jwt_service, with_resolver: bool = True) -> FastAPI:
    """Create a minimal test application with the auth middlewares."""
    app = FastAPI()

    @app.get("/public")
    def public():
        return {"status": "ok"}

    @app.get("/items/{item_id}")
    def get_item(item_id: int, request: Request):
        return {
            "item_id": item_id,
            "user_id": request.state.identity.user_id,
            "endpoint_id": request.state.endpoint.endpoint_id,
        }

    @app.post("/items/{item_id}")
    def update_item(item_id: int):
        return {"item_id": item_id}

    if with_resolver:
        registry = EndpointRegistry(
            InMemoryEndpointRepository(
                [
                    Endpoint(endpoint_id=1, url="/items/:item_id", method="GET"),
                    Endpoint(endpoint_id=2, url="/items/:item_id", method="POST"),
                ]
            )
        )
        privileges = InMemoryPrivilegeRepository(
            [
                Privilege(role_id=READER_ROLE_ID, endpoint_id=1, can_read=True),
                Privilege(role_id=READER_ROLE_ID, endpoint_id=2, can_read=True),
            ]
        )
        app.state.permission_resolver = PermissionResolver(registry, privileges)

    app.add_middleware(AuthorizationMiddleware, public_paths=["/public"])
    app.add_middleware(AuthenticationMiddleware, jwt_service=jwt_service, public_paths=["/public"])
    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    return app


@pytest.fixture
def test_client(jwt_service):
    with TestClient(create_test_app(jwt_service)) as client:
        yield client


@pytest.fixture
def reader_headers(jwt_service):
    token = asyncio.run(jwt_service.create_access_token(user_id=5, role_id=READER_ROLE_ID))
    return {"Authorization": f"Bearer {token}"}


class TestAuthenticationMiddleware:
    def test_public_path_needs_no_token(self, test_client):
        response = test_client.get("/public")

        assert response.status_code == 200

    def test_missing_token(self, test_client):
        response = test_client.get("/items/1")

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert response.json()["reason"] == "missing_identity"

    def test_invalid_token(self, test_client):
        response = test_client.get("/items/1", headers={"Authorization": "Bearer garbage"})

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid or malformed token"

    def test_wrong_scheme(self, test_client, reader_headers):
        token = reader_headers["Authorization"].split(" ", 1)[1]

        response = test_client.get("/items/1", headers={"Authorization": f"Token {token}"})

        assert response.status_code == 401


class TestAuthorizationMiddleware:
    def test_allowed_request_reaches_route_with_identity_and_endpoint(
        self, test_client, reader_headers
    ):
        response = test_client.get("/items/3", headers=reader_headers)

        assert response.status_code == 200
        assert response.json() == {"item_id": 3, "user_id": 5, "endpoint_id": 1}

    def test_insufficient_permission(self, test_client, reader_headers):
        response = test_client.post("/items/3", headers=reader_headers)

        assert response.status_code == 403
        assert response.json() == {
            "detail": "Insufficient permissions",
            "reason": "insufficient_permission",
        }

    def test_unknown_endpoint(self, test_client, reader_headers):
        response = test_client.get("/items/3/extra", headers=reader_headers)

        assert response.status_code == 403
        assert response.json()["reason"] == "endpoint_not_found"

    def test_options_is_method_not_allowed(self, test_client, reader_headers):
        response = test_client.options("/items/3", headers=reader_headers)

        assert response.status_code == 405
        assert response.json()["reason"] == "method_not_allowed"

    def test_missing_resolver_fails_closed(self, jwt_service, reader_headers):
        with TestClient(create_test_app(jwt_service, with_resolver=False)) as client:
            response = client.get("/items/3", headers=reader_headers)

        assert response.status_code == 503
        assert response.json()["reason"] == "store_unavailable"


class TestResponseHeaders:
    def test_request_id_is_generated(self, test_client):
        response = test_client.get("/public")

        assert uuid.UUID(response.headers["x-request-id"])

    def test_valid_request_id_is_propagated(self, test_client):
        request_id = str(uuid.uuid4())

        response = test_client.get("/public", headers={"X-Request-ID": request_id})

        assert response.headers["x-request-id"] == request_id

    def test_invalid_request_id_is_replaced(self, test_client):
        response = test_client.get("/public", headers={"X-Request-ID": "not-a-uuid"})

        assert response.headers["x-request-id"] != "not-a-uuid"

    def test_security_headers_on_denied_responses(self, test_client):
        response = test_client.get("/items/1")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
