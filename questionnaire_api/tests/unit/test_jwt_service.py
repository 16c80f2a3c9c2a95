"""
Unit tests for JWT service.

Tests token creation, decoding and identity extraction.
"""

import pytest

from questionnaire_api.core.config.settings import Settings
from questionnaire_api.domain.entities.identity import IdentityContext
from questionnaire_api.domain.exceptions import (
    AuthenticationError,
    ConfigurationError,
    InvalidTokenException,
    TokenExpiredException,
)
from questionnaire_api.infrastructure.security.jwt import jose_adapter
from questionnaire_api.infrastructure.security.jwt.jwt_service import JWTService, get_jwt_service


@pytest.mark.asyncio
async def test_token_round_trip_yields_identity(jwt_service):
    token = await jwt_service.create_access_token(user_id=7, role_id=3, username="alice")

    identity = jwt_service.get_identity(token)

    assert identity == IdentityContext(user_id=7, role_id=3, username="alice")


@pytest.mark.asyncio
async def test_token_without_role(jwt_service):
    token = await jwt_service.create_access_token(user_id=7, role_id=None)

    assert jwt_service.get_identity(token).role_id is None


@pytest.mark.asyncio
async def test_payload_carries_standard_claims(jwt_service):
    token = await jwt_service.create_access_token(user_id=7, role_id=3)

    payload = jwt_service.decode_token(token)

    assert payload.subject == "7"
    assert payload.type == "access"
    assert payload.jti
    assert payload.exp > payload.iat


@pytest.mark.asyncio
async def test_expired_token_is_rejected(jwt_service):
    token = await jwt_service.create_access_token(
        user_id=7, role_id=3, expires_delta_minutes=-1
    )

    with pytest.raises(TokenExpiredException):
        jwt_service.get_identity(token)


@pytest.mark.asyncio
async def test_tampered_token_is_rejected(jwt_service):
    token = await jwt_service.create_access_token(user_id=7, role_id=3)
    header, payload, signature = token.split(".")
    tampered = ".".join([header, payload, signature[::-1]])

    with pytest.raises(InvalidTokenException):
        jwt_service.get_identity(tampered)


@pytest.mark.asyncio
async def test_token_signed_with_other_key_is_rejected(jwt_service):
    other = JWTService(secret_key="another-secret-key-used-by-someone-else")
    token = await other.create_access_token(user_id=7, role_id=1)

    with pytest.raises(InvalidTokenException):
        jwt_service.get_identity(token)


@pytest.mark.parametrize("token", ["", "not-a-jwt", "a.b.c"])
def test_malformed_tokens_are_rejected(jwt_service, token):
    with pytest.raises(InvalidTokenException):
        jwt_service.decode_token(token)


def test_non_access_token_is_rejected(jwt_service):
    token = jose_adapter.encode(
        {"sub": "7", "exp": 4102444800, "type": "refresh"}, jwt_service.secret_key
    )

    with pytest.raises(InvalidTokenException, match="not an access token"):
        jwt_service.decode_token(token)


def test_token_without_expiry_is_rejected(jwt_service):
    token = jose_adapter.encode({"sub": "7"}, jwt_service.secret_key)

    with pytest.raises(InvalidTokenException):
        jwt_service.decode_token(token)


def test_non_numeric_subject_is_rejected(jwt_service):
    token = jose_adapter.encode({"sub": "alice", "exp": 4102444800}, jwt_service.secret_key)

    with pytest.raises(InvalidTokenException):
        jwt_service.get_identity(token)


@pytest.mark.asyncio
async def test_audience_and_issuer_are_verified():
    issuer_service = JWTService(secret_key="k" * 32, issuer="questionnaire-api", audience="clients")
    token = await issuer_service.create_access_token(user_id=1, role_id=1)
    wrong_audience = JWTService(secret_key="k" * 32, issuer="questionnaire-api", audience="others")

    assert issuer_service.get_identity(token).user_id == 1
    with pytest.raises(InvalidTokenException):
        wrong_audience.get_identity(token)


def test_token_errors_are_authentication_errors():
    assert issubclass(TokenExpiredException, AuthenticationError)
    assert issubclass(InvalidTokenException, AuthenticationError)


def test_factory_rejects_non_hmac_algorithm():
    settings = Settings(JWT_SECRET_KEY="secret", JWT_ALGORITHM="RS256")

    with pytest.raises(ConfigurationError):
        get_jwt_service(settings)


def test_factory_uses_settings():
    settings = Settings(JWT_SECRET_KEY="secret", ACCESS_TOKEN_EXPIRE_MINUTES=5)

    service = get_jwt_service(settings)

    assert service.secret_key == "secret"
    assert service.access_token_expire_minutes == 5
