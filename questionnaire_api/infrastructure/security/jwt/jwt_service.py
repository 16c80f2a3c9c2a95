"""
JWT service.

Issues access tokens for authenticated users and decodes bearer tokens into
the IdentityContext consumed by the authorization layer.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from questionnaire_api.core.config.settings import Settings
from questionnaire_api.domain.entities.identity import IdentityContext
from questionnaire_api.domain.exceptions import (
    ConfigurationError,
    InvalidTokenException,
    TokenExpiredException,
)
from questionnaire_api.infrastructure.security.jwt import jose_adapter

logger = logging.getLogger(__name__)

ACCESS_TOKEN_TYPE = "access"
HMAC_ALGORITHMS = ("HS256", "HS384", "HS512")


class TokenPayload(BaseModel):
    """Token payload model for validation.

    Registered claims: https://tools.ietf.org/html/rfc7519#section-4.1
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    # Required JWT claims (RFC 7519)
    subject: str = Field(..., alias="sub")
    exp: int
    iat: int | None = None
    jti: str | None = None
    iss: str | None = None
    aud: str | list[str] | None = None

    # Token specific claims
    type: str = ACCESS_TOKEN_TYPE
    role_id: int | None = None
    username: str | None = None


class JWTService:
    """Creates and verifies HS256 access tokens."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        access_token_expire_minutes: int = 60,
        issuer: str | None = None,
        audience: str | None = None,
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.access_token_expire_minutes = access_token_expire_minutes
        self.issuer = issuer
        self.audience = audience

    async def create_access_token(
        self,
        user_id: int,
        role_id: int | None,
        username: str | None = None,
        expires_delta_minutes: int | None = None,
    ) -> str:
        """Create a JWT access token for authentication."""
        expires_minutes = (
            self.access_token_expire_minutes
            if expires_delta_minutes is None
            else expires_delta_minutes
        )
        now = datetime.now(timezone.utc)
        expires_at = now + timedelta(minutes=expires_minutes)

        claims: dict[str, Any] = {
            "sub": str(user_id),
            "role_id": role_id,
            "username": username,
            "exp": int(expires_at.timestamp()),
            "iat": int(now.timestamp()),
            "type": ACCESS_TOKEN_TYPE,
            "jti": str(uuid4()),
        }
        if self.issuer:
            claims["iss"] = self.issuer
        if self.audience:
            claims["aud"] = self.audience

        return jose_adapter.encode(claims, self.secret_key, algorithm=self.algorithm)

    def decode_token(self, token: str) -> TokenPayload:
        """
        Decode and validate a JWT token.

        Raises:
            TokenExpiredException: If the token has expired
            InvalidTokenException: If the token is malformed, tampered with or not an access token
        """
        if not token:
            raise InvalidTokenException("Token is empty")

        try:
            claims = jose_adapter.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                audience=self.audience,
                issuer=self.issuer,
            )
        except jose_adapter.ExpiredSignatureError as e:
            raise TokenExpiredException() from e
        except jose_adapter.JWTError as e:
            raise InvalidTokenException(f"Invalid token: {e}") from e

        try:
            payload = TokenPayload.model_validate(claims)
        except ValidationError as e:
            raise InvalidTokenException("Token claims are invalid") from e

        if payload.type != ACCESS_TOKEN_TYPE:
            raise InvalidTokenException("Token is not an access token")
        return payload

    def get_identity(self, token: str) -> IdentityContext:
        """Decode ``token`` into the caller's identity."""
        payload = self.decode_token(token)
        try:
            user_id = int(payload.subject)
        except ValueError as e:
            raise InvalidTokenException("Token subject is not a user id") from e
        return IdentityContext(user_id=user_id, role_id=payload.role_id, username=payload.username)


def get_jwt_service(settings: Settings) -> JWTService:
    """Build the JWT service from application settings."""
    if settings.JWT_ALGORITHM not in HMAC_ALGORITHMS:
        raise ConfigurationError(
            f"JWT_ALGORITHM must be one of {HMAC_ALGORITHMS}, got {settings.JWT_ALGORITHM!r}"
        )
    return JWTService(
        secret_key=settings.JWT_SECRET_KEY.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
        access_token_expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
        issuer=settings.JWT_ISSUER,
        audience=settings.JWT_AUDIENCE,
    )
