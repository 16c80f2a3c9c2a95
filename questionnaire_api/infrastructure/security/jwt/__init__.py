"""JWT token handling."""

from questionnaire_api.infrastructure.security.jwt.jwt_service import (
    JWTService,
    TokenPayload,
    get_jwt_service,
)

__all__ = ["JWTService", "TokenPayload", "get_jwt_service"]
