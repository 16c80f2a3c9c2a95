"""
Authentication middleware.

Decodes the bearer token of every non-public request into an
IdentityContext stored on ``request.state.identity``. Requests without a
valid token are rejected with 401 before reaching authorization.
"""

import logging
from collections.abc import Awaitable, Callable, Iterable

from fastapi import Request, Response
from fastapi.security.utils import get_authorization_scheme_param
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse
from starlette.status import HTTP_401_UNAUTHORIZED
from starlette.types import ASGIApp

from questionnaire_api.domain.exceptions.token_exceptions import (
    InvalidTokenException,
    TokenExpiredException,
)
from questionnaire_api.domain.services.rbac.decision import DenyReason
from questionnaire_api.infrastructure.security.jwt.jwt_service import JWTService

logger = logging.getLogger(__name__)


def unauthorized_response(detail: str) -> JSONResponse:
    return JSONResponse(
        status_code=HTTP_401_UNAUTHORIZED,
        content={"detail": detail, "reason": DenyReason.MISSING_IDENTITY.value},
        headers={"WWW-Authenticate": "Bearer"},
    )


class AuthenticationMiddleware(BaseHTTPMiddleware):
    def __init__(
        self,
        app: ASGIApp,
        jwt_service: JWTService,
        public_paths: Iterable[str] = (),
    ):
        super().__init__(app)
        self.jwt_service = jwt_service
        self.public_paths = frozenset(public_paths)
        logger.info(
            f"AuthenticationMiddleware initialized with {len(self.public_paths)} public paths"
        )

    def _extract_token(self, request: Request) -> str | None:
        authorization: str | None = request.headers.get("Authorization")
        if not authorization:
            return None
        scheme, param = get_authorization_scheme_param(authorization)
        if scheme.lower() != "bearer" or not param:
            return None
        return param

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request.state.identity = None
        if request.url.path in self.public_paths:
            logger.debug(f"Public path: {request.url.path} - Skipping authentication")
            return await call_next(request)

        token = self._extract_token(request)
        if not token:
            logger.info(f"No token found in request to {request.url.path}")
            return unauthorized_response("Authentication token required")

        try:
            identity = self.jwt_service.get_identity(token)
        except TokenExpiredException as e:
            logger.info(f"Token expired: {e}")
            return unauthorized_response("Authentication token has expired")
        except InvalidTokenException as e:
            logger.info(f"Invalid token: {e}")
            return unauthorized_response("Invalid or malformed token")

        request.state.identity = identity
        logger.debug(f"User {identity.user_id} authenticated with role {identity.role_id}")
        return await call_next(request)
