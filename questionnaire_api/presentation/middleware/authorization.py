"""
Authorization middleware.

Consults the permission resolver for every non-public request and turns
deny decisions into HTTP responses. The resolver is read from
``app.state.permission_resolver``, which the application lifespan sets.
"""

import logging
from collections.abc import Awaitable, Callable, Iterable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse
from starlette.status import (
    HTTP_401_UNAUTHORIZED,
    HTTP_403_FORBIDDEN,
    HTTP_405_METHOD_NOT_ALLOWED,
    HTTP_503_SERVICE_UNAVAILABLE,
)
from starlette.types import ASGIApp

from questionnaire_api.domain.services.rbac.decision import AccessDecision, DenyReason
from questionnaire_api.domain.services.rbac.permission_resolver import PermissionResolver

logger = logging.getLogger(__name__)

DENY_STATUS: dict[DenyReason, int] = {
    DenyReason.MISSING_IDENTITY: HTTP_401_UNAUTHORIZED,
    DenyReason.ENDPOINT_NOT_FOUND: HTTP_403_FORBIDDEN,
    DenyReason.NO_PRIVILEGE_CONFIGURED: HTTP_403_FORBIDDEN,
    DenyReason.INSUFFICIENT_PERMISSION: HTTP_403_FORBIDDEN,
    DenyReason.METHOD_NOT_ALLOWED: HTTP_405_METHOD_NOT_ALLOWED,
    DenyReason.STORE_UNAVAILABLE: HTTP_503_SERVICE_UNAVAILABLE,
}


def deny_response(decision: AccessDecision) -> JSONResponse:
    """Render a deny decision as ``{"detail", "reason"}`` with its mapped status."""
    headers = None
    if decision.reason is DenyReason.MISSING_IDENTITY:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=DENY_STATUS[decision.reason],
        content={"detail": decision.message, "reason": decision.reason.value},
        headers=headers,
    )


class AuthorizationMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, public_paths: Iterable[str] = ()):
        super().__init__(app)
        self.public_paths = frozenset(public_paths)

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        path = request.url.path
        if path in self.public_paths:
            return await call_next(request)

        resolver: PermissionResolver | None = getattr(
            request.app.state, "permission_resolver", None
        )
        if resolver is None:
            logger.error("Permission resolver not initialized; denying request")
            return deny_response(
                AccessDecision.deny(
                    DenyReason.STORE_UNAVAILABLE, "Permission store unavailable"
                )
            )

        identity = getattr(request.state, "identity", None)
        decision = await resolver.resolve(identity, request.method, path)
        if not decision.allowed:
            return deny_response(decision)

        request.state.endpoint = decision.endpoint
        return await call_next(request)
