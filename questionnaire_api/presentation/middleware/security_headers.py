"""
Security headers implementation for API protection.

This module provides middleware for adding security-related HTTP headers
to responses, helping to protect against common web vulnerabilities.
"""

import logging
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

DEFAULT_SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Cache-Control": "no-store",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adds the configured security headers to every response."""

    def __init__(self, app: ASGIApp, security_headers: dict[str, str] | None = None):
        """
        Args:
            app: The ASGI application
            security_headers: Headers to use instead of the defaults
        """
        super().__init__(app)
        self.headers = (
            security_headers if security_headers is not None else DEFAULT_SECURITY_HEADERS
        )

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        response: Response = await call_next(request)
        for header_name, header_value in self.headers.items():
            response.headers[header_name] = header_value
        return response
