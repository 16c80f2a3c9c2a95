import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

# Strict allowlist of headers that are safe to log; never add Authorization or Cookie
SAFE_HEADERS_ALLOWLIST = {
    "accept",
    "accept-encoding",
    "accept-language",
    "user-agent",
}


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware logging one line per request without bodies or credentials."""

    def __init__(self, app: ASGIApp, logger: logging.Logger | None = None) -> None:
        super().__init__(app)
        self.logger = logger or logging.getLogger(__name__)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()
        request_id = getattr(request.state, "request_id", "N/A")
        safe_headers = {
            k: v for k, v in request.headers.items() if k.lower() in SAFE_HEADERS_ALLOWLIST
        }

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            self.logger.error(
                f"Request failed: {request.method} {request.url.path} {request_id} "
                f"| Duration: {duration_ms:.2f}ms | Error: {e}",
                exc_info=True,
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        self.logger.info(
            "Request finished: %s %s status=%s duration_ms=%.2f client=%s headers=%s",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            self._get_client_ip(request),
            safe_headers,
        )
        return response

    def _get_client_ip(self, request: Request) -> str:
        if request.client:
            return request.client.host
        return "N/A"
