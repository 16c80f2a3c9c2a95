"""
Route table.

An immutable, precompiled snapshot of the endpoint catalogue used to resolve a
concrete request to its declared endpoint.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from questionnaire_api.domain.entities.rbac import Endpoint
from questionnaire_api.domain.exceptions import MalformedTemplateError
from questionnaire_api.domain.services.rbac.pattern_matcher import (
    CompiledTemplate,
    compile_template,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Route:
    endpoint: Endpoint
    compiled: CompiledTemplate


class RouteTable:
    """
    Precompiled endpoint matchers in declaration order.

    Endpoints whose templates are malformed are logged and left out, so they
    never match any request.
    """

    def __init__(self, routes: Iterable[Route] = ()):
        self._routes: tuple[Route, ...] = tuple(routes)

    @classmethod
    def build(cls, endpoints: Iterable[Endpoint]) -> "RouteTable":
        routes = []
        for endpoint in sorted(endpoints, key=lambda e: e.endpoint_id):
            try:
                compiled = compile_template(endpoint.url)
            except MalformedTemplateError as e:
                logger.warning(
                    "Skipping endpoint %s (%s %s): %s",
                    endpoint.endpoint_id,
                    endpoint.method,
                    endpoint.url,
                    e.message,
                )
                continue
            routes.append(Route(endpoint=endpoint, compiled=compiled))
        return cls(routes)

    def __len__(self) -> int:
        return len(self._routes)

    @property
    def routes(self) -> tuple[Route, ...]:
        return self._routes

    def match(self, method: str, path: str) -> Endpoint | None:
        """
        Find the first declared endpoint matching ``method`` and ``path``.

        Args:
            method: HTTP method, compared case-insensitively
            path: Concrete request path without query string

        Returns:
            The matching Endpoint, or None
        """
        method = method.upper()
        for route in self._routes:
            if route.endpoint.method == method and route.compiled.matches(path):
                return route.endpoint
        return None
