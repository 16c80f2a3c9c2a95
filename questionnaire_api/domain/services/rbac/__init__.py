"""Role-based access control services."""

from questionnaire_api.domain.services.rbac.decision import AccessDecision, DenyReason
from questionnaire_api.domain.services.rbac.endpoint_registry import EndpointRegistry
from questionnaire_api.domain.services.rbac.pattern_matcher import (
    CompiledTemplate,
    Segment,
    SegmentKind,
    compile_template,
)
from questionnaire_api.domain.services.rbac.permission_resolver import (
    METHOD_GRANTS,
    PermissionResolver,
)
from questionnaire_api.domain.services.rbac.route_table import RouteTable

__all__ = [
    "AccessDecision",
    "CompiledTemplate",
    "DenyReason",
    "EndpointRegistry",
    "METHOD_GRANTS",
    "PermissionResolver",
    "RouteTable",
    "Segment",
    "SegmentKind",
    "compile_template",
]
