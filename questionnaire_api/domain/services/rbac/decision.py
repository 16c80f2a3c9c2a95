"""
Access decision value objects.
"""

import enum
from dataclasses import dataclass

from questionnaire_api.domain.entities.rbac import Endpoint


class DenyReason(str, enum.Enum):
    """Why a request was denied."""

    MISSING_IDENTITY = "missing_identity"
    ENDPOINT_NOT_FOUND = "endpoint_not_found"
    NO_PRIVILEGE_CONFIGURED = "no_privilege_configured"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    INSUFFICIENT_PERMISSION = "insufficient_permission"
    STORE_UNAVAILABLE = "store_unavailable"


@dataclass(frozen=True)
class AccessDecision:
    """Outcome of a permission check."""

    allowed: bool
    reason: DenyReason | None = None
    message: str = ""
    endpoint: Endpoint | None = None

    @classmethod
    def allow(cls, endpoint: Endpoint) -> "AccessDecision":
        return cls(allowed=True, message="Access granted", endpoint=endpoint)

    @classmethod
    def deny(
        cls, reason: DenyReason, message: str, endpoint: Endpoint | None = None
    ) -> "AccessDecision":
        return cls(allowed=False, reason=reason, message=message, endpoint=endpoint)
