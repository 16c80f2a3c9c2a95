"""
In-Memory Repository Implementations.

In-memory implementations of the RBAC repository interfaces, used for
testing, development, and scenarios where persistent storage is not required.
"""

from questionnaire_api.infrastructure.repositories.memory.rbac_repositories import (
    InMemoryEndpointRepository,
    InMemoryPrivilegeRepository,
    InMemoryRoleRepository,
)

__all__ = [
    "InMemoryEndpointRepository",
    "InMemoryPrivilegeRepository",
    "InMemoryRoleRepository",
]
