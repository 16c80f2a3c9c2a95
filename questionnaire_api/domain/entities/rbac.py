"""
RBAC entities.

Endpoints, roles and privilege rows as seen by the permission resolver.
Following clean architecture principles, this module has no dependency on
infrastructure or presentation code.
"""

import enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class HttpMethod(str, enum.Enum):
    """HTTP methods an endpoint may be registered for."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class Grant(str, enum.Enum):
    """The four independent permissions attached to a (role, endpoint) pair."""

    CREATE = "can_create"
    READ = "can_read"
    UPDATE = "can_update"
    DELETE = "can_delete"


class Endpoint(BaseModel):
    """A declared (URL template, HTTP method) pair representing one protected operation."""

    model_config = ConfigDict(frozen=True)

    endpoint_id: int
    url: str = Field(..., description="URL template, may contain :name or {name} placeholders")
    method: str = Field(..., description="Uppercase HTTP method")
    description: str | None = None

    @field_validator("method")
    @classmethod
    def normalize_method(cls, v: str) -> str:
        return v.upper()


class Role(BaseModel):
    """A named role referenced by users and privilege rows."""

    model_config = ConfigDict(frozen=True)

    role_id: int
    role_name: str
    description: str | None = None


class Privilege(BaseModel):
    """
    The persisted set of four grants for one (role, endpoint) pair.

    A missing row is equivalent to a row with every grant set to False.
    """

    model_config = ConfigDict(frozen=True)

    role_id: int
    endpoint_id: int
    can_create: bool = False
    can_read: bool = False
    can_update: bool = False
    can_delete: bool = False

    def allows(self, grant: Grant) -> bool:
        return bool(getattr(self, grant.value))
