"""
Pydantic schemas for roles, endpoints and role privileges.
"""

from pydantic import BaseModel, ConfigDict, Field


class RoleCreateSchema(BaseModel):
    role_name: str = Field(..., min_length=1, max_length=100)
    description: str | None = None


class RoleResponseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    role_id: int
    role_name: str
    description: str | None = None


class EndpointCreateSchema(BaseModel):
    url: str = Field(..., min_length=1, max_length=255, description="URL template, e.g. /api/v1/questions/:questionnaire_id")
    method: str = Field(..., description="HTTP method")
    description: str | None = None


class EndpointResponseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    endpoint_id: int
    url: str
    method: str
    description: str | None = None


class PrivilegeSchema(BaseModel):
    """Grants of a role on an endpoint; omitted grants default to false."""

    model_config = ConfigDict(from_attributes=True)

    role_id: int
    endpoint_id: int
    can_create: bool = False
    can_read: bool = False
    can_update: bool = False
    can_delete: bool = False


class MessageResponseSchema(BaseModel):
    message: str
