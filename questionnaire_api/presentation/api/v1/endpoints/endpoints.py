"""
Endpoint catalogue administration.

New endpoints take effect for authorization as soon as they are registered.
"""

from fastapi import APIRouter, status

from questionnaire_api.presentation.api.dependencies.services import AccessControlServiceDep
from questionnaire_api.presentation.api.schemas.rbac import (
    EndpointCreateSchema,
    EndpointResponseSchema,
)

router = APIRouter()


@router.post(
    "",
    response_model=EndpointResponseSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Register a protected endpoint",
)
async def create_endpoint(payload: EndpointCreateSchema, service: AccessControlServiceDep):
    endpoint = await service.register_endpoint(payload.url, payload.method, payload.description)
    return EndpointResponseSchema.model_validate(endpoint)


@router.get("", response_model=list[EndpointResponseSchema])
async def list_endpoints(service: AccessControlServiceDep):
    return [EndpointResponseSchema.model_validate(e) for e in await service.list_endpoints()]
