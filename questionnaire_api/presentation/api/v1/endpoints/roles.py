from fastapi import APIRouter, status

from questionnaire_api.presentation.api.dependencies.services import AccessControlServiceDep
from questionnaire_api.presentation.api.schemas.rbac import RoleCreateSchema, RoleResponseSchema

router = APIRouter()


@router.post("", response_model=RoleResponseSchema, status_code=status.HTTP_201_CREATED)
async def create_role(payload: RoleCreateSchema, service: AccessControlServiceDep):
    return RoleResponseSchema.model_validate(
        await service.create_role(payload.role_name, payload.description)
    )


@router.get("", response_model=list[RoleResponseSchema])
async def list_roles(service: AccessControlServiceDep):
    return [RoleResponseSchema.model_validate(r) for r in await service.list_roles()]
