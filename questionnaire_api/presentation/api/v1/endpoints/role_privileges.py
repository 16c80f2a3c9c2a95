from fastapi import APIRouter

from questionnaire_api.domain.entities.rbac import Privilege
from questionnaire_api.presentation.api.dependencies.services import AccessControlServiceDep
from questionnaire_api.presentation.api.schemas.rbac import (
    MessageResponseSchema,
    PrivilegeSchema,
)

router = APIRouter()


@router.post("", response_model=MessageResponseSchema, summary="Assign or update role privileges")
async def set_role_privileges(payload: PrivilegeSchema, service: AccessControlServiceDep):
    await service.set_privileges(Privilege(**payload.model_dump()))
    return MessageResponseSchema(message="Role privileges updated successfully")


@router.get("/{role_id}", response_model=list[PrivilegeSchema])
async def list_role_privileges(role_id: int, service: AccessControlServiceDep):
    return [PrivilegeSchema.model_validate(p) for p in await service.list_role_privileges(role_id)]
