from fastapi import APIRouter, status

from questionnaire_api.presentation.api.dependencies.services import (
    IdentityDep,
    QuestionnaireServiceDep,
)
from questionnaire_api.presentation.api.schemas.questionnaire import (
    QuestionnaireCreateSchema,
    QuestionnaireResponseSchema,
)

router = APIRouter()


@router.post("", response_model=QuestionnaireResponseSchema, status_code=status.HTTP_201_CREATED)
async def create_questionnaire(
    payload: QuestionnaireCreateSchema,
    identity: IdentityDep,
    service: QuestionnaireServiceDep,
):
    questionnaire = await service.create_questionnaire(
        payload.title, payload.description, created_by=identity.user_id
    )
    return QuestionnaireResponseSchema.model_validate(questionnaire)


@router.get("", response_model=list[QuestionnaireResponseSchema])
async def list_questionnaires(service: QuestionnaireServiceDep):
    return [
        QuestionnaireResponseSchema.model_validate(q)
        for q in await service.list_questionnaires()
    ]
