from fastapi import APIRouter, status

from questionnaire_api.domain.entities.mbti import MBTIAnswer
from questionnaire_api.presentation.api.dependencies.services import IdentityDep, MBTIServiceDep
from questionnaire_api.presentation.api.schemas.mbti import (
    MBTIQuestionSchema,
    MBTIResultSchema,
    MBTISubmitRequestSchema,
    UserTypeResponseSchema,
)

router = APIRouter()


@router.get("/questions", response_model=list[MBTIQuestionSchema])
async def list_mbti_questions(service: MBTIServiceDep):
    return [MBTIQuestionSchema.model_validate(q) for q in await service.list_questions()]


@router.post("/submit", response_model=MBTIResultSchema, status_code=status.HTTP_201_CREATED)
async def submit_mbti(
    payload: MBTISubmitRequestSchema, identity: IdentityDep, service: MBTIServiceDep
):
    result = await service.submit(
        identity.user_id,
        [MBTIAnswer(question_id=a.question_id, response=a.response) for a in payload.answers],
    )
    return MBTIResultSchema(type=result.type_name, description=result.description)


@router.get("/user-type", response_model=UserTypeResponseSchema)
async def get_user_type(identity: IdentityDep, service: MBTIServiceDep):
    result = await service.get_user_type(identity.user_id)
    return UserTypeResponseSchema(type_name=result.type_name, description=result.description)
