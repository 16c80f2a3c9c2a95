from fastapi import APIRouter, status

from questionnaire_api.presentation.api.dependencies.services import AnswerServiceDep, IdentityDep
from questionnaire_api.presentation.api.schemas.questionnaire import (
    AnswerCreateSchema,
    AnswerResponseSchema,
)

router = APIRouter()


@router.post("", response_model=AnswerResponseSchema, status_code=status.HTTP_201_CREATED)
async def submit_answer(payload: AnswerCreateSchema, identity: IdentityDep, service: AnswerServiceDep):
    answer = await service.submit_answer(
        user_id=identity.user_id,
        questionnaire_id=payload.questionnaire_id,
        question_id=payload.question_id,
        answer_text=payload.answer_text,
        answer_option=payload.answer_option,
    )
    return AnswerResponseSchema.model_validate(answer)
