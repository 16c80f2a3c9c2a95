from fastapi import APIRouter, status

from questionnaire_api.domain.entities.questionnaire import QuestionOption
from questionnaire_api.presentation.api.dependencies.services import QuestionnaireServiceDep
from questionnaire_api.presentation.api.schemas.questionnaire import (
    QuestionCreateSchema,
    QuestionResponseSchema,
)

router = APIRouter()


@router.post("", response_model=QuestionResponseSchema, status_code=status.HTTP_201_CREATED)
async def create_question(payload: QuestionCreateSchema, service: QuestionnaireServiceDep):
    question = await service.add_question(
        questionnaire_id=payload.questionnaire_id,
        question_text=payload.question_text,
        question_type=payload.question_type,
        options=[
            QuestionOption(option_text=o.text, is_correct=o.is_correct) for o in payload.options
        ],
    )
    return QuestionResponseSchema.model_validate(question)


@router.get("/{questionnaire_id}", response_model=list[QuestionResponseSchema])
async def list_questions(questionnaire_id: int, service: QuestionnaireServiceDep):
    return [
        QuestionResponseSchema.model_validate(q)
        for q in await service.list_questions(questionnaire_id)
    ]
