from fastapi import APIRouter, status

from questionnaire_api.presentation.api.dependencies.services import AnalysisServiceDep
from questionnaire_api.presentation.api.schemas.questionnaire import (
    AnalysisRequestSchema,
    AnalysisResponseSchema,
)

router = APIRouter()


@router.post(
    "/submit",
    response_model=AnalysisResponseSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Tally selected options for a questionnaire",
)
async def submit_analysis(payload: AnalysisRequestSchema, service: AnalysisServiceDep):
    result = await service.submit_analysis(payload.questionnaire_id)
    return AnalysisResponseSchema.model_validate(result)
