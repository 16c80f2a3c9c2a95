"""
Main API router for version 1 of the Questionnaire API.

Aggregates all endpoint routers for this version.
"""

from fastapi import APIRouter

from questionnaire_api.presentation.api.v1.endpoints.answers import router as answers_router
from questionnaire_api.presentation.api.v1.endpoints.auth import router as auth_router
from questionnaire_api.presentation.api.v1.endpoints.dss import router as dss_router
from questionnaire_api.presentation.api.v1.endpoints.endpoints import router as endpoints_router
from questionnaire_api.presentation.api.v1.endpoints.health import router as health_router
from questionnaire_api.presentation.api.v1.endpoints.mbti import router as mbti_router
from questionnaire_api.presentation.api.v1.endpoints.questionnaires import (
    router as questionnaires_router,
)
from questionnaire_api.presentation.api.v1.endpoints.questions import router as questions_router
from questionnaire_api.presentation.api.v1.endpoints.role_privileges import (
    router as role_privileges_router,
)
from questionnaire_api.presentation.api.v1.endpoints.roles import router as roles_router

api_v1_router = APIRouter()

api_v1_router.include_router(health_router, prefix="/health", tags=["Health"])
api_v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
api_v1_router.include_router(roles_router, prefix="/roles", tags=["Access Control"])
api_v1_router.include_router(endpoints_router, prefix="/endpoints", tags=["Access Control"])
api_v1_router.include_router(
    role_privileges_router, prefix="/role_privileges", tags=["Access Control"]
)
api_v1_router.include_router(questionnaires_router, prefix="/questionnaire", tags=["Questionnaires"])
api_v1_router.include_router(questions_router, prefix="/questions", tags=["Questionnaires"])
api_v1_router.include_router(answers_router, prefix="/answers", tags=["Questionnaires"])
api_v1_router.include_router(dss_router, prefix="/dss", tags=["Analysis"])
api_v1_router.include_router(mbti_router, prefix="/mbti", tags=["MBTI"])
