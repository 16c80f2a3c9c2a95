"""Application services."""

from questionnaire_api.application.services.access_control_service import AccessControlService
from questionnaire_api.application.services.analysis_service import AnalysisService
from questionnaire_api.application.services.answer_service import AnswerService
from questionnaire_api.application.services.auth_service import AuthService, LoginResult
from questionnaire_api.application.services.mbti_service import MBTIService
from questionnaire_api.application.services.questionnaire_service import QuestionnaireService

__all__ = [
    "AccessControlService",
    "AnalysisService",
    "AnswerService",
    "AuthService",
    "LoginResult",
    "MBTIService",
    "QuestionnaireService",
]
