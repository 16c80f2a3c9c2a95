"""Domain repository interfaces."""

from questionnaire_api.domain.repositories.analysis_repository import AnalysisRepository
from questionnaire_api.domain.repositories.endpoint_repository import EndpointRepository
from questionnaire_api.domain.repositories.mbti_repository import MBTIRepository
from questionnaire_api.domain.repositories.privilege_repository import PrivilegeRepository
from questionnaire_api.domain.repositories.questionnaire_repository import (
    QuestionnaireRepository,
)
from questionnaire_api.domain.repositories.response_repository import ResponseRepository
from questionnaire_api.domain.repositories.role_repository import RoleRepository
from questionnaire_api.domain.repositories.user_repository import UserRepository

__all__ = [
    "AnalysisRepository",
    "EndpointRepository",
    "MBTIRepository",
    "PrivilegeRepository",
    "QuestionnaireRepository",
    "ResponseRepository",
    "RoleRepository",
    "UserRepository",
]
