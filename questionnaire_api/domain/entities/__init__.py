"""Domain entities."""

from questionnaire_api.domain.entities.analysis import AnalysisResult, OptionTally
from questionnaire_api.domain.entities.identity import IdentityContext
from questionnaire_api.domain.entities.mbti import (
    Dimension,
    Direction,
    MBTIAnswer,
    MBTIQuestion,
    MBTIType,
    UserMBTI,
)
from questionnaire_api.domain.entities.questionnaire import (
    Answer,
    Question,
    Questionnaire,
    QuestionnaireResponse,
    QuestionOption,
    QuestionType,
)
from questionnaire_api.domain.entities.rbac import Endpoint, Grant, HttpMethod, Privilege, Role
from questionnaire_api.domain.entities.user import User

__all__ = [
    "AnalysisResult",
    "Answer",
    "Dimension",
    "Direction",
    "Endpoint",
    "Grant",
    "HttpMethod",
    "IdentityContext",
    "MBTIAnswer",
    "MBTIQuestion",
    "MBTIType",
    "OptionTally",
    "Privilege",
    "Question",
    "QuestionOption",
    "Questionnaire",
    "QuestionnaireResponse",
    "QuestionType",
    "Role",
    "User",
    "UserMBTI",
]
