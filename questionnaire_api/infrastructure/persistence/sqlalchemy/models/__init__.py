"""
SQLAlchemy models package.

Importing this package registers every model with the shared metadata.
"""

from questionnaire_api.infrastructure.persistence.sqlalchemy.config.base import Base
from questionnaire_api.infrastructure.persistence.sqlalchemy.models.analysis import DSSAnalysisModel
from questionnaire_api.infrastructure.persistence.sqlalchemy.models.mbti import (
    MBTIQuestionModel,
    MBTITypeModel,
    UserMBTIModel,
)
from questionnaire_api.infrastructure.persistence.sqlalchemy.models.questionnaire import (
    AnswerModel,
    QuestionModel,
    QuestionnaireModel,
    QuestionnaireResponseModel,
    QuestionOptionModel,
)
from questionnaire_api.infrastructure.persistence.sqlalchemy.models.rbac import (
    EndpointModel,
    RoleModel,
    RolePrivilegeModel,
)
from questionnaire_api.infrastructure.persistence.sqlalchemy.models.user import UserModel

__all__ = [
    "AnswerModel",
    "Base",
    "DSSAnalysisModel",
    "EndpointModel",
    "MBTIQuestionModel",
    "MBTITypeModel",
    "QuestionModel",
    "QuestionOptionModel",
    "QuestionnaireModel",
    "QuestionnaireResponseModel",
    "RoleModel",
    "RolePrivilegeModel",
    "UserMBTIModel",
    "UserModel",
]
