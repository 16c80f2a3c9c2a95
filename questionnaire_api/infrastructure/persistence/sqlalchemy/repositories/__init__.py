"""SQLAlchemy repository implementations."""

from questionnaire_api.infrastructure.persistence.sqlalchemy.repositories.analysis_repository import (
    SQLAlchemyAnalysisRepository,
)
from questionnaire_api.infrastructure.persistence.sqlalchemy.repositories.endpoint_repository import (
    SQLAlchemyEndpointRepository,
)
from questionnaire_api.infrastructure.persistence.sqlalchemy.repositories.mbti_repository import (
    SQLAlchemyMBTIRepository,
)
from questionnaire_api.infrastructure.persistence.sqlalchemy.repositories.privilege_repository import (
    SQLAlchemyPrivilegeRepository,
)
from questionnaire_api.infrastructure.persistence.sqlalchemy.repositories.questionnaire_repository import (
    SQLAlchemyQuestionnaireRepository,
)
from questionnaire_api.infrastructure.persistence.sqlalchemy.repositories.response_repository import (
    SQLAlchemyResponseRepository,
)
from questionnaire_api.infrastructure.persistence.sqlalchemy.repositories.role_repository import (
    SQLAlchemyRoleRepository,
)
from questionnaire_api.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    SQLAlchemyUserRepository,
)

__all__ = [
    "SQLAlchemyAnalysisRepository",
    "SQLAlchemyEndpointRepository",
    "SQLAlchemyMBTIRepository",
    "SQLAlchemyPrivilegeRepository",
    "SQLAlchemyQuestionnaireRepository",
    "SQLAlchemyResponseRepository",
    "SQLAlchemyRoleRepository",
    "SQLAlchemyUserRepository",
]
