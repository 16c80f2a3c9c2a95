"""
Service Dependencies.

FastAPI dependency providers that build repositories and application services
from the objects the lifespan places on ``app.state``.
"""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from questionnaire_api.application.services import (
    AccessControlService,
    AnalysisService,
    AnswerService,
    AuthService,
    MBTIService,
    QuestionnaireService,
)
from questionnaire_api.core.config.settings import Settings
from questionnaire_api.domain.entities.identity import IdentityContext
from questionnaire_api.domain.exceptions import AuthenticationError
from questionnaire_api.domain.services.rbac.endpoint_registry import EndpointRegistry
from questionnaire_api.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyAnalysisRepository,
    SQLAlchemyEndpointRepository,
    SQLAlchemyMBTIRepository,
    SQLAlchemyPrivilegeRepository,
    SQLAlchemyQuestionnaireRepository,
    SQLAlchemyResponseRepository,
    SQLAlchemyRoleRepository,
    SQLAlchemyUserRepository,
)
from questionnaire_api.infrastructure.security.jwt.jwt_service import JWTService
from questionnaire_api.infrastructure.security.password.password_handler import PasswordHandler


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_session_factory(request: Request) -> async_sessionmaker[AsyncSession]:
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Database not initialized. Session factory missing from app state.")
    return session_factory


def get_endpoint_registry(request: Request) -> EndpointRegistry:
    return request.app.state.endpoint_registry


def get_jwt_service(request: Request) -> JWTService:
    return request.app.state.jwt_service


def get_password_handler(request: Request) -> PasswordHandler:
    return request.app.state.password_handler


def get_current_identity(request: Request) -> IdentityContext:
    """Identity set by the authentication middleware."""
    identity = getattr(request.state, "identity", None)
    if identity is None:
        raise AuthenticationError("Authentication required")
    return identity


SessionFactoryDep = Annotated[async_sessionmaker[AsyncSession], Depends(get_session_factory)]
IdentityDep = Annotated[IdentityContext, Depends(get_current_identity)]


def get_auth_service(
    request: Request,
    session_factory: SessionFactoryDep,
    jwt_service: Annotated[JWTService, Depends(get_jwt_service)],
    password_handler: Annotated[PasswordHandler, Depends(get_password_handler)],
) -> AuthService:
    settings = get_app_settings(request)
    return AuthService(
        user_repository=SQLAlchemyUserRepository(session_factory),
        role_repository=SQLAlchemyRoleRepository(session_factory),
        password_handler=password_handler,
        jwt_service=jwt_service,
        default_role_name=settings.DEFAULT_ROLE_NAME,
    )


def get_access_control_service(
    session_factory: SessionFactoryDep,
    registry: Annotated[EndpointRegistry, Depends(get_endpoint_registry)],
) -> AccessControlService:
    return AccessControlService(
        role_repository=SQLAlchemyRoleRepository(session_factory),
        endpoint_repository=SQLAlchemyEndpointRepository(session_factory),
        privilege_repository=SQLAlchemyPrivilegeRepository(session_factory),
        registry=registry,
    )


def get_questionnaire_service(session_factory: SessionFactoryDep) -> QuestionnaireService:
    return QuestionnaireService(SQLAlchemyQuestionnaireRepository(session_factory))


def get_answer_service(session_factory: SessionFactoryDep) -> AnswerService:
    return AnswerService(
        questionnaire_repository=SQLAlchemyQuestionnaireRepository(session_factory),
        response_repository=SQLAlchemyResponseRepository(session_factory),
    )


def get_analysis_service(session_factory: SessionFactoryDep) -> AnalysisService:
    return AnalysisService(
        questionnaire_repository=SQLAlchemyQuestionnaireRepository(session_factory),
        analysis_repository=SQLAlchemyAnalysisRepository(session_factory),
    )


def get_mbti_service(session_factory: SessionFactoryDep) -> MBTIService:
    return MBTIService(SQLAlchemyMBTIRepository(session_factory))


# Type hints for dependency injection using Annotated pattern
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
AccessControlServiceDep = Annotated[AccessControlService, Depends(get_access_control_service)]
QuestionnaireServiceDep = Annotated[QuestionnaireService, Depends(get_questionnaire_service)]
AnswerServiceDep = Annotated[AnswerService, Depends(get_answer_service)]
AnalysisServiceDep = Annotated[AnalysisService, Depends(get_analysis_service)]
MBTIServiceDep = Annotated[MBTIService, Depends(get_mbti_service)]
