"""
Application Factory Module.

This module contains the factory function for creating a FastAPI application
with all necessary middleware, routers, and dependencies.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import sentry_sdk
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from questionnaire_api.core.config.settings import Settings, get_settings
from questionnaire_api.core.logging_config import build_logging_config, setup_logging
from questionnaire_api.domain.exceptions import (
    AuthenticationError,
    BaseApplicationError,
    DuplicateEntityError,
    EntityNotFoundError,
    StoreUnavailableError,
    ValidationError,
)
from questionnaire_api.domain.services.rbac.endpoint_registry import EndpointRegistry
from questionnaire_api.domain.services.rbac.permission_resolver import PermissionResolver
from questionnaire_api.infrastructure.persistence.sqlalchemy.database import (
    create_engine_and_session_factory,
    create_tables,
)
from questionnaire_api.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyEndpointRepository,
    SQLAlchemyPrivilegeRepository,
)
from questionnaire_api.infrastructure.persistence.sqlalchemy.seed import seed_defaults
from questionnaire_api.infrastructure.security.jwt.jwt_service import get_jwt_service
from questionnaire_api.infrastructure.security.password.password_handler import PasswordHandler
from questionnaire_api.presentation.api.v1.api_router import api_v1_router
from questionnaire_api.presentation.middleware.authentication import AuthenticationMiddleware
from questionnaire_api.presentation.middleware.authorization import AuthorizationMiddleware
from questionnaire_api.presentation.middleware.logging import LoggingMiddleware
from questionnaire_api.presentation.middleware.request_id import RequestIdMiddleware
from questionnaire_api.presentation.middleware.security_headers import SecurityHeadersMiddleware

logger = logging.getLogger(__name__)

# Application error type -> HTTP status; first match in MRO order wins
ERROR_STATUS: dict[type[BaseApplicationError], int] = {
    ValidationError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    EntityNotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateEntityError: status.HTTP_409_CONFLICT,
    StoreUnavailableError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def _initialize_sentry(settings: Settings) -> None:
    """Initializes Sentry if DSN is provided."""
    if settings.SENTRY_DSN:
        logger.info("Sentry DSN found, initializing Sentry.")
        sentry_sdk.init(
            dsn=settings.SENTRY_DSN,
            traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
            environment=settings.ENVIRONMENT,
            release=settings.API_VERSION,
        )
    else:
        logger.info("Sentry DSN not provided, skipping Sentry initialization.")


@asynccontextmanager
async def lifespan(fastapi_app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Lifespan context manager for FastAPI application.

    Handles application startup and shutdown operations:
    1. Creates the database engine and session factory, and the schema
    2. Seeds bootstrap data when enabled
    3. Builds the endpoint registry and permission resolver
    4. Disposes the engine on shutdown
    """
    current_settings: Settings = fastapi_app.state.settings
    logger.info(f"Starting application in {current_settings.ENVIRONMENT} environment")

    db_engine, session_factory = create_engine_and_session_factory(
        current_settings.ASYNC_DATABASE_URL, echo=current_settings.DB_ECHO_LOG
    )
    try:
        await create_tables(db_engine)
        if current_settings.SEED_DEFAULTS:
            await seed_defaults(session_factory, current_settings)

        registry = EndpointRegistry(
            SQLAlchemyEndpointRepository(session_factory),
            ttl_seconds=current_settings.RBAC_ROUTE_TABLE_TTL_SECONDS,
        )
        fastapi_app.state.db_engine = db_engine
        fastapi_app.state.session_factory = session_factory
        fastapi_app.state.endpoint_registry = registry
        fastapi_app.state.permission_resolver = PermissionResolver(
            registry, SQLAlchemyPrivilegeRepository(session_factory)
        )
        logger.info("Application startup complete")

        yield
    finally:
        logger.info("Disposing database engine...")
        await db_engine.dispose()
        fastapi_app.state.permission_resolver = None
        fastapi_app.state.session_factory = None
        logger.info("Application shutdown complete")


def _register_exception_handlers(app_instance: FastAPI) -> None:
    @app_instance.exception_handler(BaseApplicationError)
    async def application_error_handler(
        request: Request, exc: BaseApplicationError
    ) -> JSONResponse:
        for error_type in type(exc).__mro__:
            if error_type in ERROR_STATUS:
                status_code = ERROR_STATUS[error_type]
                break
        else:
            status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

        if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(f"Unhandled application error: {type(exc).__name__}: {exc}")
            return JSONResponse(
                status_code=status_code,
                content={"detail": "An internal server error occurred."},
            )

        headers = None
        if status_code == status.HTTP_401_UNAUTHORIZED:
            headers = {"WWW-Authenticate": "Bearer"}
        logger.info(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status_code, content={"detail": exc.message}, headers=headers
        )

    @app_instance.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        logger.info(f"HTTP Exception: {exc.status_code} - {exc.detail}")
        if exc.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
            return JSONResponse(
                status_code=exc.status_code,
                content={"detail": "An internal server error occurred."},
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": str(exc.detail)},
            headers=exc.headers or {},
        )

    @app_instance.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle validation errors with detailed information."""
        logger.info(f"Request validation failed on {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    @app_instance.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """
        Handle all unhandled exceptions with a generic error message.

        No stack traces or exception details are leaked to clients.
        """
        logger.error(
            f"Unhandled exception: {type(exc).__name__}: {exc}", exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "An internal server error occurred."},
        )


def create_application(settings_override: Settings | None = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings_override: Override default settings (useful for testing)

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    current_settings = settings_override or get_settings()

    setup_logging(
        build_logging_config(
            level=current_settings.LOG_LEVEL,
            log_dir=current_settings.LOG_DIR if current_settings.LOG_TO_FILE else None,
        )
    )
    _initialize_sentry(current_settings)

    app_instance = FastAPI(
        title=current_settings.API_TITLE,
        description=current_settings.API_DESCRIPTION,
        version=current_settings.API_VERSION,
        openapi_url="/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        debug=current_settings.DEBUG,
    )
    app_instance.state.settings = current_settings
    app_instance.state.jwt_service = get_jwt_service(current_settings)
    app_instance.state.password_handler = PasswordHandler(
        schemes=current_settings.PASSWORD_HASHING_SCHEMES
    )

    _register_exception_handlers(app_instance)

    # Middleware added last runs first: CORS, security headers, request id,
    # logging, authentication, then authorization closest to the routes.
    public_paths = current_settings.public_paths
    app_instance.add_middleware(AuthorizationMiddleware, public_paths=public_paths)
    app_instance.add_middleware(
        AuthenticationMiddleware,
        jwt_service=app_instance.state.jwt_service,
        public_paths=public_paths,
    )
    app_instance.add_middleware(LoggingMiddleware)
    app_instance.add_middleware(RequestIdMiddleware)
    app_instance.add_middleware(
        SecurityHeadersMiddleware, security_headers=current_settings.SECURITY_HEADERS
    )
    if current_settings.BACKEND_CORS_ORIGINS:
        app_instance.add_middleware(
            CORSMiddleware,
            allow_origins=[str(origin) for origin in current_settings.BACKEND_CORS_ORIGINS],
            allow_credentials=current_settings.CORS_ALLOW_CREDENTIALS,
            allow_methods=current_settings.CORS_ALLOW_METHODS,
            allow_headers=current_settings.CORS_ALLOW_HEADERS,
        )

    app_instance.include_router(api_v1_router, prefix=current_settings.API_V1_STR)

    @app_instance.get("/", include_in_schema=False)
    async def root():
        return {"message": f"Welcome to the {current_settings.API_TITLE}. See /docs for API documentation."}

    logger.info(f"Application created with API prefix {current_settings.API_V1_STR}")
    return app_instance
