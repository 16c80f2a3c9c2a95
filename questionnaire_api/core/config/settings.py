"""
Application settings module.

This module provides configuration settings for the application, including
security settings, database connection, RBAC tuning and environment-specific values.
"""

# Standard Library Imports
import logging
import os
import secrets
from typing import Self

# Third-Party Imports
from pydantic import Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

ASYNC_DRIVERS = ("sqlite+aiosqlite", "postgresql+asyncpg")


class Settings(BaseSettings):
    """Application settings using Pydantic for validation and environment variable loading."""

    # API Information
    API_TITLE: str = "Questionnaire API"
    API_DESCRIPTION: str = "API for managing questionnaires, responses and MBTI assessments"
    API_VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"

    # Environment
    ENVIRONMENT: str = "development"  # development, test, production
    DEBUG: bool = False

    # Server Settings
    SERVER_HOST: str = "127.0.0.1"
    SERVER_PORT: int = 8000
    UVICORN_WORKERS: int = 1

    # Security Settings
    JWT_SECRET_KEY: SecretStr = Field(default_factory=lambda: SecretStr(secrets.token_urlsafe(64)))
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    JWT_ISSUER: str | None = None
    JWT_AUDIENCE: str | None = None
    PASSWORD_HASHING_SCHEMES: list[str] = ["bcrypt"]

    # Paths that bypass authentication and authorization (exact match).
    # PUBLIC_PATHS are absolute; PUBLIC_API_PATHS are relative to API_V1_STR.
    PUBLIC_PATHS: list[str] = Field(default_factory=lambda: [
        "/",
        "/openapi.json",
        "/docs",
        "/docs/oauth2-redirect",
        "/redoc",
    ])
    PUBLIC_API_PATHS: list[str] = Field(default_factory=lambda: [
        "/health",
        "/auth/login",
        "/auth/register",
    ])

    # CORS Settings
    BACKEND_CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:8000"]
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: list[str] = ["*"]
    CORS_ALLOW_HEADERS: list[str] = ["*"]

    # Security Headers
    SECURITY_HEADERS: dict[str, str] = {
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "DENY",
        "Referrer-Policy": "strict-origin-when-cross-origin",
        "Cache-Control": "no-store",
    }

    # Database Settings
    DATABASE_URL: str = "sqlite+aiosqlite:///./questionnaire.db"
    ASYNC_DATABASE_URL: str | None = None  # Derived from DATABASE_URL if None
    DB_ECHO_LOG: bool = False

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_TO_FILE: bool = True

    # RBAC
    RBAC_ROUTE_TABLE_TTL_SECONDS: float = 30.0  # 0 disables time-based refresh

    # Bootstrap data
    SEED_DEFAULTS: bool = True
    DEFAULT_ROLE_NAME: str | None = "member"
    BOOTSTRAP_ADMIN_USERNAME: str | None = None
    BOOTSTRAP_ADMIN_EMAIL: str = "admin@example.com"
    BOOTSTRAP_ADMIN_PASSWORD: SecretStr | None = None

    # Monitoring and Error Tracking (Sentry)
    SENTRY_DSN: str | None = None
    SENTRY_TRACES_SAMPLE_RATE: float = 0.2

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    def validate_log_level(cls, v: str) -> str:
        """Validate that log level is one of the valid levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()

    @field_validator("API_V1_STR")
    def validate_api_prefix(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError("API_V1_STR must start with '/'")
        return v.rstrip("/")

    @model_validator(mode="after")
    def ensure_async_database_url(self) -> Self:
        """Ensure ASYNC_DATABASE_URL is set properly from DATABASE_URL."""
        if not self.ASYNC_DATABASE_URL:
            db_url = self.DATABASE_URL
            if db_url.startswith("sqlite:///"):
                db_url = db_url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
            elif db_url.startswith("postgresql://"):
                db_url = db_url.replace("postgresql://", "postgresql+asyncpg://", 1)
            self.ASYNC_DATABASE_URL = db_url

        if not self.ASYNC_DATABASE_URL.startswith(ASYNC_DRIVERS):
            raise ValueError(
                f"Database URL must use one of the async drivers {ASYNC_DRIVERS}"
            )

        if self.ENVIRONMENT in ("production", "test"):
            self.DEBUG = False

        return self

    @property
    def is_test(self) -> bool:
        return self.ENVIRONMENT == "test"

    @property
    def public_paths(self) -> frozenset[str]:
        """Every public path, with the API paths placed under ``API_V1_STR``."""
        api_paths = (f"{self.API_V1_STR}{path}" for path in self.PUBLIC_API_PATHS)
        return frozenset([*self.PUBLIC_PATHS, *api_paths])


# Create a global settings instance
settings = Settings()


def get_settings() -> Settings:
    """
    Return the application settings instance.

    Used as a FastAPI dependency so tests can override it. When the process runs
    under pytest, the global instance is switched to an in-memory test database.
    """
    if os.environ.get("ENVIRONMENT") == "test" and ":memory:" not in settings.ASYNC_DATABASE_URL:
        logger.info("Running in TEST environment, using in-memory SQLite")
        settings.ENVIRONMENT = "test"
        settings.DATABASE_URL = "sqlite+aiosqlite:///:memory:"
        settings.ASYNC_DATABASE_URL = settings.DATABASE_URL
        settings.SENTRY_DSN = None
        settings.LOG_TO_FILE = False
    return settings
