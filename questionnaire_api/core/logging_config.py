"""
Logging Configuration Module.

This module provides the central logging configuration dictionary for the application.
Credentials are masked by a filter on every handler so tokens and passwords never
reach the log output in plain text.
"""

import copy
import logging
import logging.config
import os
from pathlib import Path
from typing import Any

# Get log level from environment or default to INFO
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("LOG_DIR", "logs")

LOGGING_CONFIG_BASE: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "[%(asctime)s] [%(levelname)s] [%(name)s] [%(request_id)s] - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
        "detailed": {
            "format": "[%(asctime)s] [%(levelname)s] [%(name)s:%(lineno)d] [%(request_id)s] - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "filters": {
        "credential_redactor": {
            "()": "questionnaire_api.core.utils.logging.CredentialRedactingFilter",
        },
        "request_id": {
            "()": "questionnaire_api.core.utils.logging.RequestIdFilter",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": LOG_LEVEL,
            "formatter": "standard",
            "filters": ["request_id", "credential_redactor"],
            "stream": "ext://sys.stdout",
        },
        "file_handler": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": LOG_LEVEL,
            "formatter": "detailed",
            "filters": ["request_id", "credential_redactor"],
            "filename": str(Path(LOG_DIR) / "questionnaire_api.log"),
            "maxBytes": 10485760,  # 10MB
            "backupCount": 10,
            "encoding": "utf8",
            "delay": True,
        },
    },
    "loggers": {
        "questionnaire_api": {
            "level": LOG_LEVEL,
            "handlers": ["console", "file_handler"],
            "propagate": False,
        },
        "uvicorn": {
            "level": LOG_LEVEL,
            "handlers": ["console", "file_handler"],
            "propagate": False,
        },
        "sqlalchemy.engine": {
            "level": os.getenv("SQL_LOG_LEVEL", "WARNING"),
            "handlers": ["console"],
            "propagate": False,
        },
    },
}

LOGGING_CONFIG = copy.deepcopy(LOGGING_CONFIG_BASE)


def build_logging_config(
    level: str = LOG_LEVEL, log_dir: str | None = LOG_DIR
) -> dict[str, Any]:
    """
    Build a logging configuration for the given level.

    Args:
        level: Log level applied to handlers and application loggers
        log_dir: Directory for the rotating file handler; ``None`` disables file logging

    Returns:
        A dictConfig-compatible dictionary
    """
    config = copy.deepcopy(LOGGING_CONFIG_BASE)
    for handler in config["handlers"].values():
        handler["level"] = level
    for name in ("questionnaire_api", "uvicorn"):
        config["loggers"][name]["level"] = level

    if log_dir is None:
        del config["handlers"]["file_handler"]
        for logger_config in config["loggers"].values():
            logger_config["handlers"] = [
                h for h in logger_config["handlers"] if h != "file_handler"
            ]
    else:
        config["handlers"]["file_handler"]["filename"] = str(Path(log_dir) / "questionnaire_api.log")

    return config


def setup_logging(config: dict[str, Any] | None = None) -> None:
    """
    Configure the logging system with the provided configuration or default.

    Args:
        config: Optional logging configuration dictionary to use instead of the default
    """
    if config is None:
        config = LOGGING_CONFIG

    file_handler = config["handlers"].get("file_handler")
    if file_handler:
        Path(file_handler["filename"]).parent.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(config)

    logger = logging.getLogger(__name__)
    logger.debug("Logging configured successfully")
