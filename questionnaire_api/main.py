"""
Questionnaire API application.

Main entry point used by Uvicorn (``questionnaire_api.main:app``).
"""

import logging

import uvicorn

from questionnaire_api.app_factory import create_application
from questionnaire_api.core.config.settings import get_settings

logger = logging.getLogger(__name__)

# This is the exported app that Uvicorn will use when run with "questionnaire_api.main:app"
app = create_application()

if __name__ == "__main__":
    settings = get_settings()

    logger.info(
        f"Starting Uvicorn server. Host: {settings.SERVER_HOST}, Port: {settings.SERVER_PORT}, LogLevel: {settings.LOG_LEVEL.lower()}"
    )
    uvicorn.run(
        "questionnaire_api.main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        reload=settings.ENVIRONMENT == "development",
        log_level=settings.LOG_LEVEL.lower(),
        workers=settings.UVICORN_WORKERS,
    )
