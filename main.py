"""
Questionnaire API
=================
Simple entry point for running the application with ``uvicorn main:app``.

The actual FastAPI application is defined in questionnaire_api/main.py and imported here.
"""

from questionnaire_api.main import app

if __name__ == "__main__":
    import uvicorn

    from questionnaire_api.core.config.settings import get_settings

    settings = get_settings()
    uvicorn.run(app, host=settings.SERVER_HOST, port=settings.SERVER_PORT)
