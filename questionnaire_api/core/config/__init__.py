"""
Configuration package.

This package contains application configuration and settings.
"""

from questionnaire_api.core.config.settings import Settings, get_settings, settings

__all__ = ["Settings", "get_settings", "settings"]
