"""Questionnaire API: questionnaires, responses and MBTI assessments behind RBAC."""

__version__ = "1.0.0"
