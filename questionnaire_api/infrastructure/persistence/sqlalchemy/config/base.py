"""
SQLAlchemy base configuration.

This module provides the declarative base for SQLAlchemy models
and other shared SQLAlchemy-related functionality.
"""

from sqlalchemy import Column, DateTime
from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlalchemy.orm import DeclarativeBase

from questionnaire_api.domain.utils.datetime_utils import now_utc
from questionnaire_api.infrastructure.persistence.sqlalchemy.registry import metadata


class Base(DeclarativeBase, AsyncAttrs):
    """
    SQLAlchemy 2.0 declarative base with async support.

    Combines DeclarativeBase for proper typing with AsyncAttrs for async support.
    """

    metadata = metadata


class TimestampMixin:
    """
    Mixin to add created_at and updated_at timestamps to models.

    Timestamps are set client-side so they are available right after a flush
    without another round trip.
    """

    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc, nullable=False)
