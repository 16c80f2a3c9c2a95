"""
SQLAlchemy database access module.

Engine and session factory construction and schema creation.
"""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from questionnaire_api.infrastructure.persistence.sqlalchemy.registry import get_registered_tables

logger = logging.getLogger(__name__)


def create_engine_and_session_factory(
    database_url: str, echo: bool = False
) -> tuple[AsyncEngine, async_sessionmaker[AsyncSession]]:
    """
    Create the async engine and session factory for ``database_url``.

    In-memory SQLite uses a single shared connection so every session sees
    the same database.
    """
    engine_args: dict[str, Any] = {"echo": echo}

    if database_url.startswith("sqlite"):
        engine_args["connect_args"] = {"check_same_thread": False}
        if ":memory:" in database_url:
            engine_args["poolclass"] = StaticPool
    else:
        engine_args.update(
            {
                "pool_pre_ping": True,
                "pool_size": 5,
                "max_overflow": 10,
                "pool_recycle": 300,
            }
        )

    engine = create_async_engine(database_url, **engine_args)
    session_factory = async_sessionmaker(
        engine,
        expire_on_commit=False,
        autoflush=False,
        class_=AsyncSession,
    )
    return engine, session_factory


async def create_tables(engine: AsyncEngine) -> None:
    """Create every registered table that does not exist yet."""
    # Import for side effect: registers all models on the shared metadata
    from questionnaire_api.infrastructure.persistence.sqlalchemy.models import Base

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"Database tables ready: {', '.join(get_registered_tables())}")
