"""
Base SQLAlchemy repository implementation.

Every repository method runs in its own session and transaction obtained
from the application's session factory. SQLAlchemy errors are translated into
domain repository exceptions so callers never depend on the ORM.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from questionnaire_api.domain.exceptions import (
    DuplicateEntityError,
    RepositoryError,
    StoreUnavailableError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# SQLSTATE for unique_violation on Postgres
PG_UNIQUE_VIOLATION = "23505"


def is_unique_violation(error: IntegrityError) -> bool:
    """Whether ``error`` comes from a UNIQUE or primary key constraint."""
    orig = error.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate is not None:
        return sqlstate == PG_UNIQUE_VIOLATION
    return "UNIQUE constraint failed" in str(orig)


class BaseSQLAlchemyRepository:
    """Shared session handling for the SQLAlchemy repositories."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        """
        Initialize the repository with a SQLAlchemy session factory.

        Args:
            session_factory: The SQLAlchemy async session factory to create sessions.
        """
        self._session_factory = session_factory

    @asynccontextmanager
    async def _transaction(
        self, duplicate_message: str = "Entity already exists"
    ) -> AsyncIterator[AsyncSession]:
        """
        Yield a session inside a transaction that commits on success.

        Raises:
            DuplicateEntityError: On a uniqueness violation
            ValidationError: On any other integrity violation (foreign key, NOT NULL)
            StoreUnavailableError: On connection-level failures
            RepositoryError: On any other database error
        """
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    yield session
        except IntegrityError as e:
            if is_unique_violation(e):
                logger.info(f"Uniqueness violation in {type(self).__name__}: {e.orig}")
                raise DuplicateEntityError(duplicate_message) from e
            logger.warning(f"Integrity error in {type(self).__name__}: {e.orig}")
            raise ValidationError("Data violates an integrity constraint") from e
        except (OperationalError, InterfaceError) as e:
            logger.error(f"Database unavailable in {type(self).__name__}: {e}")
            raise StoreUnavailableError() from e
        except SQLAlchemyError as e:
            logger.error(f"Database error in {type(self).__name__}: {e}")
            raise RepositoryError(f"Database operation failed: {e!s}") from e
