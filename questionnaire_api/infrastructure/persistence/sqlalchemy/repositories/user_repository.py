"""
User repository implementation using SQLAlchemy.

This module implements the UserRepository interface for persisting and retrieving
User entities using SQLAlchemy ORM.
"""

import logging

from sqlalchemy import select

from questionnaire_api.domain.entities.user import User
from questionnaire_api.domain.repositories.user_repository import UserRepository
from questionnaire_api.infrastructure.persistence.sqlalchemy.models.user import UserModel
from questionnaire_api.infrastructure.persistence.sqlalchemy.repositories.base_repository import (
    BaseSQLAlchemyRepository,
)

logger = logging.getLogger(__name__)


def _to_domain(model: UserModel) -> User:
    return User(
        user_id=model.user_id,
        username=model.username,
        email=model.email,
        password_hash=model.password_hash,
        role_id=model.role_id,
        created_at=model.created_at,
    )


class SQLAlchemyUserRepository(BaseSQLAlchemyRepository, UserRepository):
    """
    SQLAlchemy implementation of the UserRepository interface.

    Bridges between the domain User entity and the UserModel table mapping.
    """

    async def get_by_id(self, user_id: int) -> User | None:
        async with self._transaction() as session:
            model = await session.get(UserModel, user_id)
            return _to_domain(model) if model else None

    async def get_by_username(self, username: str) -> User | None:
        async with self._transaction() as session:
            result = await session.execute(select(UserModel).where(UserModel.username == username))
            model = result.scalar_one_or_none()
            return _to_domain(model) if model else None

    async def create(self, user: User) -> User:
        """
        Create a new user in the database.

        Raises:
            DuplicateEntityError: If the username or email is already taken
        """
        async with self._transaction("Username or email already registered") as session:
            model = UserModel(
                username=user.username,
                email=str(user.email),
                password_hash=user.password_hash,
                role_id=user.role_id,
            )
            session.add(model)
            await session.flush()
            logger.info(f"Created user {model.user_id}")
            return _to_domain(model)
