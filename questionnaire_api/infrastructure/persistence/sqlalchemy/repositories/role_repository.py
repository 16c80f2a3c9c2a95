"""
SQLAlchemy implementation of the RoleRepository interface.
"""

from sqlalchemy import select

from questionnaire_api.domain.entities.rbac import Role
from questionnaire_api.domain.repositories.role_repository import RoleRepository
from questionnaire_api.infrastructure.persistence.sqlalchemy.models.rbac import RoleModel
from questionnaire_api.infrastructure.persistence.sqlalchemy.repositories.base_repository import (
    BaseSQLAlchemyRepository,
)


def _to_domain(model: RoleModel) -> Role:
    return Role(role_id=model.role_id, role_name=model.role_name, description=model.description)


class SQLAlchemyRoleRepository(BaseSQLAlchemyRepository, RoleRepository):
    async def get_by_id(self, role_id: int) -> Role | None:
        async with self._transaction() as session:
            model = await session.get(RoleModel, role_id)
            return _to_domain(model) if model else None

    async def get_by_name(self, role_name: str) -> Role | None:
        async with self._transaction() as session:
            result = await session.execute(select(RoleModel).where(RoleModel.role_name == role_name))
            model = result.scalar_one_or_none()
            return _to_domain(model) if model else None

    async def list_roles(self) -> list[Role]:
        async with self._transaction() as session:
            result = await session.execute(select(RoleModel).order_by(RoleModel.role_id))
            return [_to_domain(m) for m in result.scalars().all()]

    async def create(self, role_name: str, description: str | None = None) -> Role:
        async with self._transaction(f"Role {role_name!r} already exists") as session:
            model = RoleModel(role_name=role_name, description=description)
            session.add(model)
            await session.flush()
            return _to_domain(model)
