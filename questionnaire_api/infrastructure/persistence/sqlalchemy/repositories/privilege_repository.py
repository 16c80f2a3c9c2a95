"""
SQLAlchemy implementation of the PrivilegeRepository interface.

Upserts are a single ``INSERT ... ON CONFLICT DO UPDATE`` statement so that
concurrent writers for the same (role, endpoint) pair can never create a
second row or leave a partially merged one.
"""

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite

from questionnaire_api.domain.entities.rbac import Privilege
from questionnaire_api.domain.exceptions import ConfigurationError
from questionnaire_api.domain.repositories.privilege_repository import PrivilegeRepository
from questionnaire_api.infrastructure.persistence.sqlalchemy.models.rbac import (
    RolePrivilegeModel,
)
from questionnaire_api.infrastructure.persistence.sqlalchemy.repositories.base_repository import (
    BaseSQLAlchemyRepository,
)

_GRANT_COLUMNS = ("can_create", "can_read", "can_update", "can_delete")

_INSERT_BY_DIALECT = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def _to_domain(model: RolePrivilegeModel) -> Privilege:
    return Privilege(
        role_id=model.role_id,
        endpoint_id=model.endpoint_id,
        can_create=model.can_create,
        can_read=model.can_read,
        can_update=model.can_update,
        can_delete=model.can_delete,
    )


class SQLAlchemyPrivilegeRepository(BaseSQLAlchemyRepository, PrivilegeRepository):
    async def get_privilege(self, role_id: int, endpoint_id: int) -> Privilege | None:
        async with self._transaction() as session:
            result = await session.execute(
                select(RolePrivilegeModel).where(
                    RolePrivilegeModel.role_id == role_id,
                    RolePrivilegeModel.endpoint_id == endpoint_id,
                )
            )
            model = result.scalar_one_or_none()
            return _to_domain(model) if model else None

    async def upsert_privilege(self, privilege: Privilege) -> Privilege:
        values = privilege.model_dump(include={"role_id", "endpoint_id", *_GRANT_COLUMNS})
        async with self._transaction() as session:
            dialect_name = session.bind.dialect.name
            insert = _INSERT_BY_DIALECT.get(dialect_name)
            if insert is None:
                raise ConfigurationError(f"Privilege upsert not supported on {dialect_name}")

            stmt = insert(RolePrivilegeModel).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[RolePrivilegeModel.role_id, RolePrivilegeModel.endpoint_id],
                set_={column: stmt.excluded[column] for column in _GRANT_COLUMNS},
            )
            await session.execute(stmt)
        return privilege

    async def list_privileges(self, role_id: int | None = None) -> list[Privilege]:
        query = select(RolePrivilegeModel).order_by(
            RolePrivilegeModel.role_id, RolePrivilegeModel.endpoint_id
        )
        if role_id is not None:
            query = query.where(RolePrivilegeModel.role_id == role_id)
        async with self._transaction() as session:
            result = await session.execute(query)
            return [_to_domain(m) for m in result.scalars().all()]
