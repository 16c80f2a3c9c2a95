"""
SQLAlchemy implementation of the EndpointRepository interface.
"""

from sqlalchemy import select

from questionnaire_api.domain.entities.rbac import Endpoint
from questionnaire_api.domain.repositories.endpoint_repository import EndpointRepository
from questionnaire_api.infrastructure.persistence.sqlalchemy.models.rbac import EndpointModel
from questionnaire_api.infrastructure.persistence.sqlalchemy.repositories.base_repository import (
    BaseSQLAlchemyRepository,
)


def _to_domain(model: EndpointModel) -> Endpoint:
    return Endpoint(
        endpoint_id=model.endpoint_id,
        url=model.url,
        method=model.method,
        description=model.description,
    )


class SQLAlchemyEndpointRepository(BaseSQLAlchemyRepository, EndpointRepository):
    async def list_endpoints(self) -> list[Endpoint]:
        async with self._transaction() as session:
            result = await session.execute(
                select(EndpointModel).order_by(EndpointModel.endpoint_id)
            )
            return [_to_domain(m) for m in result.scalars().all()]

    async def get_by_id(self, endpoint_id: int) -> Endpoint | None:
        async with self._transaction() as session:
            model = await session.get(EndpointModel, endpoint_id)
            return _to_domain(model) if model else None

    async def create(self, url: str, method: str, description: str | None = None) -> Endpoint:
        method = method.upper()
        async with self._transaction(f"Endpoint {method} {url} already exists") as session:
            model = EndpointModel(url=url, method=method, description=description)
            session.add(model)
            await session.flush()
            return _to_domain(model)
