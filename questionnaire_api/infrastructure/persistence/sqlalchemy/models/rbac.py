"""
SQLAlchemy models for roles, endpoints and role privileges.
"""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text, UniqueConstraint, false

from questionnaire_api.infrastructure.persistence.sqlalchemy.config.base import Base
from questionnaire_api.infrastructure.persistence.sqlalchemy.registry import register_model


@register_model
class RoleModel(Base):
    __tablename__ = "roles"

    role_id = Column(Integer, primary_key=True, autoincrement=True)
    role_name = Column(String(100), unique=True, nullable=False)
    description = Column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<RoleModel(role_id={self.role_id}, role_name={self.role_name!r})>"


@register_model
class EndpointModel(Base):
    """A declared endpoint; declaration order is ascending endpoint_id."""

    __tablename__ = "endpoints"
    __table_args__ = (UniqueConstraint("url", "method", name="uq_endpoints_url_method"),)

    endpoint_id = Column(Integer, primary_key=True, autoincrement=True)
    url = Column(String(255), nullable=False)
    method = Column(String(10), nullable=False)
    description = Column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<EndpointModel(endpoint_id={self.endpoint_id}, {self.method} {self.url})>"


@register_model
class RolePrivilegeModel(Base):
    """Grants of one role on one endpoint; at most one row per pair."""

    __tablename__ = "role_privileges"
    __table_args__ = (
        UniqueConstraint("role_id", "endpoint_id", name="uq_role_privileges_role_endpoint"),
    )

    role_privilege_id = Column(Integer, primary_key=True, autoincrement=True)
    role_id = Column(Integer, ForeignKey("roles.role_id", ondelete="CASCADE"), nullable=False)
    endpoint_id = Column(
        Integer, ForeignKey("endpoints.endpoint_id", ondelete="CASCADE"), nullable=False
    )
    can_create = Column(Boolean, nullable=False, default=False, server_default=false())
    can_read = Column(Boolean, nullable=False, default=False, server_default=false())
    can_update = Column(Boolean, nullable=False, default=False, server_default=false())
    can_delete = Column(Boolean, nullable=False, default=False, server_default=false())
