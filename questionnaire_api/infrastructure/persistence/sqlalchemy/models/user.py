"""
SQLAlchemy model for user accounts.
"""

from sqlalchemy import Column, ForeignKey, Integer, String

from questionnaire_api.infrastructure.persistence.sqlalchemy.config.base import (
    Base,
    TimestampMixin,
)
from questionnaire_api.infrastructure.persistence.sqlalchemy.registry import register_model


@register_model
class UserModel(Base, TimestampMixin):
    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role_id = Column(Integer, ForeignKey("roles.role_id", ondelete="SET NULL"), nullable=True)

    def __repr__(self) -> str:
        return f"<UserModel(user_id={self.user_id}, username={self.username!r})>"
