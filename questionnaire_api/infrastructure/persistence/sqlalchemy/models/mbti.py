"""
SQLAlchemy models for the MBTI assessment.
"""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from questionnaire_api.domain.utils.datetime_utils import now_utc
from questionnaire_api.infrastructure.persistence.sqlalchemy.config.base import Base
from questionnaire_api.infrastructure.persistence.sqlalchemy.registry import register_model


@register_model
class MBTIQuestionModel(Base):
    __tablename__ = "mbti_questions"

    question_id = Column(Integer, primary_key=True, autoincrement=True)
    question_text = Column(Text, nullable=False)
    dimension = Column(String(2), nullable=False)
    direction = Column(String(10), nullable=False)


@register_model
class MBTITypeModel(Base):
    __tablename__ = "mbti_types"

    type_id = Column(Integer, primary_key=True, autoincrement=True)
    type_name = Column(String(4), unique=True, nullable=False)
    description = Column(Text, nullable=False)


@register_model
class UserMBTIModel(Base):
    __tablename__ = "user_mbti"

    user_mbti_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False)
    type_id = Column(Integer, ForeignKey("mbti_types.type_id", ondelete="CASCADE"), nullable=False)
    assigned_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)
