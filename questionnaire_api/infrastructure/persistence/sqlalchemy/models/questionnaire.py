"""
SQLAlchemy models for questionnaires, questions, options, responses and answers.
"""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    false,
)
from sqlalchemy.orm import relationship

from questionnaire_api.domain.utils.datetime_utils import now_utc
from questionnaire_api.infrastructure.persistence.sqlalchemy.config.base import (
    Base,
    TimestampMixin,
)
from questionnaire_api.infrastructure.persistence.sqlalchemy.registry import register_model


@register_model
class QuestionnaireModel(Base, TimestampMixin):
    __tablename__ = "questionnaires"

    questionnaire_id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    created_by = Column(Integer, ForeignKey("users.user_id", ondelete="SET NULL"), nullable=True)


@register_model
class QuestionModel(Base):
    __tablename__ = "questions"

    question_id = Column(Integer, primary_key=True, autoincrement=True)
    questionnaire_id = Column(
        Integer,
        ForeignKey("questionnaires.questionnaire_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    question_text = Column(Text, nullable=False)
    question_type = Column(String(20), nullable=False, default="text")

    options = relationship(
        "QuestionOptionModel",
        order_by="QuestionOptionModel.option_id",
        cascade="all, delete-orphan",
        lazy="selectin",
    )


@register_model
class QuestionOptionModel(Base):
    __tablename__ = "question_options"

    option_id = Column(Integer, primary_key=True, autoincrement=True)
    question_id = Column(
        Integer, ForeignKey("questions.question_id", ondelete="CASCADE"), nullable=False
    )
    option_text = Column(String(255), nullable=False)
    is_correct = Column(Boolean, nullable=False, default=False, server_default=false())


@register_model
class QuestionnaireResponseModel(Base):
    __tablename__ = "questionnaire_responses"
    __table_args__ = (
        UniqueConstraint("questionnaire_id", "user_id", name="uq_responses_questionnaire_user"),
    )

    response_id = Column(Integer, primary_key=True, autoincrement=True)
    questionnaire_id = Column(
        Integer,
        ForeignKey("questionnaires.questionnaire_id", ondelete="CASCADE"),
        nullable=False,
    )
    user_id = Column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False)
    submitted_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)


@register_model
class AnswerModel(Base):
    __tablename__ = "answers"

    answer_id = Column(Integer, primary_key=True, autoincrement=True)
    response_id = Column(
        Integer,
        ForeignKey("questionnaire_responses.response_id", ondelete="CASCADE"),
        nullable=False,
    )
    question_id = Column(
        Integer, ForeignKey("questions.question_id", ondelete="CASCADE"), nullable=False
    )
    answer_text = Column(Text, nullable=True)
    answer_option = Column(
        Integer, ForeignKey("question_options.option_id", ondelete="SET NULL"), nullable=True
    )
