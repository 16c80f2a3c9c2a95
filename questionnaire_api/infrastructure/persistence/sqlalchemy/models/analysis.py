"""
SQLAlchemy model for stored analysis results.
"""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer

from questionnaire_api.domain.utils.datetime_utils import now_utc
from questionnaire_api.infrastructure.persistence.sqlalchemy.config.base import Base
from questionnaire_api.infrastructure.persistence.sqlalchemy.registry import register_model


@register_model
class DSSAnalysisModel(Base):
    __tablename__ = "dss_analysis"

    analysis_id = Column(Integer, primary_key=True, autoincrement=True)
    questionnaire_id = Column(
        Integer,
        ForeignKey("questionnaires.questionnaire_id", ondelete="CASCADE"),
        nullable=False,
    )
    # List of {option_id, option_text, count}
    analysis_result = Column(JSON, nullable=False)
    analyzed_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)
