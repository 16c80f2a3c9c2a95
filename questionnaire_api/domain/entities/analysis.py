"""
Analysis entities.

Tally results for a questionnaire's multiple-choice questions.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class OptionTally(BaseModel):
    option_id: int
    option_text: str
    count: int


class AnalysisResult(BaseModel):
    """A stored analysis run."""

    model_config = ConfigDict(from_attributes=True)

    analysis_id: int
    questionnaire_id: int
    analysis_result: list[OptionTally] = Field(default_factory=list)
    analyzed_at: datetime | None = None
