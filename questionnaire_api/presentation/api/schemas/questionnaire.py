"""
Pydantic schemas for questionnaires, questions, answers and analysis.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from questionnaire_api.domain.entities.questionnaire import QuestionType


class QuestionnaireCreateSchema(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None


class QuestionnaireResponseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    questionnaire_id: int
    title: str
    description: str | None = None
    created_by: int | None = None
    created_at: datetime | None = None


class OptionCreateSchema(BaseModel):
    text: str = Field(..., min_length=1, max_length=255)
    is_correct: bool = False


class OptionResponseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    option_id: int
    option_text: str
    is_correct: bool


class QuestionCreateSchema(BaseModel):
    questionnaire_id: int
    question_text: str = Field(..., min_length=1)
    question_type: QuestionType = QuestionType.TEXT
    options: list[OptionCreateSchema] = Field(default_factory=list)


class QuestionResponseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    question_id: int
    questionnaire_id: int
    question_text: str
    question_type: QuestionType
    options: list[OptionResponseSchema] = Field(default_factory=list)


class AnswerCreateSchema(BaseModel):
    """Exactly one of answer_text and answer_option must be provided."""

    questionnaire_id: int
    question_id: int
    answer_text: str | None = None
    answer_option: int | None = None


class AnswerResponseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    answer_id: int
    response_id: int
    question_id: int
    answer_text: str | None = None
    answer_option: int | None = None


class AnalysisRequestSchema(BaseModel):
    questionnaire_id: int


class OptionTallySchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    option_id: int
    option_text: str
    count: int


class AnalysisResponseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    analysis_id: int
    questionnaire_id: int
    analysis_result: list[OptionTallySchema]
    analyzed_at: datetime | None = None
