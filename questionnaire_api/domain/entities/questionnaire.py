"""
Questionnaire entities.

Questionnaires, their questions and the options of multiple-choice questions,
together with the per-user response records and answers.
"""

import enum
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class QuestionType(str, enum.Enum):
    """Kinds of question a questionnaire may contain."""

    TEXT = "text"
    MULTIPLE_CHOICE = "multiple_choice"


class Questionnaire(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    questionnaire_id: int | None = None
    title: str = Field(..., max_length=255)
    description: str | None = None
    created_by: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class QuestionOption(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    option_id: int | None = None
    question_id: int | None = None
    option_text: str
    is_correct: bool = False


class Question(BaseModel):
    """A question; ``options`` is only populated for multiple-choice questions."""

    model_config = ConfigDict(from_attributes=True)

    question_id: int | None = None
    questionnaire_id: int
    question_text: str
    question_type: QuestionType = QuestionType.TEXT
    options: list[QuestionOption] = Field(default_factory=list)


class QuestionnaireResponse(BaseModel):
    """One user's response record for one questionnaire."""

    model_config = ConfigDict(from_attributes=True)

    response_id: int
    questionnaire_id: int
    user_id: int
    submitted_at: datetime | None = None


class Answer(BaseModel):
    """A single answer: free text, or the id of a selected option."""

    model_config = ConfigDict(from_attributes=True)

    answer_id: int | None = None
    response_id: int
    question_id: int
    answer_text: str | None = None
    answer_option: int | None = None
