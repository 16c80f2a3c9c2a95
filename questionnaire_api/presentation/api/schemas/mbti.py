"""
Pydantic schemas for the MBTI assessment.
"""

from pydantic import BaseModel, ConfigDict, Field

from questionnaire_api.domain.entities.mbti import Dimension, Direction


class MBTIQuestionSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    question_id: int
    question_text: str
    dimension: Dimension
    direction: Direction


class MBTIAnswerSchema(BaseModel):
    question_id: int
    response: int


class MBTISubmitRequestSchema(BaseModel):
    answers: list[MBTIAnswerSchema] = Field(..., min_length=1)


class MBTIResultSchema(BaseModel):
    type: str
    description: str


class UserTypeResponseSchema(BaseModel):
    type_name: str
    description: str
