"""
MBTI assessment entities.
"""

import enum
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Dimension(str, enum.Enum):
    """The four MBTI axes; the first letter wins on a non-negative score."""

    EI = "EI"
    SN = "SN"
    TF = "TF"
    JP = "JP"


class Direction(str, enum.Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"


class MBTIQuestion(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    question_id: int | None = None
    question_text: str
    dimension: Dimension
    direction: Direction


class MBTIType(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    type_id: int | None = None
    type_name: str = Field(..., min_length=4, max_length=4)
    description: str


class MBTIAnswer(BaseModel):
    question_id: int
    response: int


class UserMBTI(BaseModel):
    """An MBTI type assigned to a user."""

    model_config = ConfigDict(from_attributes=True)

    user_id: int
    type_name: str
    description: str
    assigned_at: datetime | None = None
