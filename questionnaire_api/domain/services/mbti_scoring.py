"""
MBTI scoring.

Additive scoring over the four dimensions: a positive question adds the
response to its dimension and a negative one subtracts it. A non-negative
total picks the first letter of the dimension.
"""

from collections.abc import Iterable, Mapping

from questionnaire_api.domain.entities.mbti import Dimension, Direction, MBTIAnswer, MBTIQuestion

DIMENSION_ORDER: tuple[Dimension, ...] = (Dimension.EI, Dimension.SN, Dimension.TF, Dimension.JP)


def score_dimensions(
    questions: Mapping[int, MBTIQuestion], answers: Iterable[MBTIAnswer]
) -> dict[Dimension, int]:
    """Sum responses per dimension; answers to unknown questions are ignored."""
    scores = {dimension: 0 for dimension in DIMENSION_ORDER}
    for answer in answers:
        question = questions.get(answer.question_id)
        if question is None:
            continue
        if question.direction is Direction.POSITIVE:
            scores[question.dimension] += answer.response
        else:
            scores[question.dimension] -= answer.response
    return scores


def determine_type(
    questions: Mapping[int, MBTIQuestion], answers: Iterable[MBTIAnswer]
) -> str:
    """Return the four-letter type, e.g. ``"ENTJ"``."""
    scores = score_dimensions(questions, answers)
    letters = []
    for dimension in DIMENSION_ORDER:
        first, second = dimension.value
        letters.append(first if scores[dimension] >= 0 else second)
    return "".join(letters)
