"""
Unit tests for MBTI type scoring.
"""

from questionnaire_api.domain.entities.mbti import Dimension, Direction, MBTIAnswer, MBTIQuestion
from questionnaire_api.domain.services.mbti_scoring import determine_type, score_dimensions

QUESTIONS = {
    1: MBTIQuestion(question_id=1, question_text="Parties", dimension=Dimension.EI, direction=Direction.NEGATIVE),
    2: MBTIQuestion(question_id=2, question_text="Ideas", dimension=Dimension.SN, direction=Direction.POSITIVE),
    3: MBTIQuestion(question_id=3, question_text="Logic", dimension=Dimension.TF, direction=Direction.NEGATIVE),
    4: MBTIQuestion(question_id=4, question_text="Plans", dimension=Dimension.JP, direction=Direction.NEGATIVE),
}


def test_no_answers_yields_first_letters():
    assert determine_type(QUESTIONS, []) == "ESTJ"


def test_direction_controls_sign():
    scores = score_dimensions(
        QUESTIONS,
        [MBTIAnswer(question_id=1, response=3), MBTIAnswer(question_id=2, response=2)],
    )

    assert scores[Dimension.EI] == -3
    assert scores[Dimension.SN] == 2
    assert scores[Dimension.TF] == 0


def test_negative_totals_pick_second_letters():
    answers = [MBTIAnswer(question_id=q, response=4) for q in (1, 3, 4)]

    assert determine_type(QUESTIONS, answers) == "ISFP"


def test_answers_to_unknown_questions_are_ignored():
    answers = [MBTIAnswer(question_id=42, response=-5)]

    assert determine_type(QUESTIONS, answers) == "ESTJ"


def test_responses_accumulate_per_dimension():
    answers = [MBTIAnswer(question_id=1, response=2), MBTIAnswer(question_id=1, response=-5)]

    assert score_dimensions(QUESTIONS, answers)[Dimension.EI] == 3
