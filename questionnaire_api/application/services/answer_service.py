"""
Answer submission service.
"""

import logging

from questionnaire_api.domain.entities.questionnaire import Answer
from questionnaire_api.domain.exceptions import EntityNotFoundError, ValidationError
from questionnaire_api.domain.repositories.questionnaire_repository import (
    QuestionnaireRepository,
)
from questionnaire_api.domain.repositories.response_repository import ResponseRepository

logger = logging.getLogger(__name__)


class AnswerService:
    def __init__(
        self,
        questionnaire_repository: QuestionnaireRepository,
        response_repository: ResponseRepository,
    ):
        self._questionnaires = questionnaire_repository
        self._responses = response_repository

    async def submit_answer(
        self,
        user_id: int,
        questionnaire_id: int,
        question_id: int,
        answer_text: str | None = None,
        answer_option: int | None = None,
    ) -> Answer:
        """
        Record one answer in the caller's response to a questionnaire.

        Raises:
            ValidationError: If not exactly one of text/option is given, the
                question is not part of the questionnaire, or the option is not
                an option of the question
            EntityNotFoundError: If the questionnaire or question does not exist
        """
        if (answer_text is None) == (answer_option is None):
            raise ValidationError("Provide exactly one of answer_text or answer_option")

        if await self._questionnaires.get_by_id(questionnaire_id) is None:
            raise EntityNotFoundError("Questionnaire", questionnaire_id)

        question = await self._questionnaires.get_question(question_id)
        if question is None:
            raise EntityNotFoundError("Question", question_id)
        if question.questionnaire_id != questionnaire_id:
            raise ValidationError(
                f"Question {question_id} does not belong to questionnaire {questionnaire_id}"
            )
        if answer_option is not None and answer_option not in {
            o.option_id for o in question.options
        }:
            raise ValidationError(
                f"Option {answer_option} is not an option of question {question_id}"
            )

        response = await self._responses.get_or_create_response(questionnaire_id, user_id)
        answer = await self._responses.add_answer(
            Answer(
                response_id=response.response_id,
                question_id=question_id,
                answer_text=answer_text,
                answer_option=answer_option,
            )
        )
        logger.debug(f"Stored answer {answer.answer_id} in response {response.response_id}")
        return answer
